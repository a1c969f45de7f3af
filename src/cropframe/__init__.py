"""cropframe: geometric constraint engine for interactive image cropping."""

__version__ = "0.1.0"
