"""CLI module for cropframe.

Provides the command-line interface for computing default layouts and
replaying gesture scripts.
"""

from __future__ import annotations

from cropframe.cli.main import app

__all__ = ["app"]
