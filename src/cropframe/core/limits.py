"""Size limits applied to the crop window."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MIN_CROP_SIZE = 50.0


@dataclass(frozen=True)
class CropLimits:
    """Minimum crop window dimensions.

    Attributes:
        min_width: Smallest allowed crop width.
        min_height: Smallest allowed crop height.
    """

    min_width: float = DEFAULT_MIN_CROP_SIZE
    min_height: float = DEFAULT_MIN_CROP_SIZE

    def __post_init__(self) -> None:
        if self.min_width <= 0 or self.min_height <= 0:
            raise ValueError(
                f"Crop limits must be positive, got {self.min_width}x{self.min_height}"
            )
