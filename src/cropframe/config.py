"""cropframe configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from cropframe.core.limits import CropLimits


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid.

    This exception provides clear, actionable error messages when
    configuration values required by a specific operation are not set.

    Example:
        >>> Settings(_env_file=None).require_state_dir()  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ConfigError: State directory not configured. Set it in .env file or
        STATE_DIR environment variable.
    """

    def __init__(self, key_name: str, env_var: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Human-readable name of the missing key.
            env_var: Environment variable name to set.
        """
        self.key_name = key_name
        self.env_var = env_var
        message = (
            f"{key_name} not configured. "
            f"Set it in .env file or {env_var} environment variable."
        )
        super().__init__(message)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Crop window
    MIN_CROP_WIDTH: float = 50.0
    MIN_CROP_HEIGHT: float = 50.0
    DEFAULT_CROP_WIDTH: float = 296.0  # Template crop before an image loads
    DEFAULT_CROP_HEIGHT: float = 296.0

    # Gestures
    ZOOM_SENSITIVITY: float = 5000.0  # Wheel delta per unit of zoom
    ROTATION_STEP: float = 90.0  # Degrees per rotate-left
    ROTATE_PAN_WITH_ANGLE: bool = False  # Rotate pan deltas by -angle

    # Persistence
    STATE_DIR: Path | None = None

    @model_validator(mode="after")
    def _validate_geometry(self) -> Self:
        if self.MIN_CROP_WIDTH <= 0 or self.MIN_CROP_HEIGHT <= 0:
            raise ValueError("MIN_CROP_WIDTH and MIN_CROP_HEIGHT must be positive")
        if (
            self.DEFAULT_CROP_WIDTH < self.MIN_CROP_WIDTH
            or self.DEFAULT_CROP_HEIGHT < self.MIN_CROP_HEIGHT
        ):
            raise ValueError("Default crop must not be smaller than the minimum crop")
        if self.ZOOM_SENSITIVITY <= 0:
            raise ValueError("ZOOM_SENSITIVITY must be positive")
        return self

    def crop_limits(self) -> CropLimits:
        """Return the minimum crop window size as a CropLimits value."""
        from cropframe.core.limits import CropLimits  # noqa: PLC0415

        return CropLimits(
            min_width=self.MIN_CROP_WIDTH, min_height=self.MIN_CROP_HEIGHT
        )

    def require_state_dir(self) -> Path:
        """Get the saved-state directory, raising ConfigError if not set.

        Returns:
            The configured state directory.

        Raises:
            ConfigError: If STATE_DIR is not configured.
        """
        if self.STATE_DIR is None:
            raise ConfigError("State directory", "STATE_DIR")
        return self.STATE_DIR


# Singleton instance for import convenience
settings = Settings()
