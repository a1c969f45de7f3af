"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from cropframe.config import Settings
from cropframe.core import GeometricState
from cropframe.editor import CropEditor
from cropframe.geometry import Rect, Size
from cropframe.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def native() -> Size:
    """Native size of the reference 1000x800 image."""
    return Size(width=1000, height=800)


@pytest.fixture
def area() -> Size:
    """The reference 928x528 editing area."""
    return Size(width=928, height=528)


@pytest.fixture
def unit_zoom_state() -> GeometricState:
    """A 296x296 crop over a 1000x800 image at zoom 1."""
    return GeometricState(
        crop=Rect(x=300, y=100, width=296, height=296),
        image=Rect(x=0, y=0, width=1000, height=800),
        zoom=1.0,
    )


@pytest.fixture
def editor(test_settings: Settings, native: Size, area: Size) -> CropEditor:
    """An editor with the reference image loaded."""
    crop_editor = CropEditor(settings=test_settings, session_key="test-session")
    crop_editor.load_image(native, area)
    return crop_editor
