"""Unit tests for geometry transforms.

Tests the anchor-preserving zoom primitive and vector rotation.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cropframe.geometry import Rect, Size, anchored_zoom, frame_size, rotate_vector

NATIVE = Size(width=1000, height=800)
CROP = Rect(x=300, y=100, width=296, height=296)


def _image_point_under(image: Rect, zoom: float, crop: Rect) -> tuple[float, float]:
    """Native-pixel coordinate currently shown at the crop center."""
    center = crop.center
    return ((center.x - image.x) / zoom, (center.y - image.y) / zoom)


class TestFrameSize:
    def test_frame_size_scales_native(self) -> None:
        assert frame_size(NATIVE, 0.5) == (500, 400)

    def test_frame_size_rejects_zero_zoom(self) -> None:
        with pytest.raises(ValueError, match="zoom must be positive"):
            frame_size(NATIVE, 0)


class TestAnchoredZoom:
    """Tests for anchored_zoom."""

    def test_zoom_in_grows_frame(self) -> None:
        image = Rect(x=0, y=0, width=1000, height=800)
        result = anchored_zoom(image, NATIVE, 1.0, 1.1, CROP)
        assert result.width == pytest.approx(1100)
        assert result.height == pytest.approx(880)

    def test_zoom_keeps_anchor_fixed(self) -> None:
        image = Rect(x=0, y=0, width=1000, height=800)
        result = anchored_zoom(image, NATIVE, 1.0, 1.1, CROP)

        # crop center (448, 248) was image pixel (448, 248); still is.
        px, py = _image_point_under(result, 1.1, CROP)
        assert px == pytest.approx(448)
        assert py == pytest.approx(248)

    def test_zoom_in_keeps_coverage(self) -> None:
        image = Rect(x=0, y=0, width=1000, height=800)
        assert anchored_zoom(image, NATIVE, 1.0, 1.1, CROP).covers(CROP)

    def test_same_zoom_is_identity(self) -> None:
        image = Rect(x=-20, y=-10, width=1000, height=800)
        assert anchored_zoom(image, NATIVE, 1.0, 1.0, CROP) == image

    @given(
        zoom_in=st.floats(min_value=1.0, max_value=4.0),
        x=st.floats(min_value=-700, max_value=300),
        y=st.floats(min_value=-500, max_value=100),
    )
    @settings(max_examples=100, deadline=None)
    def test_zoom_in_then_out_restores_position(
        self, zoom_in: float, x: float, y: float
    ) -> None:
        """Test round-tripping the zoom returns the frame to where it was."""
        image = Rect(x=x, y=y, width=1000, height=800)
        zoomed = anchored_zoom(image, NATIVE, 1.0, zoom_in, CROP)
        restored = anchored_zoom(zoomed, NATIVE, zoom_in, 1.0, CROP)
        assert restored.x == pytest.approx(image.x, abs=1e-6)
        assert restored.y == pytest.approx(image.y, abs=1e-6)
        assert restored.width == pytest.approx(1000)


class TestRotateVector:
    def test_quarter_turn(self) -> None:
        x, y = rotate_vector(1.0, 0.0, 90.0)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.0)

    def test_inverse_rotation_restores_vector(self) -> None:
        x, y = rotate_vector(*rotate_vector(3.0, 4.0, 37.0), -37.0)
        assert x == pytest.approx(3.0)
        assert y == pytest.approx(4.0)

    def test_rotation_preserves_length(self) -> None:
        x, y = rotate_vector(3.0, 4.0, 123.0)
        assert math.hypot(x, y) == pytest.approx(5.0)
