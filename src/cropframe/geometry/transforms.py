"""Coordinate transformation utilities for cropframe.

Zoom Convention:
    A zoom factor is the ratio of on-screen image size to native image pixel
    size, so an image frame at zoom ``z`` is ``native * z`` wide and tall.

Anchor-preserving zoom:
    ``anchored_zoom`` keeps the image pixel under the crop window's center
    visually fixed while the frame grows or shrinks around it.
"""

from __future__ import annotations

import math

from cropframe.geometry.primitives import Rect, Size

__all__ = [
    "anchored_zoom",
    "frame_size",
    "rotate_vector",
]


def frame_size(native: Size, zoom: float) -> tuple[float, float]:
    """Return the on-screen (width, height) of an image at ``zoom``.

    Raises:
        ValueError: If zoom is not positive.
    """
    if zoom <= 0:
        raise ValueError(f"zoom must be positive, got {zoom}")
    return (native.width * zoom, native.height * zoom)


def anchored_zoom(
    image: Rect,
    native: Size,
    prev_zoom: float,
    zoom: float,
    crop: Rect,
) -> Rect:
    """Rescale an image frame around the crop window's center.

    The anchor is expressed as a fraction of the previous frame
    (``xPct``, ``yPct``) and the frame origin is pulled back by that
    fraction of the size change, so the anchored pixel stays put.

    Args:
        image: Image frame at ``prev_zoom``; only its origin is used.
        native: Native image dimensions.
        prev_zoom: Zoom factor the frame was laid out at.
        zoom: Target zoom factor.
        crop: Crop window whose center is the anchor.

    Returns:
        Image frame at ``zoom`` with the anchor preserved.

    Raises:
        ValueError: If either zoom factor is not positive.
    """
    prev_width, prev_height = frame_size(native, prev_zoom)
    width, height = frame_size(native, zoom)

    anchor = crop.center
    x_pct = (anchor.x - image.x) / prev_width
    y_pct = (anchor.y - image.y) / prev_height

    return Rect(
        x=image.x - (width - prev_width) * x_pct,
        y=image.y - (height - prev_height) * y_pct,
        width=width,
        height=height,
    )


def rotate_vector(dx: float, dy: float, degrees: float) -> tuple[float, float]:
    """Rotate the vector (dx, dy) by ``degrees`` (screen orientation).

    Example:
        >>> x, y = rotate_vector(1.0, 0.0, 90.0)
        >>> round(x, 6), round(y, 6)
        (0.0, 1.0)
    """
    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return (dx * cos_a - dy * sin_a, dx * sin_a + dy * cos_a)
