"""Geometry module for cropframe.

This package provides the value types and pure geometric helpers used by
the gesture solvers.

Key Components:
    - Primitives: Point, Size, Rect models in area-local coordinates
    - Transforms: anchor-preserving zoom and vector rotation
    - Quadrants: corner selection and re-anchoring against the crop window

Example:
    from cropframe.geometry import Rect, Size, anchored_zoom

    crop = Rect(x=100, y=0, width=296, height=296)
    image = Rect(x=0, y=0, width=1000, height=800)
    zoomed = anchored_zoom(image, Size(width=1000, height=800), 1.0, 1.1, crop)
"""

from cropframe.geometry.primitives import Point, Rect, Size
from cropframe.geometry.quadrants import CornerKind, anchor_to_corner, nearest_quadrant
from cropframe.geometry.transforms import anchored_zoom, frame_size, rotate_vector

__all__ = [
    "CornerKind",
    "Point",
    "Rect",
    "Size",
    "anchor_to_corner",
    "anchored_zoom",
    "frame_size",
    "nearest_quadrant",
    "rotate_vector",
]
