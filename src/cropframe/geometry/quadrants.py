"""Corner and quadrant helpers shared by the resize and zoom solvers.

A ``CornerKind`` names one corner of a rectangle. Each corner decides, per
axis, whether the leading (left/top) or trailing (right/bottom) edge is the
one that moves or stays anchored.
"""

from __future__ import annotations

from enum import Enum

from cropframe.geometry.primitives import Rect


class CornerKind(str, Enum):
    """Corner of a rectangle."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def is_left(self) -> bool:
        """True when the corner sits on the leading horizontal edge."""
        return self in (CornerKind.TOP_LEFT, CornerKind.BOTTOM_LEFT)

    @property
    def is_top(self) -> bool:
        """True when the corner sits on the leading vertical edge."""
        return self in (CornerKind.TOP_LEFT, CornerKind.TOP_RIGHT)

    @classmethod
    def from_sides(cls, *, left: bool, top: bool) -> CornerKind:
        """Build a corner from its horizontal and vertical sides."""
        if top:
            return cls.TOP_LEFT if left else cls.TOP_RIGHT
        return cls.BOTTOM_LEFT if left else cls.BOTTOM_RIGHT


def nearest_quadrant(image: Rect, crop: Rect) -> CornerKind:
    """Pick the image corner whose edges sit closest to the crop window.

    Distances are absolute gaps between matching edges (image left vs crop
    left, and so on). Ties favour the top and left edges.

    Args:
        image: The image frame.
        crop: The crop window.

    Returns:
        The corner to keep anchored against the crop window.
    """
    left_gap = abs(crop.x - image.x)
    right_gap = abs(image.right - crop.right)
    top_gap = abs(crop.y - image.y)
    bottom_gap = abs(image.bottom - crop.bottom)
    return CornerKind.from_sides(left=left_gap <= right_gap, top=top_gap <= bottom_gap)


def _anchor_axis(
    start: float,
    size: float,
    crop_start: float,
    crop_size: float,
    *,
    leading: bool,
) -> float:
    crop_end = crop_start + crop_size
    if leading:
        if crop_start < start:
            return crop_start
        if crop_end > start + size:
            return crop_end - size
        return start
    if crop_end > start + size:
        return crop_end - size
    if crop_start < start:
        return crop_start
    return start


def anchor_to_corner(image: Rect, crop: Rect, corner: CornerKind) -> Rect:
    """Translate an image frame so the crop window no longer pokes out.

    The edges named by ``corner`` are made flush first wherever the crop
    window extends past them; the opposite edges are handled afterwards.
    An edge the crop window does not cross is left where it is, so a frame
    that already covers the crop window is returned unchanged.

    When the frame is smaller than the crop window on an axis, the
    corner's edge ends up flush and the opposite edge stays uncovered;
    callers reject that result.

    Args:
        image: The image frame to translate (size is kept).
        crop: The crop window that must be covered.
        corner: Which corner of the frame to anchor.

    Returns:
        The translated image frame.
    """
    x = _anchor_axis(image.x, image.width, crop.x, crop.width, leading=corner.is_left)
    y = _anchor_axis(image.y, image.height, crop.y, crop.height, leading=corner.is_top)
    if x == image.x and y == image.y:
        return image
    return image.moved_to(x, y)
