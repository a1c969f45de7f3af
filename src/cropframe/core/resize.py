"""Corner-handle resolution for the crop window.

A corner drag is solved in three steps:

1. Candidate crop: the dragged corner moves one horizontal and one vertical
   edge to the cursor. Each axis is validated on its own; an axis that would
   shrink below the minimum size, or whose trailing edge would leave the
   editing area, keeps its previous position and size.
2. Coverage: for every axis that changed, either the candidate still fits
   inside the image frame, or the frame is re-zoomed to the smallest zoom
   that covers the candidate, with the grown axis flush to the window and
   the cross axis re-centred. A candidate that fits but crosses a frame
   edge drags the frame along: the frame moves by the crop's position
   delta (leading edge) or size delta (trailing edge), so any gap between
   the opposite edges is kept. Afterwards the frame is anchored to its
   nearest quadrant so no crop edge pokes past it.
3. Degenerate results (frame smaller than the candidate) are rejected as a
   whole and the previous state stays.

All four corners share one solver; ``_CORNER_EDGES`` records which edge of
each axis a corner moves.
"""

from __future__ import annotations

from enum import Enum

from cropframe.core.limits import CropLimits
from cropframe.core.state import GeometricState
from cropframe.geometry import (
    CornerKind,
    Point,
    Rect,
    Size,
    anchor_to_corner,
    frame_size,
    nearest_quadrant,
)
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)

# Rounding applied before comparing frame sizes, in decimal places.
_SIZE_PRECISION = 3

# Slack for the final size check; covering zooms are computed by division.
_SIZE_TOLERANCE = 1e-9


class Edge(Enum):
    """Which edge of an axis a corner drag moves."""

    LEADING = "leading"  # left / top: position and size change together
    TRAILING = "trailing"  # right / bottom: only size changes


_CORNER_EDGES: dict[CornerKind, tuple[Edge, Edge]] = {
    CornerKind.TOP_LEFT: (Edge.LEADING, Edge.LEADING),
    CornerKind.TOP_RIGHT: (Edge.TRAILING, Edge.LEADING),
    CornerKind.BOTTOM_LEFT: (Edge.LEADING, Edge.TRAILING),
    CornerKind.BOTTOM_RIGHT: (Edge.TRAILING, Edge.TRAILING),
}


def move_edge(
    start: float,
    size: float,
    raw: float,
    extent: float,
    min_size: float,
    edge: Edge,
) -> tuple[float, float]:
    """Move one edge of a crop axis to ``raw`` and validate the result.

    Args:
        start: Current crop start on the axis.
        size: Current crop size on the axis.
        raw: Cursor coordinate on the axis.
        extent: Editing area size on the axis.
        min_size: Minimum crop size on the axis.
        edge: The edge being dragged.

    Returns:
        The new (start, size), or the current pair when the move is rejected.
    """
    if edge is Edge.LEADING:
        next_start = max(raw, 0.0)
        next_size = size - (next_start - start)
        if next_size < min_size:
            logger.debug(
                "Crop edge move rejected", edge=edge.value, raw=raw, size=next_size
            )
            return start, size
        return next_start, next_size

    next_size = raw - start
    if next_size < min_size or start + next_size > extent:
        logger.debug(
            "Crop edge move rejected", edge=edge.value, raw=raw, size=next_size
        )
        return start, size
    return start, next_size


def candidate_crop(
    crop: Rect,
    corner: CornerKind,
    cursor: Point,
    area: Size,
    limits: CropLimits,
) -> Rect:
    """Compute the crop window a corner drag asks for (step 1)."""
    x_edge, y_edge = _CORNER_EDGES[corner]
    x, width = move_edge(
        crop.x, crop.width, cursor.x, area.width, limits.min_width, x_edge
    )
    y, height = move_edge(
        crop.y, crop.height, cursor.y, area.height, limits.min_height, y_edge
    )
    return Rect(x=x, y=y, width=width, height=height)


def normalized_frame_size(
    native: Size,
    zoom: float,
    default_zoom: float,
    area: Size,
) -> tuple[float, float]:
    """Return the frame size normalized against the default fit.

    The fit ratio is the zoom that fits the image height to the area; the
    result equals the on-screen frame size while the area keeps the size
    the default state was computed for.
    """
    fit_zoom = area.height / native.height
    factor = default_zoom * (zoom / fit_zoom)
    return (
        round(native.width * factor, _SIZE_PRECISION),
        round(native.height * factor, _SIZE_PRECISION),
    )


def _rezoom(
    image: Rect,
    native: Size,
    zoom: float,
    next_crop: Rect,
    *,
    horizontal: bool,
) -> Rect:
    width, height = frame_size(native, zoom)
    if horizontal:
        x = next_crop.x
        y = image.y - (height - image.height) / 2
    else:
        x = image.x - (width - image.width) / 2
        y = next_crop.y
    return Rect(x=x, y=y, width=width, height=height)


def _slide(image: Rect, crop: Rect, next_crop: Rect, *, horizontal: bool) -> Rect:
    if horizontal:
        start, end = image.x, image.right
        crop_start, crop_size = crop.x, crop.width
        next_start, next_size = next_crop.x, next_crop.width
    else:
        start, end = image.y, image.bottom
        crop_start, crop_size = crop.y, crop.height
        next_start, next_size = next_crop.y, next_crop.height

    if next_start < start:
        shift = next_start - crop_start
    elif next_start + next_size > end:
        shift = next_size - crop_size
    else:
        return image
    logger.debug("Resize slid image", shift=shift, axis="x" if horizontal else "y")
    if horizontal:
        return image.translated(shift, 0.0)
    return image.translated(0.0, shift)


def resize_crop(
    state: GeometricState,
    native: Size,
    corner: CornerKind,
    cursor: Point,
    area: Size,
    *,
    default_zoom: float,
    limits: CropLimits | None = None,
) -> GeometricState | None:
    """Resolve one corner-handle drag step.

    Args:
        state: Current committed state.
        native: Native image dimensions.
        corner: The corner being dragged.
        cursor: Cursor position in area-local coordinates.
        area: Editing area size.
        default_zoom: Zoom of the default state for this image.
        limits: Minimum crop size. Defaults to 50x50.

    Returns:
        The next state, or None when the step changes nothing or is rejected.
    """
    limits = limits or CropLimits()
    crop = state.crop
    next_crop = candidate_crop(crop, corner, cursor, area, limits)
    if next_crop == crop:
        return None

    image = state.image
    zoom = state.zoom
    rect_width, rect_height = normalized_frame_size(native, zoom, default_zoom, area)

    axes = (
        (True, crop.x - next_crop.x or crop.width - next_crop.width),
        (False, crop.y - next_crop.y or crop.height - next_crop.height),
    )
    for horizontal, diff in axes:
        if not diff:
            continue
        if horizontal:
            span, crop_span, rect_span = image.width, next_crop.width, rect_width
        else:
            span, crop_span, rect_span = image.height, next_crop.height, rect_height
        span = round(span, _SIZE_PRECISION)

        if crop_span <= span and span >= rect_span:
            image = _slide(image, crop, next_crop, horizontal=horizontal)
            continue

        covering = max(
            next_crop.width / native.width, next_crop.height / native.height
        )
        if covering <= zoom:
            continue
        image = _rezoom(image, native, covering, next_crop, horizontal=horizontal)
        zoom = covering
        logger.debug(
            "Resize re-zoomed image", zoom=zoom, axis="x" if horizontal else "y"
        )

    # Guard: a slide or re-zoom can still leave the opposite edge poking out.
    image = anchor_to_corner(image, next_crop, nearest_quadrant(image, next_crop))

    if (
        image.width + _SIZE_TOLERANCE < next_crop.width
        or image.height + _SIZE_TOLERANCE < next_crop.height
    ):
        logger.debug("Resize rejected, image smaller than crop", zoom=zoom)
        return None

    return state.model_copy(update={"crop": next_crop, "image": image, "zoom": zoom})
