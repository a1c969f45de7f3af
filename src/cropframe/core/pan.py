"""Image-drag resolution.

Panning moves the image frame under a fixed crop window. Each axis is
accepted or dropped on its own: a step that would uncover the crop window
on one axis is dropped for that axis while the other axis may still move.
"""

from __future__ import annotations

from dataclasses import dataclass

from cropframe.core.state import DragSession, GeometricState
from cropframe.geometry import Point, Rect, rotate_vector
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PanResult:
    """Outcome of one pan step.

    Attributes:
        session: The drag session with its anchor moved to the cursor.
            Always advanced, whether or not the step was accepted.
        image: The new image frame, or None when both axes were dropped.
    """

    session: DragSession
    image: Rect | None


def _accept_axis(
    next_start: float, size: float, crop_start: float, crop_size: float
) -> bool:
    # Trailing comparison is strict: a frame exactly as wide as the crop
    # window cannot pan on that axis.
    return next_start <= crop_start and next_start + size > crop_start + crop_size


def pan_image(
    state: GeometricState,
    session: DragSession,
    cursor: Point,
    *,
    rotate_with_angle: bool = False,
) -> PanResult:
    """Resolve one image-drag step.

    Args:
        state: Current committed state.
        session: Active image-pan session; its anchor is the previous cursor.
        cursor: New cursor position in area-local coordinates.
        rotate_with_angle: Rotate the pointer delta by ``-state.angle`` so
            panning follows the viewer's orientation on a rotated image.

    Returns:
        PanResult with the advanced session and the accepted frame, if any.
    """
    dx, dy = session.anchor.delta_to(cursor)
    if rotate_with_angle and state.angle % 360:
        dx, dy = rotate_vector(dx, dy, -state.angle)

    image = state.image
    crop = state.crop
    next_x = image.x + dx
    next_y = image.y + dy

    accept_x = dx != 0 and _accept_axis(next_x, image.width, crop.x, crop.width)
    accept_y = dy != 0 and _accept_axis(next_y, image.height, crop.y, crop.height)

    advanced = session.advanced_to(cursor)
    if not accept_x and not accept_y:
        logger.debug("Pan step dropped", dx=dx, dy=dy)
        return PanResult(session=advanced, image=None)

    if dx and not accept_x:
        logger.debug("Pan axis dropped", axis="x", dx=dx)
    if dy and not accept_y:
        logger.debug("Pan axis dropped", axis="y", dy=dy)
    moved = image.moved_to(
        next_x if accept_x else image.x,
        next_y if accept_y else image.y,
    )
    return PanResult(session=advanced, image=moved)
