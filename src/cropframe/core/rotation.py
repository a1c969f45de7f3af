"""Rotation of the displayed image.

Rotation only changes the angle; the image frame stays where it is and
the rendering collaborator rotates its drawing transform instead.
"""

from __future__ import annotations

from cropframe.core.store import StateStore
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ROTATION_STEP = 90.0


class RotationController:
    """Tracks the rotation angle held by a StateStore."""

    def __init__(self, store: StateStore, step: float = DEFAULT_ROTATION_STEP) -> None:
        self._store = store
        self._step = step

    @property
    def angle(self) -> float:
        return self._store.state.angle

    def rotate(self, angle: float) -> bool:
        """Set the angle directly.

        Returns:
            False when no image is loaded (the call is a no-op).
        """
        if not self._store.has_image:
            logger.debug("Rotate ignored, no image loaded", angle=angle)
            return False
        self._store.apply_patch(angle=angle)
        return True

    def rotate_by(self, delta: float) -> bool:
        return self.rotate(self.angle + delta)

    def rotate_left(self) -> bool:
        """Advance the angle by one step, wrapping modulo 360."""
        return self.rotate((self.angle + self._step) % 360)
