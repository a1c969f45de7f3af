"""Wheel-gesture resolution.

``zoom' = zoom - delta / sensitivity``: a negative wheel delta zooms in,
a positive one zooms out.

Zooming in rescales the frame around the crop window's center and is
always accepted, since a growing frame keeps covering the window.

Zooming out is clamped so neither frame dimension drops below the crop
window's, rescaled around the crop center, then anchored to the nearest
quadrant so the crop window does not poke past the frame. If the frame is
still smaller than the window the whole step is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

from cropframe.core.state import GeometricState
from cropframe.geometry import Size, anchor_to_corner, anchored_zoom, nearest_quadrant
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ZOOM_SENSITIVITY = 5000.0

# Slack for the hard floor; clamped zooms are computed by division.
_SIZE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ZoomEngine:
    """Resolves wheel deltas into zoom transitions.

    Attributes:
        sensitivity: Wheel delta per unit of zoom.
    """

    sensitivity: float = DEFAULT_ZOOM_SENSITIVITY

    def __post_init__(self) -> None:
        if self.sensitivity <= 0:
            raise ValueError(f"sensitivity must be positive, got {self.sensitivity}")

    def target_zoom(self, zoom: float, delta: float) -> float:
        """Return the unclamped zoom a wheel ``delta`` asks for."""
        return zoom - delta / self.sensitivity

    def apply(
        self,
        state: GeometricState,
        native: Size,
        delta: float,
    ) -> GeometricState | None:
        """Resolve one wheel step.

        Args:
            state: Current committed state.
            native: Native image dimensions.
            delta: Signed wheel delta (positive zooms out).

        Returns:
            The next state, or None when the step is a no-op or aborted.
        """
        if delta == 0:
            return None
        zoom = self.target_zoom(state.zoom, delta)
        if delta < 0:
            return self._zoom_in(state, native, zoom)
        return self._zoom_out(state, native, zoom)

    def _zoom_in(
        self,
        state: GeometricState,
        native: Size,
        zoom: float,
    ) -> GeometricState:
        image = anchored_zoom(state.image, native, state.zoom, zoom, state.crop)
        return state.model_copy(update={"image": image, "zoom": zoom})

    def _zoom_out(
        self,
        state: GeometricState,
        native: Size,
        zoom: float,
    ) -> GeometricState | None:
        crop = state.crop

        # Clamp upward per axis; the height check runs on the width-clamped
        # zoom, so the larger requirement wins.
        if native.width * zoom < crop.width:
            zoom = crop.width / native.width
        if native.height * zoom < crop.height:
            zoom = crop.height / native.height
        if zoom >= state.zoom:
            logger.debug("Zoom out at floor", zoom=state.zoom)
            return None

        image = anchored_zoom(state.image, native, state.zoom, zoom, crop)
        image = anchor_to_corner(image, crop, nearest_quadrant(image, crop))

        if (
            image.width + _SIZE_TOLERANCE < crop.width
            or image.height + _SIZE_TOLERANCE < crop.height
        ):
            logger.debug(
                "Zoom out aborted, image smaller than crop",
                zoom=zoom,
                image=image.to_tuple(),
            )
            return None

        return state.model_copy(update={"image": image, "zoom": zoom})
