"""Default layout for a freshly loaded image.

The default fits the image's height to the editing area, centers it, and
lines the crop window up with the image's left edge. It is computed once
per image load and kept unmodified for reset.
"""

from __future__ import annotations

from cropframe.core.state import GeometricState
from cropframe.geometry import Rect, Size, frame_size
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)


def compute_default_state(
    native: Size | None,
    area: Size,
    template: GeometricState | None = None,
) -> GeometricState:
    """Compute the fit-to-area default state for an image.

    Steps:
        1. ``zoom = area.height / native.height``.
        2. Center the scaled image inside the area on both axes.
        3. Place the crop window at the image's x offset with the scaled
           image's width, keeping the template's y and height.
        4. Clamp the crop window into the area and onto the image.

    Args:
        native: Native image dimensions, or None when no image is loaded.
        area: Size of the editing area.
        template: State providing the crop's y and height. Defaults to
            ``GeometricState.template()``.

    Returns:
        The default state (``changed`` is False). Without an image the
        template is returned unmodified.
    """
    template = template or GeometricState.template()
    if native is None:
        return template

    zoom = area.height / native.height
    width, height = frame_size(native, zoom)
    image = Rect(
        x=area.width / 2 - width / 2,
        y=area.height / 2 - height / 2,
        width=width,
        height=height,
    )

    # Wide images overflow the area; the crop must stay inside both.
    crop_x = max(image.x, 0.0)
    crop_width = min(image.right, area.width) - crop_x
    crop_height = min(template.crop.height, area.height, image.height)
    crop_y = min(max(template.crop.y, image.y, 0.0), image.bottom - crop_height)
    crop = Rect(x=crop_x, y=crop_y, width=crop_width, height=crop_height)

    logger.debug(
        "Computed default layout",
        native=native.to_tuple(),
        area=area.to_tuple(),
        zoom=zoom,
    )
    return GeometricState(crop=crop, image=image, zoom=zoom, angle=0.0, changed=False)
