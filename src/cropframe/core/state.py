"""Geometric state models for the crop editor.

``GeometricState`` is the full snapshot committed by the state store after
every accepted gesture. Snapshots are frozen; every transition builds a new
one with ``model_copy(update=...)``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from cropframe.geometry import CornerKind, Point, Rect

DEFAULT_CROP_SIZE = 296.0


class HandleKind(str, Enum):
    """What a drag gesture grabbed: one of the four crop corners or the image."""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    IMAGE = "image"

    @property
    def corner(self) -> CornerKind | None:
        """Return the crop corner this handle resizes, or None for image pan."""
        if self is HandleKind.IMAGE:
            return None
        return CornerKind(self.value)


class GeometricState(BaseModel, frozen=True):
    """Complete geometric snapshot of the editor.

    Invariant (coverage): after every committed mutation the crop window
    is a sub-rectangle of the image frame.

    Attributes:
        crop: The crop window in area-local coordinates.
        image: The on-screen image frame; its size is ``native * zoom``.
        zoom: Ratio of on-screen image size to native pixel size.
        angle: Rotation in degrees.
        changed: False while the state still equals the computed default.
    """

    crop: Rect = Field(
        default_factory=lambda: Rect(
            x=0, y=0, width=DEFAULT_CROP_SIZE, height=DEFAULT_CROP_SIZE
        )
    )
    image: Rect = Field(default_factory=lambda: Rect(x=0, y=0, width=0, height=0))
    zoom: float = Field(default=1.0, gt=0)
    angle: float = 0.0
    changed: bool = False

    @property
    def is_covered(self) -> bool:
        """True when the image frame fully covers the crop window."""
        return self.image.covers(self.crop)

    @classmethod
    def template(
        cls,
        width: float = DEFAULT_CROP_SIZE,
        height: float = DEFAULT_CROP_SIZE,
    ) -> GeometricState:
        """Return the pre-load template state with a ``width`` x ``height`` crop."""
        return cls(crop=Rect(x=0, y=0, width=width, height=height))


class CropChange(BaseModel, frozen=True):
    """Projection of a snapshot handed to "crop changed" observers."""

    crop: Rect
    changed: bool

    @classmethod
    def from_state(cls, state: GeometricState) -> CropChange:
        return cls(crop=state.crop, changed=state.changed)


class DragSession(BaseModel, frozen=True):
    """An in-progress drag gesture.

    Created on drag start and dropped on drag end. ``anchor`` is the last
    cursor position seen; pan steps advance it after every step.
    """

    handle: HandleKind
    anchor: Point

    def advanced_to(self, cursor: Point) -> DragSession:
        """Return this session with its anchor moved to ``cursor``."""
        return self.model_copy(update={"anchor": cursor})
