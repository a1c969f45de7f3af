"""Geometry primitives for cropframe.

This module provides immutable Pydantic models for representing points,
sizes, and rectangles in the editing area's local coordinate space. All
coordinates follow the convention where (0, 0) is the top-left corner of
the editing area, x grows rightward and y grows downward.

Coordinates are floats: zooming produces fractional on-screen positions,
and an image frame may extend past the area (negative origin).
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field


class Point(BaseModel, frozen=True):
    """A 2D point in area-local coordinates.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
    """

    x: float = Field(..., description="X coordinate (from the left edge)")
    y: float = Field(..., description="Y coordinate (from the top edge)")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])

    def delta_to(self, other: Point) -> tuple[float, float]:
        """Return the (dx, dy) vector from this point to ``other``."""
        return (other.x - self.x, other.y - self.y)


class Size(BaseModel, frozen=True):
    """A 2D size representing width and height.

    Both dimensions must be strictly positive (> 0). Used for native image
    dimensions and the editing area's bounds.

    Attributes:
        width: Horizontal extent in pixels.
        height: Vertical extent in pixels.
    """

    width: float = Field(..., gt=0, description="Width in pixels")
    height: float = Field(..., gt=0, description="Height in pixels")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)


class Rect(BaseModel, frozen=True):
    """A rectangle in area-local coordinates.

    Defined by its top-left corner (x, y) and dimensions (width, height).
    Used both for the crop window and for the on-screen image frame.

    Attributes:
        x: Left edge X coordinate.
        y: Top edge Y coordinate.
        width: Horizontal extent (>= 0).
        height: Vertical extent (>= 0).
    """

    x: float = Field(..., description="Left edge X coordinate")
    y: float = Field(..., description="Top edge Y coordinate")
    width: float = Field(..., ge=0, description="Width in pixels")
    height: float = Field(..., ge=0, description="Height in pixels")

    @property
    def right(self) -> float:
        """Return the X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Return the Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Return the center point."""
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    def moved_to(self, x: float, y: float) -> Rect:
        """Return a copy with the origin replaced, keeping the size."""
        return Rect(x=x, y=y, width=self.width, height=self.height)

    def translated(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by (dx, dy)."""
        return self.moved_to(self.x + dx, self.y + dy)

    def covers(self, other: Rect, *, tolerance: float = 0.0) -> bool:
        """Check whether ``other`` is a sub-rectangle of this rectangle.

        Args:
            other: The rectangle that must fit inside this one.
            tolerance: Slack allowed on each edge comparison, to absorb
                floating-point error accumulated across zoom steps.

        Returns:
            True if every edge of ``other`` lies on or inside this rectangle.
        """
        return (
            self.x <= other.x + tolerance
            and self.right >= other.right - tolerance
            and self.y <= other.y + tolerance
            and self.bottom >= other.bottom - tolerance
        )

