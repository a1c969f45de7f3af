"""Gesture scripts for headless replay.

A script names the image and area sizes and lists gestures in the order
an event adapter would deliver them::

    {
        "image": {"width": 1000, "height": 800},
        "area": {"width": 928, "height": 528},
        "steps": [
            {"op": "drag", "handle": "bottom-right",
             "start": [430, 296], "path": [[500, 350], [520, 360]]},
            {"op": "wheel", "delta": -500},
            {"op": "rotate_left"},
            {"op": "reset"}
        ]
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

from cropframe.core import GeometricState, HandleKind
from cropframe.editor import CropEditor
from cropframe.exceptions import CropframeError
from cropframe.geometry import Point, Size


class DragStep(BaseModel, frozen=True):
    op: Literal["drag"]
    handle: HandleKind
    start: tuple[float, float]
    path: list[tuple[float, float]] = Field(default_factory=list)


class WheelStep(BaseModel, frozen=True):
    op: Literal["wheel"]
    delta: float


class RotateStep(BaseModel, frozen=True):
    op: Literal["rotate"]
    angle: float


class RotateByStep(BaseModel, frozen=True):
    op: Literal["rotate_by"]
    delta: float


class RotateLeftStep(BaseModel, frozen=True):
    op: Literal["rotate_left"]


class ResetStep(BaseModel, frozen=True):
    op: Literal["reset"]


Step = Annotated[
    DragStep | WheelStep | RotateStep | RotateByStep | RotateLeftStep | ResetStep,
    Field(discriminator="op"),
]


class GestureScript(BaseModel, frozen=True):
    """A recorded editing session."""

    image: Size
    area: Size
    steps: list[Step] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: Path) -> GestureScript:
        """Parse a script file.

        Raises:
            CropframeError: If the file is missing or not a valid script.
        """
        try:
            return cls.model_validate_json(path.read_text())
        except OSError as e:
            raise CropframeError(f"Cannot read script: {e}", path) from e
        except ValidationError as e:
            raise CropframeError(
                f"Invalid gesture script: {e.error_count()} error(s)", path
            ) from e


@dataclass(frozen=True)
class ReplayResult:
    """Outcome of replaying a script.

    Attributes:
        state: The final committed state.
        committed: Number of input events that produced a commit.
        rejected: Number of input events that left the state unchanged.
    """

    state: GeometricState
    committed: int
    rejected: int


def replay(
    script: GestureScript,
    editor: CropEditor,
    saved: GeometricState | None = None,
) -> ReplayResult:
    """Load the script's image into ``editor`` and apply every step in order."""
    editor.load_image(script.image, script.area, saved=saved)
    outcomes: list[bool] = []

    for step in script.steps:
        if isinstance(step, DragStep):
            editor.begin_drag(step.handle, Point.from_tuple(step.start))
            outcomes.extend(
                editor.continue_drag(Point.from_tuple(cursor)) for cursor in step.path
            )
            editor.end_drag()
        elif isinstance(step, WheelStep):
            outcomes.append(editor.wheel(step.delta))
        elif isinstance(step, RotateStep):
            outcomes.append(editor.rotate(step.angle))
        elif isinstance(step, RotateByStep):
            outcomes.append(editor.rotate_by(step.delta))
        elif isinstance(step, RotateLeftStep):
            outcomes.append(editor.rotate_left())
        else:
            outcomes.append(editor.reset())

    committed = sum(outcomes)
    return ReplayResult(
        state=editor.state,
        committed=committed,
        rejected=len(outcomes) - committed,
    )
