"""Core gesture solvers for cropframe.

This package turns normalized pointer, wheel and rotation input into new
geometric states that keep the crop window covered by the image.

Public API:
    - GeometricState, DragSession, HandleKind, CropChange: state models.
    - compute_default_state: fit-to-area layout for a loaded image.
    - pan_image: image-drag resolution.
    - resize_crop: corner-handle resolution.
    - ZoomEngine: wheel resolution.
    - RotationController: angle steps and absolute rotation.
    - StateStore: single point of mutation with observers.
"""

from cropframe.core.layout import compute_default_state
from cropframe.core.limits import CropLimits
from cropframe.core.pan import PanResult, pan_image
from cropframe.core.resize import resize_crop
from cropframe.core.rotation import RotationController
from cropframe.core.state import CropChange, DragSession, GeometricState, HandleKind
from cropframe.core.store import StateStore
from cropframe.core.zoom import ZoomEngine

__all__ = [
    "CropChange",
    "CropLimits",
    "DragSession",
    "GeometricState",
    "HandleKind",
    "PanResult",
    "RotationController",
    "StateStore",
    "ZoomEngine",
    "compute_default_state",
    "pan_image",
    "resize_crop",
]
