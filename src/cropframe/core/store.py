"""State store: the single point of mutation for the editor's geometry.

The store owns the current ``GeometricState`` and the default computed for
the loaded image. Every change goes through ``apply_patch`` (or the load
and reset transitions), which validates the merged snapshot, swaps it in
and notifies subscribers synchronously with the frozen snapshot.

A subscriber that commits while being notified does not re-enter the
store: its transition is queued and applied after the current
notification round, in the order it was issued.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any

from cropframe.core.state import CropChange, GeometricState
from cropframe.geometry import Size
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)

StateObserver = Callable[[GeometricState], None]
CropObserver = Callable[[CropChange], None]
Unsubscribe = Callable[[], None]

_PATCH_FIELDS = frozenset({"crop", "image", "zoom", "angle"})

_Transition = Callable[[GeometricState], GeometricState]


class StateStore:
    """Holds the current and default geometric state and notifies observers.

    Example:
        store = StateStore()
        store.subscribe(renderer.draw)
        store.load(native=Size(width=1000, height=800), area=area, default=default)
        store.apply_patch(zoom=1.2, image=new_frame)
    """

    def __init__(self, template: GeometricState | None = None) -> None:
        """Initialize an empty store.

        Args:
            template: State used before an image is loaded. Defaults to
                ``GeometricState.template()``.
        """
        self._state = template or GeometricState.template()
        self._default = self._state
        self._native: Size | None = None
        self._area: Size | None = None
        self._observers: list[StateObserver] = []
        self._pending: deque[_Transition] = deque()
        self._notifying = False

    @property
    def state(self) -> GeometricState:
        """Return the current committed snapshot."""
        return self._state

    @property
    def default_state(self) -> GeometricState:
        """Return the default snapshot used by reset."""
        return self._default

    @property
    def native(self) -> Size | None:
        """Return the loaded image's native size, or None before a load."""
        return self._native

    @property
    def area(self) -> Size | None:
        """Return the editing area size the default was computed for."""
        return self._area

    @property
    def has_image(self) -> bool:
        """True once an image has been loaded."""
        return self._native is not None

    def subscribe(self, observer: StateObserver) -> Unsubscribe:
        """Register an observer for full snapshots.

        Returns:
            A callable that removes the observer; calling it twice is safe.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def watch_crop(self, observer: CropObserver) -> Unsubscribe:
        """Register an observer for the crop window and changed flag only."""

        def project(snapshot: GeometricState) -> None:
            observer(CropChange.from_state(snapshot))

        return self.subscribe(project)

    def load(
        self,
        native: Size,
        area: Size,
        default: GeometricState,
        seed: GeometricState | None = None,
    ) -> None:
        """Seed the store for a newly loaded image.

        Args:
            native: Native image dimensions.
            area: Editing area size.
            default: Default state for this image, kept for reset.
            seed: Previously saved state to start from instead of the default.
        """
        self._native = native
        self._area = area
        self._default = default.model_copy(update={"changed": False})
        initial = seed if seed is not None else self._default
        logger.info(
            "Image loaded",
            native=native.to_tuple(),
            area=area.to_tuple(),
            restored=seed is not None,
        )
        self._submit(lambda _: initial)

    def apply_patch(self, **changes: Any) -> None:
        """Merge a partial update into the state and notify observers.

        Accepted fields are ``crop``, ``image``, ``zoom`` and ``angle``.
        Once an image is loaded the committed state is marked changed.

        Raises:
            ValueError: If an unknown field is given.
            pydantic.ValidationError: If the merged state is invalid.
        """
        unknown = set(changes) - _PATCH_FIELDS
        if unknown:
            raise ValueError(f"Unknown state fields: {sorted(unknown)}")

        def merge(current: GeometricState) -> GeometricState:
            merged = {**dict(current), **changes}
            merged["changed"] = current.changed or self.has_image
            return GeometricState.model_validate(merged)

        self._submit(merge)

    def reset(self) -> None:
        """Replace the state with a copy of the default state."""
        logger.info("State reset to default")
        self._submit(lambda _: self._default.model_copy(update={"changed": False}))

    def _submit(self, transition: _Transition) -> None:
        self._pending.append(transition)
        if self._notifying:
            logger.debug("Commit queued during notification", queued=len(self._pending))
            return

        self._notifying = True
        try:
            while self._pending:
                self._state = self._pending.popleft()(self._state)
                snapshot = self._state
                logger.debug("State committed", changed=snapshot.changed)
                for observer in list(self._observers):
                    observer(snapshot)
        finally:
            self._notifying = False
            self._pending.clear()
