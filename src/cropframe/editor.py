"""Gesture-input interface of the crop editor.

``CropEditor`` is what an event adapter talks to. It receives cursor
positions already translated into the editing area's local coordinates,
routes them to the matching solver, and commits accepted results through
the ``StateStore``. Rejected candidates and malformed input (continuing a
drag that never started, wheeling before an image is loaded) leave the
state untouched.
"""

from __future__ import annotations

from cropframe.config import Settings
from cropframe.config import settings as default_settings
from cropframe.core import (
    DragSession,
    GeometricState,
    HandleKind,
    RotationController,
    StateStore,
    ZoomEngine,
    compute_default_state,
    pan_image,
    resize_crop,
)
from cropframe.geometry import Point, Size
from cropframe.utils.logging import (
    clear_gesture_context,
    get_logger,
    set_correlation_context,
)

logger = get_logger(__name__)


class CropEditor:
    """Drives one editing session.

    Example:
        editor = CropEditor(session_key="avatar-42")
        editor.store.subscribe(renderer.draw)
        editor.load_image(Size(width=1000, height=800), Size(width=928, height=528))
        editor.begin_drag(HandleKind.BOTTOM_RIGHT, Point(x=430, y=296))
        editor.continue_drag(Point(x=500, y=350))
        editor.end_drag()
        editor.wheel(-500)
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        store: StateStore | None = None,
        session_key: str | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            settings: Settings to read limits and gesture tuning from.
                Defaults to the module-level settings.
            store: State store to commit into. A new one is created if omitted.
            session_key: Identifier of this editing session, attached to
                log events and used as the persistence key.
        """
        self._settings = settings or default_settings
        self._limits = self._settings.crop_limits()
        self._template = GeometricState.template(
            self._settings.DEFAULT_CROP_WIDTH, self._settings.DEFAULT_CROP_HEIGHT
        )
        self.store = store or StateStore(self._template)
        self.session_key = session_key
        self.zoom_engine = ZoomEngine(self._settings.ZOOM_SENSITIVITY)
        self.rotation = RotationController(self.store, self._settings.ROTATION_STEP)
        self._drag: DragSession | None = None

    @property
    def state(self) -> GeometricState:
        """Return the current committed snapshot."""
        return self.store.state

    @property
    def drag_session(self) -> DragSession | None:
        """Return the active drag session, if any."""
        return self._drag

    def load_image(
        self,
        native: Size,
        area: Size,
        saved: GeometricState | None = None,
    ) -> GeometricState:
        """Seed the editor for a newly loaded image.

        The default layout is always computed and kept for reset; ``saved``
        replaces it only as the starting state.

        Returns:
            The committed starting state.
        """
        self._bind_session()
        self._drag = None
        default = compute_default_state(native, area, self._template)
        self.store.load(native, area, default, seed=saved)
        return self.store.state

    def begin_drag(self, handle: HandleKind, cursor: Point) -> None:
        """Start a drag on a crop corner or on the image."""
        self._drag = DragSession(handle=handle, anchor=cursor)
        logger.debug("Drag started", handle=handle.value, cursor=cursor.to_tuple())

    def continue_drag(self, cursor: Point) -> bool:
        """Resolve a drag step at ``cursor``.

        Returns:
            True when a new state was accepted for commit. Called from an
            observer, the commit is queued until the notification round ends.
        """
        drag = self._drag
        native = self.store.native
        if drag is None or native is None:
            logger.debug("Drag step ignored, no active session or image")
            return False

        self._bind_session(gesture=drag.handle.value)
        try:
            corner = drag.handle.corner
            if corner is None:
                result = pan_image(
                    self.state,
                    drag,
                    cursor,
                    rotate_with_angle=self._settings.ROTATE_PAN_WITH_ANGLE,
                )
                self._drag = result.session
                if result.image is None:
                    return False
                self.store.apply_patch(image=result.image)
                return True

            area = self.store.area
            if area is None:
                return False
            next_state = resize_crop(
                self.state,
                native,
                corner,
                cursor,
                area,
                default_zoom=self.store.default_state.zoom,
                limits=self._limits,
            )
            return self._commit(next_state)
        finally:
            clear_gesture_context()

    def end_drag(self) -> None:
        """Drop the active drag session. Safe to call without one."""
        if self._drag is not None:
            logger.debug("Drag ended", handle=self._drag.handle.value)
        self._drag = None

    def wheel(self, delta: float) -> bool:
        """Resolve a wheel step; negative deltas zoom in.

        Returns:
            True when a new state was accepted for commit.
        """
        native = self.store.native
        if native is None:
            logger.debug("Wheel ignored, no image loaded", delta=delta)
            return False
        self._bind_session(gesture="wheel")
        try:
            return self._commit(self.zoom_engine.apply(self.state, native, delta))
        finally:
            clear_gesture_context()

    def rotate(self, angle: float) -> bool:
        """Set the rotation angle in degrees."""
        return self.rotation.rotate(angle)

    def rotate_by(self, delta: float) -> bool:
        """Rotate by ``delta`` degrees from the current angle."""
        return self.rotation.rotate_by(delta)

    def rotate_left(self) -> bool:
        """Advance the rotation by one step (90 degrees by default)."""
        return self.rotation.rotate_left()

    def reset(self) -> bool:
        """Restore the default state computed at load time.

        Returns:
            False when no image is loaded.
        """
        if not self.store.has_image:
            logger.debug("Reset ignored, no image loaded")
            return False
        self._drag = None
        self.store.reset()
        return True

    def _commit(self, next_state: GeometricState | None) -> bool:
        """Hand a resolved state to the store.

        True means the state was accepted for commit, not that it is already
        current: a call made from an observer while the store is notifying is
        queued and applied once the running notification round finishes.
        """
        if next_state is None:
            return False
        self.store.apply_patch(
            crop=next_state.crop,
            image=next_state.image,
            zoom=next_state.zoom,
            angle=next_state.angle,
        )
        return True

    def _bind_session(self, gesture: str | None = None) -> None:
        set_correlation_context(session_key=self.session_key, gesture=gesture)
