"""Unit tests for CropEditor gesture routing."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cropframe.config import Settings
from cropframe.core import GeometricState, HandleKind
from cropframe.editor import CropEditor
from cropframe.geometry import Point, Rect, Size
from cropframe.utils import logging as cf_logging

COVER_TOLERANCE = 1e-6


def _inside(rect: Rect, area: Size, tolerance: float) -> bool:
    return (
        rect.x >= -tolerance
        and rect.y >= -tolerance
        and rect.right <= area.width + tolerance
        and rect.bottom <= area.height + tolerance
    )


_CORNER_HANDLES = [h for h in HandleKind if h is not HandleKind.IMAGE]


def _corner_point(crop: Rect, handle: HandleKind) -> Point:
    corner = handle.corner
    assert corner is not None
    x = crop.x if corner.is_left else crop.right
    y = crop.y if corner.is_top else crop.bottom
    return Point(x=x, y=y)


class TestBeforeLoad:
    def test_gestures_are_no_ops(self, test_settings: Settings) -> None:
        editor = CropEditor(settings=test_settings)
        before = editor.state

        editor.begin_drag(HandleKind.IMAGE, Point(x=0, y=0))
        assert editor.continue_drag(Point(x=10, y=10)) is False
        assert editor.wheel(-500) is False
        assert editor.rotate(90) is False
        assert editor.reset() is False
        assert editor.state is before

    def test_template_uses_settings(self) -> None:
        custom = Settings(
            _env_file=None,  # type: ignore[call-arg]
            DEFAULT_CROP_WIDTH=200,
            DEFAULT_CROP_HEIGHT=120,
        )
        editor = CropEditor(settings=custom)
        assert editor.state.crop.to_tuple() == (0, 0, 200, 120)


class TestLoadImage:
    def test_computes_default(self, editor: CropEditor) -> None:
        assert editor.state.zoom == pytest.approx(0.66)
        assert editor.state.changed is False
        assert editor.drag_session is None

    def test_saved_state_is_starting_point_only(
        self, test_settings: Settings, native: Size, area: Size
    ) -> None:
        editor = CropEditor(settings=test_settings)
        saved = GeometricState(
            crop=Rect(x=10, y=10, width=100, height=100),
            image=Rect(x=0, y=0, width=1000, height=800),
            zoom=1.0,
            angle=90,
            changed=True,
        )
        editor.load_image(native, area, saved=saved)
        assert editor.state == saved

        editor.reset()
        assert editor.state.zoom == pytest.approx(0.66)
        assert editor.state.angle == 0


class TestDrag:
    def test_continue_without_begin_is_ignored(self, editor: CropEditor) -> None:
        before = editor.state
        assert editor.continue_drag(Point(x=100, y=100)) is False
        assert editor.state is before

    def test_end_drag_is_idempotent(self, editor: CropEditor) -> None:
        editor.end_drag()
        editor.begin_drag(HandleKind.IMAGE, Point(x=0, y=0))
        editor.end_drag()
        editor.end_drag()
        assert editor.drag_session is None

    def test_pan_advances_session(self, editor: CropEditor) -> None:
        editor.wheel(-2000)
        editor.begin_drag(HandleKind.IMAGE, Point(x=400, y=200))

        assert editor.continue_drag(Point(x=390, y=195)) is True
        assert editor.drag_session is not None
        assert editor.drag_session.anchor == Point(x=390, y=195)
        assert editor.state.changed is True

    def test_resize_commits(self, editor: CropEditor) -> None:
        start = _corner_point(editor.state.crop, HandleKind.BOTTOM_RIGHT)
        editor.begin_drag(HandleKind.BOTTOM_RIGHT, start)

        assert editor.continue_drag(Point(x=start.x - 100, y=start.y - 50)) is True
        assert editor.state.crop.width == pytest.approx(560)
        assert editor.state.crop.height == pytest.approx(246)

    def test_rejected_resize_keeps_state(self, editor: CropEditor) -> None:
        before = editor.state
        start = _corner_point(before.crop, HandleKind.TOP_LEFT)
        editor.begin_drag(HandleKind.TOP_LEFT, start)

        far = _corner_point(before.crop, HandleKind.BOTTOM_RIGHT)
        assert editor.continue_drag(far) is False
        assert editor.state is before

    def test_gesture_context_cleared(self, editor: CropEditor) -> None:
        editor.begin_drag(HandleKind.IMAGE, Point(x=0, y=0))
        editor.continue_drag(Point(x=5, y=5))
        assert cf_logging._gesture.get() is None
        assert cf_logging._session_key.get() == "test-session"


class TestWheelAndRotation:
    def test_wheel_zooms_in(self, editor: CropEditor) -> None:
        zoom = editor.state.zoom
        assert editor.wheel(-500) is True
        assert editor.state.zoom == pytest.approx(zoom + 0.1)

    def test_wheel_out_at_default_is_rejected(self, editor: CropEditor) -> None:
        """Test the default fit is already the smallest frame covering the crop."""
        assert editor.wheel(500) is False

    def test_wheel_from_observer_is_queued(self, editor: CropEditor) -> None:
        """Test a commit issued during notification is applied after the round."""
        seen: list[float] = []
        results: list[bool] = []

        def observer(snapshot: GeometricState) -> None:
            seen.append(snapshot.zoom)
            if len(seen) == 1:
                results.append(editor.wheel(-500))
                assert editor.state.zoom == pytest.approx(0.76)

        editor.store.subscribe(observer)
        assert editor.wheel(-500) is True

        assert results == [True]
        assert seen == [pytest.approx(0.76), pytest.approx(0.86)]
        assert editor.state.zoom == pytest.approx(0.86)

    def test_rotation_commands(self, editor: CropEditor) -> None:
        assert editor.rotate_left() is True
        assert editor.rotate_by(45) is True
        assert editor.state.angle == 135
        assert editor.rotate(0) is True
        assert editor.state.angle == 0

    def test_reset_clears_changed(self, editor: CropEditor) -> None:
        editor.wheel(-500)
        editor.rotate(90)
        assert editor.reset() is True
        assert editor.state == editor.store.default_state
        assert editor.state.changed is False


_steps = st.lists(
    st.one_of(
        st.tuples(
            st.just("resize"),
            st.sampled_from(_CORNER_HANDLES),
            st.floats(min_value=-400, max_value=400),
            st.floats(min_value=-400, max_value=400),
        ),
        st.tuples(
            st.just("pan"),
            st.just(HandleKind.IMAGE),
            st.floats(min_value=-400, max_value=400),
            st.floats(min_value=-400, max_value=400),
        ),
        st.tuples(
            st.just("wheel"),
            st.just(HandleKind.IMAGE),
            st.integers(min_value=-3000, max_value=3000),
            st.just(0.0),
        ),
    ),
    max_size=20,
)


class TestEditorInvariants:
    @given(steps=_steps)
    @settings(max_examples=100, deadline=None)
    def test_gesture_sequences_keep_invariants(
        self, steps: list[tuple[str, HandleKind, float, float]]
    ) -> None:
        """Test coverage, minimum size and area bounds hold after every step."""
        area = Size(width=928, height=528)
        editor = CropEditor(
            settings=Settings(_env_file=None)  # type: ignore[call-arg]
        )
        editor.load_image(Size(width=1000, height=800), area)

        for kind, handle, a, b in steps:
            if kind == "wheel":
                editor.wheel(a)
            else:
                start = (
                    _corner_point(editor.state.crop, handle)
                    if kind == "resize"
                    else Point(x=0, y=0)
                )
                editor.begin_drag(handle, start)
                editor.continue_drag(Point(x=start.x + a, y=start.y + b))
                editor.end_drag()

            state = editor.state
            assert state.image.covers(state.crop, tolerance=COVER_TOLERANCE)
            assert _inside(state.crop, area, COVER_TOLERANCE)
            assert state.crop.width >= 50
            assert state.crop.height >= 50
