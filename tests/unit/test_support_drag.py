"""Unit tests for the support drag controller state machine."""

from __future__ import annotations

import pytest

from blinds.domain import FrameLayoutEngine, FrameParameters, Point
from blinds.domain.services import Dragging, Idle, Selected, SupportDragController


@pytest.fixture
def controller() -> SupportDragController:
    return SupportDragController()


@pytest.fixture
def layout(engine: FrameLayoutEngine, plywood_params: FrameParameters):
    """Plywood layout with supports at 520, 1020 and 1520."""
    return engine.layout(plywood_params)


def press(controller: SupportDragController, layout, y: float, x: float = 500.0):
    return controller.pointer_down(Point(x, y), layout)


def move(controller: SupportDragController, layout, y: float, x: float = 500.0):
    return controller.pointer_move(Point(x, y), layout)


class TestHitTest:
    """Tests for hit testing supports on the drawing."""

    def test_hit_on_support_centre(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test a point on a support selects it."""
        assert controller.hit_test(Point(500.0, 1020.0), layout) == 2

    def test_hit_covers_slat_height(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test the hit area extends half a slat face each way."""
        assert controller.hit_test(Point(500.0, 497.5), layout) == 1
        assert controller.hit_test(Point(500.0, 542.5), layout) == 1
        assert controller.hit_test(Point(500.0, 543.0), layout) is None

    def test_miss_outside_inner_width(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test points over the frame sides do not hit supports."""
        assert controller.hit_test(Point(10.0, 520.0), layout) is None
        assert controller.hit_test(Point(990.0, 520.0), layout) is None

    def test_uses_offset_geometry(
        self,
        controller: SupportDragController,
        engine: FrameLayoutEngine,
        wide_plywood_params: FrameParameters,
    ) -> None:
        """Test hit testing follows the wide plywood offset."""
        wide = engine.layout(wide_plywood_params)

        assert controller.hit_test(Point(600.0, 1060.0), wide) == 2
        assert controller.hit_test(Point(600.0, 1020.0), wide) is None


class TestPointerDown:
    """Tests for selecting supports."""

    def test_select(self, controller: SupportDragController, layout) -> None:
        """Test pressing on a support selects it."""
        state = press(controller, layout, 520.0)

        assert state == Selected(index=1, press_position=Point(500.0, 520.0))
        assert controller.selected_index == 1
        assert controller.is_dragging is False

    def test_miss_deselects(self, controller: SupportDragController, layout) -> None:
        """Test pressing on empty space clears the selection."""
        press(controller, layout, 520.0)
        controller.pointer_up()

        assert press(controller, layout, 300.0) == Idle()
        assert controller.selected_index is None

    def test_press_without_move_changes_nothing(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test a click without movement leaves overrides untouched."""
        press(controller, layout, 520.0)
        state = controller.pointer_up()

        assert state == Selected(index=1)
        assert controller.overrides == {}


class TestDragging:
    """Tests for moving supports with the pointer."""

    def test_all_supports_move_together(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test a 50 downward drag moves every support by 50."""
        press(controller, layout, 520.0)
        state = move(controller, layout, 570.0)

        assert isinstance(state, Dragging)
        assert state.index == 1
        assert controller.is_dragging is True
        assert controller.overrides == {1: 570.0, 2: 1070.0, 3: 1570.0}

    def test_drag_state_is_immutable(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test the gesture snapshot is a hashable value."""
        press(controller, layout, 520.0)
        state = move(controller, layout, 570.0)

        assert state.start_positions == ((1, 520.0), (2, 1020.0), (3, 1520.0))
        assert hash(state) == hash(move(controller, layout, 600.0))

    def test_delta_measured_from_gesture_start(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test successive moves do not accumulate."""
        press(controller, layout, 1020.0)
        move(controller, layout, 1100.0)
        move(controller, layout, 1000.0)

        assert controller.overrides == {1: 500.0, 2: 1000.0, 3: 1500.0}

    def test_clamped_at_bottom(self, controller: SupportDragController, layout) -> None:
        """Test supports stop at the bottom margin."""
        press(controller, layout, 520.0)
        move(controller, layout, 2000.0)

        assert controller.overrides == {1: 1970.0, 2: 1970.0, 3: 1970.0}

    def test_clamped_at_top(self, controller: SupportDragController, layout) -> None:
        """Test only supports that would cross the top margin are clamped."""
        press(controller, layout, 520.0)
        move(controller, layout, 0.0)

        assert controller.overrides == {1: 30.0, 2: 500.0, 3: 1000.0}

    def test_snapshot_includes_existing_overrides(
        self,
        controller: SupportDragController,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test a drag starts from positions already moved by hand."""
        controller.overrides[1] = 600.0
        layout = engine.layout(plywood_params, controller.overrides)

        press(controller, layout, 600.0)
        move(controller, layout, 650.0)

        assert controller.overrides == {1: 650.0, 2: 1070.0, 3: 1570.0}

    def test_drag_feeds_back_into_layout(
        self,
        controller: SupportDragController,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
        layout,
    ) -> None:
        """Test overrides produce custom supports in the next layout."""
        press(controller, layout, 520.0)
        move(controller, layout, 570.0)
        moved = engine.layout(
            plywood_params, controller.overrides, controller.selected_index
        )

        assert [s.position for s in moved.supports] == [570.0, 1070.0, 1570.0]
        assert all(s.is_custom for s in moved.supports)
        assert moved.supports[0].is_selected

    def test_move_without_press_is_ignored(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test hovering in Idle or after release does nothing."""
        assert move(controller, layout, 700.0) == Idle()

        press(controller, layout, 520.0)
        controller.pointer_up()
        assert move(controller, layout, 700.0) == Selected(index=1)
        assert controller.overrides == {}


class TestGestureEnd:
    """Tests for releasing, leaving and resetting."""

    def test_pointer_up_keeps_overrides(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test releasing ends the drag and keeps the new positions."""
        press(controller, layout, 520.0)
        move(controller, layout, 570.0)

        assert controller.pointer_up() == Idle()
        assert controller.overrides == {1: 570.0, 2: 1070.0, 3: 1570.0}

    def test_pointer_leave_ends_drag(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test leaving the drawing behaves like releasing."""
        press(controller, layout, 520.0)
        move(controller, layout, 570.0)

        assert controller.pointer_leave() == Idle()
        move(controller, layout, 900.0)
        assert controller.overrides[1] == 570.0

    def test_pointer_down_while_dragging(
        self, controller: SupportDragController, layout
    ) -> None:
        """Test a new press ends the running gesture first."""
        press(controller, layout, 520.0)
        move(controller, layout, 570.0)

        assert press(controller, layout, 300.0) == Idle()
        assert controller.overrides == {1: 570.0, 2: 1070.0, 3: 1570.0}

    def test_reset(self, controller: SupportDragController, layout) -> None:
        """Test reset clears overrides and returns to Idle."""
        press(controller, layout, 520.0)
        move(controller, layout, 570.0)

        assert controller.reset() == Idle()
        assert controller.overrides == {}

    def test_overrides_shared_with_caller(self, layout) -> None:
        """Test the controller writes into the dict it was given."""
        overrides: dict[int, float] = {}
        controller = SupportDragController(overrides)

        press(controller, layout, 520.0)
        move(controller, layout, 540.0)
        assert overrides[1] == 540.0

        controller.reset()
        assert overrides == {}
