"""Pointer-driven dragging of horizontal supports.

The controller is a small state machine with three explicit states:

- Idle: nothing selected.
- Selected: a support is highlighted. ``press_position`` is set while the
  pointer button is still held after selecting it.
- Dragging: the pointer moved while pressed on a support. Every support
  position was snapshotted at the start of the gesture and all supports
  slide together by the same pointer delta.

Positions are read from a StructuralLayout, so hit-testing and dragging use
exactly the geometry the layout engine produced (including the plywood
wide-sheet offset). The controller writes manual positions into a
caller-owned overrides dict that is fed back into the layout engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from ..constants import SUPPORT_EDGE_MARGIN
from ..value_objects import Point, StructuralLayout
from .frame_layout import clamp_position, support_bounds

logger = logging.getLogger(__name__)

__all__ = [
    "DragState",
    "Dragging",
    "Idle",
    "Selected",
    "SupportDragController",
]


@dataclass(frozen=True)
class Idle:
    """No support selected."""


@dataclass(frozen=True)
class Selected:
    """A support is highlighted but not moving."""

    index: int
    press_position: Point | None = None


@dataclass(frozen=True)
class Dragging:
    """Supports are following the pointer.

    Attributes:
        index: Support the gesture started on.
        start_position: Pointer position when the support was pressed.
        start_positions: (index, position) of every support at gesture start.
        lower: Lowest allowed support position.
        upper: Highest allowed support position.
    """

    index: int
    start_position: Point
    start_positions: tuple[tuple[int, float], ...] = ()
    lower: float = 0.0
    upper: float = 0.0


DragState = Union[Idle, Selected, Dragging]


class SupportDragController:
    """Translates pointer gestures into support overrides.

    Attributes:
        overrides: Manual support positions keyed by 1-based index. Shared
            with the caller and passed to FrameLayoutEngine.layout().
        state: Current gesture state.
        edge_margin: Clearance kept between supports and frame rails.
    """

    def __init__(
        self,
        overrides: dict[int, float] | None = None,
        edge_margin: float = SUPPORT_EDGE_MARGIN,
    ) -> None:
        self.overrides: dict[int, float] = overrides if overrides is not None else {}
        self.state: DragState = Idle()
        self.edge_margin = edge_margin

    @property
    def selected_index(self) -> int | None:
        """Index of the highlighted support, if any."""
        if isinstance(self.state, (Selected, Dragging)):
            return self.state.index
        return None

    @property
    def is_dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    def hit_test(self, point: Point, layout: StructuralLayout) -> int | None:
        """Return the index of the support under the pointer, if any."""
        for support in layout.supports:
            if layout.support_rect(support).contains(point.x, point.y):
                return support.index
        return None

    def pointer_down(self, point: Point, layout: StructuralLayout) -> DragState:
        """Select the support under the pointer, or deselect on a miss.

        A gesture still in progress is ended first; only one drag can be
        active at a time.
        """
        if isinstance(self.state, Dragging):
            self._end_gesture()

        index = self.hit_test(point, layout)
        if index is None:
            self.state = Idle()
        else:
            logger.debug("Selected support %d", index)
            self.state = Selected(index=index, press_position=point)
        return self.state

    def pointer_move(self, point: Point, layout: StructuralLayout) -> DragState:
        """Move all supports with the pointer while a support is pressed."""
        state = self.state
        if isinstance(state, Selected) and state.press_position is not None:
            lower, upper = support_bounds(
                layout.height, layout.slat_depth, self.edge_margin
            )
            state = Dragging(
                index=state.index,
                start_position=state.press_position,
                start_positions=tuple(layout.support_positions().items()),
                lower=lower,
                upper=upper,
            )
            self.state = state
            logger.debug(
                "Started dragging support %d with %d supports",
                state.index,
                len(state.start_positions),
            )

        if isinstance(state, Dragging):
            delta = point.y - state.start_position.y
            bounds = (state.lower, state.upper)
            for index, position in state.start_positions:
                self.overrides[index] = clamp_position(position + delta, bounds)

        return self.state

    def pointer_up(self) -> DragState:
        """Finish the gesture; overrides already written stay in effect."""
        if isinstance(self.state, Dragging):
            self._end_gesture()
        elif isinstance(self.state, Selected) and self.state.press_position is not None:
            self.state = Selected(index=self.state.index)
        return self.state

    def pointer_leave(self) -> DragState:
        """Pointer left the drawing; treated like releasing the button."""
        return self.pointer_up()

    def reset(self) -> DragState:
        """Return every support to its nominal position."""
        self.overrides.clear()
        self.state = Idle()
        logger.debug("Support overrides reset")
        return self.state

    def _end_gesture(self) -> None:
        if isinstance(self.state, Dragging):
            logger.debug("Finished dragging support %d", self.state.index)
        self.state = Idle()
