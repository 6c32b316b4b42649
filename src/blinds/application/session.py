"""Interactive editing session for a single blind frame."""

from __future__ import annotations

import logging
from typing import Any

from blinds.domain import FrameLayoutEngine, FrameParameters, Point, StructuralLayout
from blinds.domain.services import DragState, SupportDragController

logger = logging.getLogger(__name__)

__all__ = ["FrameEditor"]

# Support indices only keep their meaning while these stay the same
_OVERRIDE_DEPENDENCIES = ("height", "support_spacing")


class FrameEditor:
    """Holds the parameters being edited together with manual support moves.

    The editor is the boundary where stale overrides are dropped: whenever
    the height or the support spacing changes, supports may be renumbered,
    so every override is cleared and the drag gesture is abandoned.

    Attributes:
        parameters: Current frame parameters.
        overrides: Manual support positions keyed by 1-based index.
        drag: Support drag controller writing into ``overrides``.
    """

    def __init__(
        self,
        parameters: FrameParameters,
        layout_engine: FrameLayoutEngine | None = None,
    ) -> None:
        self.parameters = parameters
        self.layout_engine = layout_engine or FrameLayoutEngine()
        self.overrides: dict[int, float] = {}
        self.drag = SupportDragController(
            self.overrides, edge_margin=self.layout_engine.edge_margin
        )

    def layout(self) -> StructuralLayout:
        """Recompute the layout from the current parameters and overrides."""
        return self.layout_engine.layout(
            self.parameters, self.overrides, selected=self.drag.selected_index
        )

    def update(self, **changes: Any) -> FrameParameters:
        """Replace some parameters.

        Args:
            **changes: FrameParameters fields to replace.

        Returns:
            The new parameters.
        """
        previous = self.parameters
        self.parameters = previous.with_changes(**changes)

        invalidated = [
            name
            for name in _OVERRIDE_DEPENDENCIES
            if getattr(previous, name) != getattr(self.parameters, name)
        ]
        if invalidated:
            if self.overrides:
                logger.debug(
                    "Clearing %d support overrides after %s changed",
                    len(self.overrides),
                    ", ".join(invalidated),
                )
            self.drag.reset()

        return self.parameters

    def reset_supports(self) -> None:
        """Return every support to its computed position."""
        self.drag.reset()

    def pointer_down(self, x: float, y: float) -> DragState:
        return self.drag.pointer_down(Point(x, y), self.layout())

    def pointer_move(self, x: float, y: float) -> DragState:
        return self.drag.pointer_move(Point(x, y), self.layout())

    def pointer_up(self) -> DragState:
        return self.drag.pointer_up()

    def pointer_leave(self) -> DragState:
        return self.drag.pointer_leave()
