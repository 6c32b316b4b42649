"""Domain services for blind frame layout and material calculation.

This package provides:
- Frame layout (supports, covering bays, division marks)
- Covering panel calculation for fabric and plywood
- Board list generation for the frame and supports
- Interactive support dragging
"""

from .board_list import BoardListGenerator
from .covering import CoveringCalculator
from .frame_layout import (
    FrameLayoutEngine,
    clamp_position,
    count_supports,
    effective_spacing,
    support_bounds,
)
from .support_drag import (
    DragState,
    Dragging,
    Idle,
    Selected,
    SupportDragController,
)

__all__ = [
    # Layout
    "FrameLayoutEngine",
    "clamp_position",
    "count_supports",
    "effective_spacing",
    "support_bounds",
    # Materials
    "BoardListGenerator",
    "CoveringCalculator",
    # Interaction
    "DragState",
    "Dragging",
    "Idle",
    "Selected",
    "SupportDragController",
]
