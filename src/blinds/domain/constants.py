"""Standard stock dimensions used by the blind layout and cut list.

All values are in the same abstract length unit as FrameParameters
(the configurator displays them as millimetres).
"""

from __future__ import annotations

# Plywood plates are sold 1220 x 2440. Frames narrower than a plate get
# full-width plates stacked vertically; wider frames get one plate per bay.
PLYWOOD_SHEET_WIDTH: float = 1220.0
PLYWOOD_SHEET_HEIGHT: float = 2440.0

# Standard length of a stock board for the linear cut list.
DEFAULT_STOCK_LENGTH: float = 6000.0

# Minimum distance between a dragged support and the frame sides.
SUPPORT_EDGE_MARGIN: float = 10.0

DEFAULT_PLYWOOD_THICKNESS: float = 12.0

# Finest spacing of division marks.
MIN_DIVISION_SIZE: float = 1.0

__all__ = [
    "DEFAULT_PLYWOOD_THICKNESS",
    "DEFAULT_STOCK_LENGTH",
    "MIN_DIVISION_SIZE",
    "PLYWOOD_SHEET_HEIGHT",
    "PLYWOOD_SHEET_WIDTH",
    "SUPPORT_EDGE_MARGIN",
]
