"""Value objects for the blind frame domain.

This module provides immutable data types used throughout the blind
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Frame inputs and geometry primitives
from ._frame import (
    CoveringMaterial,
    FrameParameters,
    FrameValidationError,
    Point,
    Rect,
)

# Layout engine output
from ._layout import (
    DivisionMark,
    FrameSides,
    PanelDescriptor,
    StructuralLayout,
    SupportDescriptor,
)

# Material pieces
from ._pieces import Piece, PieceKind

__all__ = [
    "CoveringMaterial",
    "DivisionMark",
    "FrameParameters",
    "FrameSides",
    "FrameValidationError",
    "PanelDescriptor",
    "Piece",
    "PieceKind",
    "Point",
    "Rect",
    "StructuralLayout",
    "SupportDescriptor",
]
