"""Domain layer - core frame geometry and material logic."""

from .services import (
    BoardListGenerator,
    CoveringCalculator,
    FrameLayoutEngine,
    SupportDragController,
)
from .value_objects import (
    CoveringMaterial,
    FrameParameters,
    FrameValidationError,
    Piece,
    PieceKind,
    Point,
    StructuralLayout,
)

__all__ = [
    "BoardListGenerator",
    "CoveringCalculator",
    "CoveringMaterial",
    "FrameLayoutEngine",
    "FrameParameters",
    "FrameValidationError",
    "Piece",
    "PieceKind",
    "Point",
    "StructuralLayout",
    "SupportDragController",
]
