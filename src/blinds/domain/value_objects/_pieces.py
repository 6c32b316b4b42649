"""Pieces of board and panel material required to build a frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PieceKind(str, Enum):
    """What a piece is used for in the finished frame."""

    FRAME_SIDE = "frame_side"
    FRAME_RAIL = "frame_rail"
    SUPPORT = "support"
    FABRIC_PANEL = "fabric_panel"
    PLYWOOD_PANEL = "plywood_panel"


@dataclass(frozen=True)
class Piece:
    """One category of board or panel needed, with its quantity.

    Attributes:
        length: Length along the cut direction.
        face_width: Face dimension (board face, or panel width).
        depth: Thickness; 0.0 for fabric, which has none.
        quantity: Number of identical pieces.
        label: Human readable name for reports.
        kind: Role of the piece in the frame.
    """

    length: float
    face_width: float
    depth: float = 0.0
    quantity: int = 1
    label: str = ""
    kind: PieceKind | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")
        if self.depth < 0:
            raise ValueError("Depth must be non-negative")

    @property
    def total_length(self) -> float:
        """Combined length of all pieces in this category."""
        return self.length * self.quantity

    @property
    def area(self) -> float:
        """Combined face area of all pieces in this category."""
        return self.length * self.face_width * self.quantity
