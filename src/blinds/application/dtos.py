"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blinds.domain import Piece, StructuralLayout

if TYPE_CHECKING:
    from blinds.infrastructure.cut_list_optimizer import CuttingPlan


@dataclass
class BlindOutput:
    """Output DTO containing everything derived from one frame.

    Attributes:
        layout: Structural layout, or None if the parameters were invalid.
        board_pieces: Frame sides, rails and supports.
        covering_pieces: Fabric or plywood panels.
        cutting_plan: Board pieces packed onto stock boards, or None if
            packing was not possible.
        errors: Validation or packing errors.
    """

    layout: StructuralLayout | None
    board_pieces: list[Piece] = field(default_factory=list)
    covering_pieces: list[Piece] = field(default_factory=list)
    cutting_plan: CuttingPlan | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def pieces(self) -> list[Piece]:
        """Board pieces followed by covering pieces."""
        return [*self.board_pieces, *self.covering_pieces]

    @property
    def is_valid(self) -> bool:
        """Check if the output was generated without errors."""
        return len(self.errors) == 0
