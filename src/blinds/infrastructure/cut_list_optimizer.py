"""Linear cut list data models and packing algorithm for stock boards.

This module provides data structures for representing which cuts come out of
which stock board, and the first-fit decreasing packer that produces them.

All dataclasses are frozen (immutable) so a cutting plan can be shared and
compared freely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from blinds.domain.constants import DEFAULT_STOCK_LENGTH

logger = logging.getLogger(__name__)

# Slack for float rounding when decimal lengths exactly fill a board
FIT_TOLERANCE = 1e-9

__all__ = [
    "CutListError",
    "CutListOptimizer",
    "CuttingPlan",
    "InvalidCutListError",
    "StockAssignment",
    "UnsatisfiablePieceError",
]


class CutListError(ValueError):
    """Base class for cut list optimization failures."""


class InvalidCutListError(CutListError):
    """Raised for a non-positive stock length or piece length."""


class UnsatisfiablePieceError(CutListError):
    """Raised when a piece is longer than the stock board.

    Attributes:
        length: Length of the offending piece.
        stock_length: Stock board length it was packed against.
        label: Label of the piece, if it has one.
    """

    def __init__(self, length: float, stock_length: float, label: str = "") -> None:
        self.length = length
        self.stock_length = stock_length
        self.label = label
        name = f"'{label}' " if label else ""
        super().__init__(
            f"Piece {name}of length {length} exceeds stock length {stock_length}"
        )


class _Cuttable(Protocol):
    length: float
    quantity: int


@dataclass(frozen=True)
class StockAssignment:
    """Cuts taken from a single stock board.

    Attributes:
        stock_length: Length of the stock board.
        cuts: Cut lengths in the order they were assigned.
        waste: Length left over after all cuts.
    """

    stock_length: float
    cuts: tuple[float, ...]
    waste: float

    def __post_init__(self) -> None:
        if self.stock_length <= 0:
            raise ValueError("Stock length must be positive")
        if self.waste < 0:
            raise ValueError("Waste must be non-negative")

    @property
    def used_length(self) -> float:
        """Total length of the cuts on this board."""
        return sum(self.cuts)

    @property
    def efficiency(self) -> float:
        """Fraction of the board that ends up in cuts (0.0 to 1.0)."""
        return (self.stock_length - self.waste) / self.stock_length

    @property
    def cut_count(self) -> int:
        return len(self.cuts)


@dataclass(frozen=True)
class CuttingPlan:
    """Complete result of a cut list optimization.

    Attributes:
        stock_length: Length of every stock board in the plan.
        assignments: One entry per stock board, in the order they were opened.
    """

    stock_length: float
    assignments: tuple[StockAssignment, ...] = ()

    @property
    def board_count(self) -> int:
        """Number of stock boards needed."""
        return len(self.assignments)

    @property
    def cut_count(self) -> int:
        """Total number of cuts across all boards."""
        return sum(assignment.cut_count for assignment in self.assignments)

    @property
    def total_waste(self) -> float:
        return sum(assignment.waste for assignment in self.assignments)

    @property
    def total_stock_length(self) -> float:
        return self.stock_length * self.board_count

    @property
    def efficiency(self) -> float:
        """Overall fraction of purchased stock that ends up in cuts."""
        total = self.total_stock_length
        if total == 0:
            return 0.0
        return (total - self.total_waste) / total


class CutListOptimizer:
    """First-fit decreasing packing of board pieces onto stock boards.

    Pieces are expanded into individual lengths and sorted longest first
    (stable, so equal lengths keep their input order). Boards are filled one
    at a time: the pending list is scanned from the front and every length
    that still fits is cut from the current board, continuing forward after
    each placement. A board is closed once a full pass places nothing.

    The result is deterministic and easy to follow on the shop floor but not
    guaranteed to use the fewest boards.
    """

    def pack(
        self,
        pieces: Sequence[_Cuttable],
        stock_length: float = DEFAULT_STOCK_LENGTH,
    ) -> CuttingPlan:
        """Pack pieces onto stock boards.

        Args:
            pieces: Pieces with ``length`` and ``quantity`` attributes.
            stock_length: Length of one stock board.

        Returns:
            CuttingPlan with one assignment per stock board.

        Raises:
            InvalidCutListError: If the stock length or a piece length is
                not positive, or a quantity is negative.
            UnsatisfiablePieceError: If a piece is longer than the stock.
        """
        if stock_length <= 0:
            raise InvalidCutListError(f"Stock length must be positive, got {stock_length}")

        pending = self._sort_descending(self._expand_pieces(pieces, stock_length))
        logger.debug("Packing %d cuts onto %s stock", len(pending), stock_length)

        assignments: list[StockAssignment] = []
        while pending:
            cuts, pending = self._fill_board(pending, stock_length)
            assignment = StockAssignment(
                stock_length=stock_length,
                cuts=tuple(cuts),
                waste=max(0.0, stock_length - sum(cuts)),
            )
            assignments.append(assignment)

            logger.debug(
                "Board %d: %d cuts, %.1f waste (%.1f%% used)",
                len(assignments),
                assignment.cut_count,
                assignment.waste,
                assignment.efficiency * 100,
            )

        plan = CuttingPlan(stock_length=stock_length, assignments=tuple(assignments))
        if assignments:
            logger.info(
                "Packed %d cuts onto %d boards, %.1f%% efficiency",
                plan.cut_count,
                plan.board_count,
                plan.efficiency * 100,
            )
        return plan

    def _expand_pieces(
        self,
        pieces: Sequence[_Cuttable],
        stock_length: float,
    ) -> list[float]:
        """Expand each piece into ``quantity`` individual lengths.

        Validates every piece on the way so that nothing is silently dropped.
        """
        lengths: list[float] = []
        for piece in pieces:
            label = getattr(piece, "label", "")
            if piece.length <= 0:
                raise InvalidCutListError(
                    f"Piece length must be positive, got {piece.length}"
                )
            if piece.quantity < 0:
                raise InvalidCutListError(
                    f"Piece quantity must be non-negative, got {piece.quantity}"
                )
            if piece.length > stock_length:
                raise UnsatisfiablePieceError(piece.length, stock_length, label)
            lengths.extend([piece.length] * piece.quantity)
        return lengths

    def _sort_descending(self, lengths: list[float]) -> list[float]:
        """Sort longest first; sorted() is stable so ties keep input order."""
        return sorted(lengths, key=lambda length: -length)

    def _fill_board(
        self,
        pending: list[float],
        stock_length: float,
    ) -> tuple[list[float], list[float]]:
        """Cut as many pending lengths as possible from one board.

        Returns:
            Tuple of (cuts on this board, lengths still pending).
        """
        remaining = stock_length
        cuts: list[float] = []
        placed_in_pass = True

        while placed_in_pass and pending:
            placed_in_pass = False
            leftover: list[float] = []
            for length in pending:
                if length <= remaining + FIT_TOLERANCE:
                    cuts.append(length)
                    remaining -= length
                    placed_in_pass = True
                else:
                    leftover.append(length)
            pending = leftover

        return cuts, pending
