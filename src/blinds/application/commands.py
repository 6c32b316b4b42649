"""Application commands (use cases) for blind generation."""

from __future__ import annotations

from typing import Mapping

from blinds.domain import (
    BoardListGenerator,
    CoveringCalculator,
    FrameLayoutEngine,
    FrameParameters,
)
from blinds.domain.constants import DEFAULT_STOCK_LENGTH
from blinds.infrastructure.cut_list_optimizer import CutListError, CutListOptimizer

from .dtos import BlindOutput


class GenerateBlindCommand:
    """Command to derive the layout, pieces and cutting plan of a frame."""

    def __init__(
        self,
        layout_engine: FrameLayoutEngine | None = None,
        covering_calculator: CoveringCalculator | None = None,
        board_list_generator: BoardListGenerator | None = None,
        optimizer: CutListOptimizer | None = None,
    ) -> None:
        self.layout_engine = layout_engine or FrameLayoutEngine()
        self.covering_calculator = covering_calculator or CoveringCalculator()
        self.board_list_generator = board_list_generator or BoardListGenerator()
        self.optimizer = optimizer or CutListOptimizer()

    def execute(
        self,
        params: FrameParameters,
        overrides: Mapping[int, float] | None = None,
        stock_length: float = DEFAULT_STOCK_LENGTH,
    ) -> BlindOutput:
        """Execute the generation command.

        Board pieces are packed onto linear stock. Covering panels are sheet
        or roll goods, so they are listed but not packed.

        Args:
            params: Frame parameters.
            overrides: Manual support positions keyed by 1-based index.
            stock_length: Length of one stock board.

        Returns:
            BlindOutput with the layout, pieces and cutting plan, or with
            errors if the parameters are invalid or a board cannot be cut.
        """
        errors = params.validate()
        if stock_length <= 0:
            errors.append("Stock length must be positive")
        if errors:
            return BlindOutput(layout=None, errors=errors)

        layout = self.layout_engine.layout(params, overrides)
        board_pieces = self.board_list_generator.boards(params, layout)
        covering_pieces = self.covering_calculator.covering(params, layout)

        try:
            plan = self.optimizer.pack(board_pieces, stock_length)
        except CutListError as e:
            return BlindOutput(
                layout=layout,
                board_pieces=board_pieces,
                covering_pieces=covering_pieces,
                errors=[str(e)],
            )

        return BlindOutput(
            layout=layout,
            board_pieces=board_pieces,
            covering_pieces=covering_pieces,
            cutting_plan=plan,
        )
