"""Unit tests for frame board list generation."""

from __future__ import annotations

import pytest

from blinds.domain import (
    BoardListGenerator,
    FrameLayoutEngine,
    FrameParameters,
    PieceKind,
)


@pytest.fixture
def generator() -> BoardListGenerator:
    return BoardListGenerator()


class TestBoardListGenerator:
    """Tests for BoardListGenerator.boards()."""

    def test_plywood_frame(
        self,
        generator: BoardListGenerator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test sides, rails and supports of a covered frame."""
        boards = generator.boards(plywood_params, engine.layout(plywood_params))

        assert [(b.kind, b.length, b.quantity) for b in boards] == [
            (PieceKind.FRAME_SIDE, 2000.0, 2),
            (PieceKind.FRAME_RAIL, 960.0, 2),
            (PieceKind.SUPPORT, 960.0, 3),
        ]
        for board in boards:
            assert board.face_width == 45.0
            assert board.depth == 20.0

    def test_labels(
        self,
        generator: BoardListGenerator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test board labels used in reports."""
        boards = generator.boards(plywood_params, engine.layout(plywood_params))
        assert [b.label for b in boards] == ["Frame side", "Frame rail", "Support"]

    def test_no_supports_without_covering(
        self,
        generator: BoardListGenerator,
        engine: FrameLayoutEngine,
        bare_params: FrameParameters,
    ) -> None:
        """Test an uncovered frame needs only sides and rails."""
        boards = generator.boards(bare_params, engine.layout(bare_params))
        assert [b.kind for b in boards] == [PieceKind.FRAME_SIDE, PieceKind.FRAME_RAIL]

    def test_total_board_length(
        self,
        generator: BoardListGenerator,
        engine: FrameLayoutEngine,
        fabric_params: FrameParameters,
    ) -> None:
        """Test the combined length of all boards."""
        boards = generator.boards(fabric_params, engine.layout(fabric_params))
        assert sum(b.total_length for b in boards) == 2 * 2000.0 + 5 * 960.0

    def test_no_inner_width_omits_cross_boards(
        self,
        generator: BoardListGenerator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test rails and supports with no length are left out."""
        params = plywood_params.with_changes(width=40.0)
        boards = generator.boards(params, engine.layout(params))

        assert [b.kind for b in boards] == [PieceKind.FRAME_SIDE]
