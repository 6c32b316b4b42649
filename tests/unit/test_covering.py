"""Unit tests for covering panel calculation."""

from __future__ import annotations

import pytest

from blinds.domain import (
    CoveringCalculator,
    FrameLayoutEngine,
    FrameParameters,
    PieceKind,
)


@pytest.fixture
def calculator() -> CoveringCalculator:
    return CoveringCalculator()


def covering_for(
    calculator: CoveringCalculator,
    engine: FrameLayoutEngine,
    params: FrameParameters,
):
    return calculator.covering(params, engine.layout(params))


class TestNoCovering:
    """Tests for frames without covering."""

    def test_empty(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        bare_params: FrameParameters,
    ) -> None:
        """Test that no covering pieces are produced."""
        assert covering_for(calculator, engine, bare_params) == []


class TestFabricCovering:
    """Tests for fabric panels."""

    def test_one_panel_per_bay(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        fabric_params: FrameParameters,
    ) -> None:
        """Test each bay gets a panel one slat depth shorter than the bay."""
        pieces = covering_for(calculator, engine, fabric_params)

        assert len(pieces) == 4
        for number, piece in enumerate(pieces, start=1):
            assert piece.length == pytest.approx(470.0)
            assert piece.face_width == 960.0
            assert piece.depth == 0.0
            assert piece.quantity == 1
            assert piece.kind is PieceKind.FABRIC_PANEL
            assert piece.label == f"Fabric panel {number}"

    def test_follows_moved_supports(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        fabric_params: FrameParameters,
    ) -> None:
        """Test panel lengths track manually placed supports."""
        layout = engine.layout(fabric_params, {1: 300.0})
        pieces = calculator.covering(fabric_params, layout)

        assert pieces[0].length == pytest.approx(260.0)
        assert pieces[1].length == pytest.approx(680.0)

    def test_no_inner_width_skips_panels(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        fabric_params: FrameParameters,
    ) -> None:
        """Test a frame without inner width produces no fabric."""
        params = fabric_params.with_changes(width=40.0)
        assert covering_for(calculator, engine, params) == []

    def test_bay_shorter_than_depth_skipped(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        fabric_params: FrameParameters,
    ) -> None:
        """Test a bay too small for a panel is omitted."""
        layout = engine.layout(fabric_params, {3: 1975.0})
        pieces = calculator.covering(fabric_params, layout)

        assert len(pieces) == 3
        assert [p.label for p in pieces] == [
            "Fabric panel 1",
            "Fabric panel 2",
            "Fabric panel 3",
        ]


class TestStackedPlywood:
    """Tests for plywood on frames narrower than a plate."""

    def test_single_short_plate(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test a frame shorter than a plate needs one remainder plate."""
        pieces = covering_for(calculator, engine, plywood_params)

        assert len(pieces) == 1
        piece = pieces[0]
        assert piece.length == 2000.0
        assert piece.face_width == 1000.0
        assert piece.depth == 12.0
        assert piece.quantity == 1
        assert piece.kind is PieceKind.PLYWOOD_PANEL

    def test_full_plates_and_remainder(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test full plates are grouped and the remainder listed separately."""
        params = plywood_params.with_changes(height=5000.0)
        pieces = covering_for(calculator, engine, params)

        assert [(p.length, p.quantity) for p in pieces] == [(2440.0, 2), (120.0, 1)]
        assert pieces[1].label == "Plywood plate (remainder)"

    def test_exact_plate_multiple(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test no remainder plate when the height is a plate multiple."""
        params = plywood_params.with_changes(height=4880.0)
        pieces = covering_for(calculator, engine, params)

        assert [(p.length, p.quantity) for p in pieces] == [(2440.0, 2)]

    def test_uses_plywood_thickness(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test plate depth is the configured plywood thickness."""
        params = plywood_params.with_changes(plywood_thickness=18.0)
        assert covering_for(calculator, engine, params)[0].depth == 18.0


class TestPlywoodPerBay:
    """Tests for plywood on frames at least one plate wide."""

    def test_one_plate_per_bay(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        wide_plywood_params: FrameParameters,
    ) -> None:
        """Test plates are counted per bay and cut to the spacing."""
        pieces = covering_for(calculator, engine, wide_plywood_params)

        assert len(pieces) == 1
        piece = pieces[0]
        assert piece.length == 480.0
        assert piece.face_width == 1300.0
        assert piece.depth == 12.0
        assert piece.quantity == 4

    def test_plate_width_frame(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        plywood_params: FrameParameters,
    ) -> None:
        """Test a frame exactly one plate wide is covered per bay."""
        params = plywood_params.with_changes(width=1220.0)
        pieces = covering_for(calculator, engine, params)

        assert [(p.length, p.face_width, p.quantity) for p in pieces] == [
            (480.0, 1220.0, 4)
        ]

    def test_without_supports(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        wide_plywood_params: FrameParameters,
    ) -> None:
        """Test a single bay spans the usable height."""
        params = wide_plywood_params.with_changes(height=400.0)
        pieces = covering_for(calculator, engine, params)

        assert [(p.length, p.quantity) for p in pieces] == [(340.0, 1)]

    def test_coinciding_supports_drop_empty_bay(
        self,
        calculator: CoveringCalculator,
        engine: FrameLayoutEngine,
        wide_plywood_params: FrameParameters,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test a bay squeezed shut between two supports gets no plate."""
        params = wide_plywood_params.with_changes(height=1000.0, support_spacing=100.0)
        layout = engine.layout(params)

        with caplog.at_level("WARNING", logger="blinds.domain.services.covering"):
            pieces = calculator.covering(params, layout)

        assert len(layout.panels) == 10
        assert [(p.length, p.quantity) for p in pieces] == [(80.0, 9)]
        assert "Only 9 of 10 plywood bays" in caplog.text
