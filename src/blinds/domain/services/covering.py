"""Covering panel calculation for fabric and plywood blinds."""

from __future__ import annotations

import logging
import math

from ..constants import PLYWOOD_SHEET_HEIGHT, PLYWOOD_SHEET_WIDTH
from ..value_objects import (
    CoveringMaterial,
    FrameParameters,
    Piece,
    PieceKind,
    StructuralLayout,
)

logger = logging.getLogger(__name__)

__all__ = ["CoveringCalculator"]


class CoveringCalculator:
    """Derives the covering pieces for a laid out frame.

    Fabric gets one panel per bay. Plywood depends on the frame width:
    frames narrower than a plate are covered by full-width plates stacked
    vertically, wider frames get one plate cut to each bay.
    """

    def covering(
        self,
        params: FrameParameters,
        layout: StructuralLayout,
    ) -> list[Piece]:
        """Compute covering pieces.

        Args:
            params: Frame parameters the layout was computed from.
            layout: Structural layout with the covering bays.

        Returns:
            List of covering pieces; empty when the frame has no covering.
        """
        material = params.covering_material
        if material is CoveringMaterial.FABRIC:
            pieces = self._fabric(params, layout)
        elif material is CoveringMaterial.PLYWOOD:
            if params.width < PLYWOOD_SHEET_WIDTH:
                pieces = self._stacked_plates(params)
            else:
                pieces = self._plates_per_bay(params, layout)
        else:
            return []

        usable = [piece for piece in pieces if self._is_cuttable(piece)]
        if len(usable) != len(pieces):
            logger.warning(
                "Skipped %d covering pieces with no material for frame %sx%s",
                len(pieces) - len(usable),
                params.width,
                params.height,
            )
        return usable

    def _fabric(
        self,
        params: FrameParameters,
        layout: StructuralLayout,
    ) -> list[Piece]:
        face_width = params.inner_width
        return [
            Piece(
                length=panel.extent - params.slat_depth,
                face_width=face_width,
                depth=0.0,
                quantity=1,
                label=f"Fabric panel {panel.index}",
                kind=PieceKind.FABRIC_PANEL,
            )
            for panel in layout.panels
        ]

    def _stacked_plates(self, params: FrameParameters) -> list[Piece]:
        """Full-width plates stacked along the frame height."""
        standard_count = math.floor(params.height / PLYWOOD_SHEET_HEIGHT)
        remainder = params.height - standard_count * PLYWOOD_SHEET_HEIGHT

        pieces: list[Piece] = []
        if standard_count > 0:
            pieces.append(
                Piece(
                    length=PLYWOOD_SHEET_HEIGHT,
                    face_width=params.width,
                    depth=params.plywood_thickness,
                    quantity=standard_count,
                    label="Plywood plate",
                    kind=PieceKind.PLYWOOD_PANEL,
                )
            )
        if remainder > 0:
            pieces.append(
                Piece(
                    length=remainder,
                    face_width=params.width,
                    depth=params.plywood_thickness,
                    quantity=1,
                    label="Plywood plate (remainder)",
                    kind=PieceKind.PLYWOOD_PANEL,
                )
            )
        return pieces

    def _plates_per_bay(
        self,
        params: FrameParameters,
        layout: StructuralLayout,
    ) -> list[Piece]:
        """One plate per bay, each cut to the support spacing.

        Bays squeezed to nothing by coinciding supports get no plate.
        """
        if layout.additional_supports > 0:
            bay = layout.effective_spacing
        else:
            # Without supports the single bay spans the usable height
            bay = params.usable_height

        bays = sum(1 for panel in layout.panels if panel.extent > 0)
        if bays < len(layout.panels):
            logger.warning(
                "Only %d of %d plywood bays have room for a plate",
                bays,
                len(layout.panels),
            )
        return [
            Piece(
                length=bay - params.slat_depth,
                face_width=params.width,
                depth=params.plywood_thickness,
                quantity=bays,
                label="Plywood bay panel",
                kind=PieceKind.PLYWOOD_PANEL,
            )
        ]

    @staticmethod
    def _is_cuttable(piece: Piece) -> bool:
        return piece.length > 0 and piece.face_width > 0 and piece.quantity > 0
