"""Output formatters for blind layouts, piece lists and cutting plans."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from blinds.domain import Piece, StructuralLayout

from .cut_list_optimizer import CuttingPlan

if TYPE_CHECKING:
    from blinds.application.dtos import BlindOutput


class LayoutFormatter:
    """Formats a structural layout as a support and bay table."""

    def format(self, layout: StructuralLayout) -> str:
        lines = [
            "FRAME LAYOUT",
            "=" * 60,
            f"Frame: {layout.width:g} x {layout.height:g} "
            f"(slat depth {layout.slat_depth:g})",
            f"Supports: {layout.additional_supports}   "
            f"Effective spacing: {layout.effective_spacing:.1f}",
            "-" * 60,
        ]

        if layout.supports:
            lines.append(f"{'Support':<10} {'Position':<12} {'Custom'}")
            for support in layout.supports:
                custom = "yes" if support.is_custom else ""
                lines.append(f"{support.index:<10} {support.position:<12.1f} {custom}")
            lines.append("-" * 60)

        lines.append(f"{'Bay':<10} {'Start':<12} {'Extent'}")
        for panel in layout.panels:
            lines.append(f"{panel.index:<10} {panel.start:<12.1f} {panel.extent:.1f}")

        if layout.division_marks:
            marks = ", ".join(f"{mark.position:g}" for mark in layout.division_marks)
            lines.append("-" * 60)
            lines.append(f"Division marks: {marks}")

        return "\n".join(lines)


class PieceListFormatter:
    """Formats piece lists for display."""

    def __init__(self, title: str = "PIECE LIST") -> None:
        self._title = title

    def format(self, pieces: list[Piece]) -> str:
        if not pieces:
            return "No pieces in list."

        lines = [
            self._title,
            "=" * 70,
            f"{'Piece':<26} {'Length':<10} {'Face':<10} {'Depth':<8} {'Qty'}",
            "-" * 70,
        ]

        total_length = 0.0
        for piece in pieces:
            lines.append(
                f"{piece.label:<26} {piece.length:<10.1f} {piece.face_width:<10.1f} "
                f"{piece.depth:<8.1f} {piece.quantity}"
            )
            total_length += piece.total_length

        lines.append("-" * 70)
        lines.append(f"{'TOTAL LENGTH':<26} {total_length:.1f}")

        return "\n".join(lines)


class CuttingPlanFormatter:
    """Formats a cutting plan, one line per stock board."""

    def format(self, plan: CuttingPlan) -> str:
        if not plan.assignments:
            return "No boards required."

        lines = [
            f"CUTTING PLAN (stock length {plan.stock_length:g})",
            "=" * 70,
            f"{'Board':<7} {'Cuts':<42} {'Waste':<9} {'Used'}",
            "-" * 70,
        ]

        for number, assignment in enumerate(plan.assignments, start=1):
            cuts = " + ".join(f"{cut:g}" for cut in assignment.cuts)
            lines.append(
                f"{number:<7} {cuts:<42} {assignment.waste:<9.1f} "
                f"{assignment.efficiency * 100:.1f}%"
            )

        lines.append("-" * 70)
        lines.append(
            f"{plan.board_count} board(s), total waste {plan.total_waste:.1f}, "
            f"efficiency {plan.efficiency * 100:.1f}%"
        )

        return "\n".join(lines)


class JsonFormatter:
    """Formats a complete blind output as JSON."""

    def format(self, output: BlindOutput) -> str:
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: BlindOutput) -> dict[str, Any]:
        data: dict[str, Any] = {"errors": list(output.errors)}

        layout = output.layout
        if layout is not None:
            data["layout"] = {
                "width": layout.width,
                "height": layout.height,
                "additional_supports": layout.additional_supports,
                "effective_spacing": layout.effective_spacing,
                "supports": [
                    {
                        "index": s.index,
                        "position": s.position,
                        "is_custom": s.is_custom,
                    }
                    for s in layout.supports
                ],
                "panels": [
                    {"index": p.index, "start": p.start, "extent": p.extent}
                    for p in layout.panels
                ],
                "division_marks": [m.position for m in layout.division_marks],
            }

        data["pieces"] = [self._piece_to_dict(piece) for piece in output.pieces]

        plan = output.cutting_plan
        if plan is not None:
            data["cutting_plan"] = {
                "stock_length": plan.stock_length,
                "board_count": plan.board_count,
                "total_waste": plan.total_waste,
                "efficiency": round(plan.efficiency, 4),
                "boards": [
                    {"cuts": list(a.cuts), "waste": a.waste}
                    for a in plan.assignments
                ],
            }

        return data

    @staticmethod
    def _piece_to_dict(piece: Piece) -> dict[str, Any]:
        return {
            "label": piece.label,
            "kind": piece.kind.value if piece.kind else None,
            "length": piece.length,
            "face_width": piece.face_width,
            "depth": piece.depth,
            "quantity": piece.quantity,
        }
