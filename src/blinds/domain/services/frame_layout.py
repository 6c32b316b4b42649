"""Frame layout engine.

This module turns FrameParameters (plus optional manual support overrides)
into a StructuralLayout: the four frame sides, the horizontal supports, the
covering bays between them and the informational division marks.

Coordinates are measured along the frame height from the outer top edge.
The inner usable span runs from ``slat_depth`` to ``height - slat_depth``;
nominal support positions are laid out from the inner top edge.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping

from ..constants import PLYWOOD_SHEET_WIDTH, SUPPORT_EDGE_MARGIN
from ..value_objects import (
    CoveringMaterial,
    DivisionMark,
    FrameParameters,
    FrameSides,
    PanelDescriptor,
    Rect,
    StructuralLayout,
    SupportDescriptor,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FrameLayoutEngine",
    "clamp_position",
    "count_supports",
    "effective_spacing",
    "support_bounds",
]


def count_supports(params: FrameParameters) -> int:
    """Number of horizontal supports for the given parameters.

    Frames without covering have no supports. Otherwise one support is
    added for every full ``support_spacing`` of usable height, provided
    the frame is taller than the spacing.
    """
    if not params.has_covering:
        return 0
    if params.support_spacing <= 0 or params.height <= params.support_spacing:
        return 0
    usable = params.usable_height
    if usable <= 0:
        return 0
    return math.floor(usable / params.support_spacing)


def effective_spacing(params: FrameParameters, supports: int) -> float:
    """Spacing actually used between supports.

    Fabric is stretched over equal bays, so the supports are distributed
    evenly across the usable height. Plywood keeps the fixed spacing.
    """
    if params.covering_material is CoveringMaterial.FABRIC and supports > 0:
        return params.usable_height / (supports + 1)
    return params.support_spacing


def support_bounds(
    height: float,
    slat_depth: float,
    margin: float = SUPPORT_EDGE_MARGIN,
) -> tuple[float, float]:
    """Band a support position must stay in to clear the frame rails.

    Returns:
        Tuple of (lower, upper). When the frame is too short for the margin
        both collapse onto the middle of the frame.
    """
    lower = slat_depth + margin
    upper = height - slat_depth - margin
    if lower > upper:
        middle = height / 2
        return middle, middle
    return lower, upper


def clamp_position(position: float, bounds: tuple[float, float]) -> float:
    lower, upper = bounds
    return min(max(position, lower), upper)


class FrameLayoutEngine:
    """Computes the structural layout of a blind frame.

    The engine is stateless: layout() is a pure function of its arguments
    and never mutates the overrides mapping it is given.

    Attributes:
        edge_margin: Minimum clearance between a support and the frame rails.
    """

    def __init__(self, edge_margin: float = SUPPORT_EDGE_MARGIN) -> None:
        if edge_margin < 0:
            raise ValueError("Edge margin must be non-negative")
        self.edge_margin = edge_margin

    def layout(
        self,
        params: FrameParameters,
        overrides: Mapping[int, float] | None = None,
        selected: int | None = None,
    ) -> StructuralLayout:
        """Lay out the frame.

        Degenerate parameters (no usable height, non-positive spacing) never
        raise; they produce a well-formed layout with no supports. Validate
        the parameters beforehand to reject them instead.

        Args:
            params: Physical frame parameters.
            overrides: Manual support positions keyed by 1-based index.
                Indices beyond the current support count are ignored.
            selected: Index of the support highlighted in the editor.

        Returns:
            StructuralLayout with sides, supports, panels and division marks.
        """
        overrides = overrides or {}
        sides = self.frame_sides(params)
        marks = self.division_marks(params)
        usable = params.usable_height

        if usable <= 0:
            logger.debug(
                "Frame height %s leaves no usable span for slat depth %s",
                params.height,
                params.slat_depth,
            )
            return StructuralLayout(
                width=params.width,
                height=params.height,
                slat_depth=params.slat_depth,
                slat_height=params.slat_height,
                additional_supports=0,
                effective_spacing=params.support_spacing,
                sides=sides,
                supports=(),
                panels=(PanelDescriptor(index=1, start=params.slat_depth, extent=0.0),),
                division_marks=marks,
            )

        count = count_supports(params)
        spacing = effective_spacing(params, count)

        stale = sorted(index for index in overrides if not 1 <= index <= count)
        if stale:
            logger.debug("Ignoring overrides for missing supports: %s", stale)

        supports = self._place_supports(params, count, spacing, overrides, selected)
        panels = self._build_panels(params, supports)

        logger.debug(
            "Layout %sx%s: %d supports at spacing %.2f, %d panels",
            params.width,
            params.height,
            count,
            spacing,
            len(panels),
        )

        return StructuralLayout(
            width=params.width,
            height=params.height,
            slat_depth=params.slat_depth,
            slat_height=params.slat_height,
            additional_supports=count,
            effective_spacing=spacing,
            sides=sides,
            supports=supports,
            panels=panels,
            division_marks=marks,
        )

    def nominal_position(
        self,
        params: FrameParameters,
        index: int,
        spacing: float,
    ) -> float:
        """Computed position of a support before overrides and clamping.

        Frames wider than a plywood plate need a seam per bay; every stacked
        seam after the first consumes one more board depth, so supports
        past the first are pushed down by ``index * slat_depth``.
        """
        position = params.slat_depth + index * spacing
        if (
            params.covering_material is CoveringMaterial.PLYWOOD
            and params.width > PLYWOOD_SHEET_WIDTH
            and index > 1
        ):
            position += index * params.slat_depth
        return position

    def _place_supports(
        self,
        params: FrameParameters,
        count: int,
        spacing: float,
        overrides: Mapping[int, float],
        selected: int | None,
    ) -> tuple[SupportDescriptor, ...]:
        bounds = support_bounds(params.height, params.slat_depth, self.edge_margin)
        supports: list[SupportDescriptor] = []
        collapsed: list[int] = []
        previous = bounds[0]

        for index in range(1, count + 1):
            is_custom = index in overrides
            if is_custom:
                position = overrides[index]
            else:
                position = self.nominal_position(params, index, spacing)
            position = clamp_position(position, bounds)
            # A support never sits above the one before it
            position = max(position, previous)
            if supports and position == previous and not is_custom:
                collapsed.append(index)
            previous = position

            supports.append(
                SupportDescriptor(
                    index=index,
                    position=position,
                    is_custom=is_custom,
                    is_selected=index == selected,
                )
            )

        if collapsed:
            logger.warning(
                "Supports %s coincide with the support above: %s tall frame is "
                "too short for spacing %.1f",
                collapsed,
                params.height,
                spacing,
            )
        return tuple(supports)

    def _build_panels(
        self,
        params: FrameParameters,
        supports: tuple[SupportDescriptor, ...],
    ) -> tuple[PanelDescriptor, ...]:
        """Split the usable span into bays at the support positions."""
        boundaries = [params.slat_depth]
        boundaries.extend(support.position for support in supports)
        boundaries.append(params.height - params.slat_depth)

        return tuple(
            PanelDescriptor(index=i + 1, start=start, extent=end - start)
            for i, (start, end) in enumerate(zip(boundaries, boundaries[1:]))
        )

    def frame_sides(self, params: FrameParameters) -> FrameSides:
        """Rectangles of the four frame boards."""
        width = max(0.0, params.width)
        height = max(0.0, params.height)
        depth = max(0.0, min(params.slat_depth, width, height))
        return FrameSides(
            left=Rect(0.0, 0.0, depth, height),
            top=Rect(0.0, 0.0, width, depth),
            right=Rect(width - depth, 0.0, depth, height),
            bottom=Rect(0.0, height - depth, width, depth),
        )

    def division_marks(self, params: FrameParameters) -> tuple[DivisionMark, ...]:
        """Tick marks every ``division_size`` from the top edge.

        Marks are purely informational and ignore the supports.
        """
        size = params.division_size
        if size is None or size <= 0 or params.height <= 0:
            return ()
        count = math.floor(params.height / size)
        return tuple(DivisionMark(position=k * size) for k in range(1, count + 1))
