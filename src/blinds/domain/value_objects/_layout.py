"""Structural layout value objects produced by the frame layout engine."""

from __future__ import annotations

from dataclasses import dataclass

from ._frame import Rect


@dataclass(frozen=True)
class FrameSides:
    """The four outer boards of the frame, each one slat depth thick."""

    left: Rect
    top: Rect
    right: Rect
    bottom: Rect

    def __iter__(self):
        return iter((self.left, self.top, self.right, self.bottom))


@dataclass(frozen=True)
class SupportDescriptor:
    """A horizontal support spanning the inner width of the frame.

    Attributes:
        index: 1-based index counted from the top of the frame.
        position: Distance from the outer top edge of the frame.
        is_custom: True if the position comes from a manual override.
        is_selected: True if the support is highlighted in the editor.
    """

    index: int
    position: float
    is_custom: bool = False
    is_selected: bool = False

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("Support index must be at least 1")


@dataclass(frozen=True)
class PanelDescriptor:
    """A covering bay between two consecutive boundaries.

    Attributes:
        index: 1-based index counted from the top of the frame.
        start: Distance of the bay's upper boundary from the outer top edge.
        extent: Height of the bay.
    """

    index: int
    start: float
    extent: float

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("Panel index must be at least 1")
        if self.extent < 0:
            raise ValueError("Panel extent must be non-negative")

    @property
    def end(self) -> float:
        return self.start + self.extent


@dataclass(frozen=True)
class DivisionMark:
    """Informational tick mark, independent of the supports."""

    position: float


@dataclass(frozen=True)
class StructuralLayout:
    """Complete structural layout of one blind frame.

    Recomputed from FrameParameters and overrides on every change; it has no
    identity beyond one computation, so two layouts computed from equal
    inputs compare equal.

    Attributes:
        width: Outer frame width.
        height: Outer frame height.
        slat_depth: Board thickness (frame side thickness).
        slat_height: Board face dimension (support thickness on the drawing).
        additional_supports: Number of horizontal supports.
        effective_spacing: Spacing actually used between supports.
        sides: The four frame side rectangles.
        supports: Supports ordered from top to bottom.
        panels: Covering bays ordered from top to bottom.
        division_marks: Tick marks ordered from top to bottom.
    """

    width: float
    height: float
    slat_depth: float
    slat_height: float
    additional_supports: int
    effective_spacing: float
    sides: FrameSides
    supports: tuple[SupportDescriptor, ...] = ()
    panels: tuple[PanelDescriptor, ...] = ()
    division_marks: tuple[DivisionMark, ...] = ()

    @property
    def usable_start(self) -> float:
        """Upper boundary of the inner usable span."""
        return self.slat_depth

    @property
    def usable_end(self) -> float:
        """Lower boundary of the inner usable span."""
        return max(self.slat_depth, self.height - self.slat_depth)

    @property
    def usable_height(self) -> float:
        return self.usable_end - self.usable_start

    def support_positions(self) -> dict[int, float]:
        """Map each support index to its current position."""
        return {support.index: support.position for support in self.supports}

    def support_at(self, index: int) -> SupportDescriptor | None:
        for support in self.supports:
            if support.index == index:
                return support
        return None

    def support_rect(self, support: SupportDescriptor) -> Rect:
        """Rectangle occupied by a support on the drawing.

        The support spans the inner width and is one slat face tall,
        centred on its position.
        """
        inner_width = max(0.0, self.width - 2 * self.slat_depth)
        return Rect(
            x=self.slat_depth,
            y=support.position - self.slat_height / 2,
            width=inner_width,
            height=self.slat_height,
        )
