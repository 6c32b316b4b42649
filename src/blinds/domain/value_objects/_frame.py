"""Frame parameters and their validation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from ..constants import DEFAULT_PLYWOOD_THICKNESS, MIN_DIVISION_SIZE


class CoveringMaterial(str, Enum):
    """Material filling the bays between supports."""

    NONE = "none"
    FABRIC = "fabric"
    PLYWOOD = "plywood"


class FrameValidationError(ValueError):
    """Raised when frame parameters cannot describe a buildable frame.

    Attributes:
        errors: Every violated constraint, one message each.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass(frozen=True)
class FrameParameters:
    """Physical inputs for a blind frame.

    Construction accepts any numbers so that degenerate frames can still be
    laid out; call validate() or require_valid() before trusting them.

    Attributes:
        width: Outer frame width.
        height: Outer frame height.
        slat_height: Face dimension of a board.
        slat_depth: Thickness of a board.
        support_spacing: Target spacing between horizontal supports.
        covering_material: Covering for the bays.
        plywood_thickness: Plywood thickness, used only for plywood covering.
        division_size: Spacing of informational tick marks, if any.
    """

    width: float
    height: float
    slat_height: float
    slat_depth: float
    support_spacing: float
    covering_material: CoveringMaterial = CoveringMaterial.NONE
    plywood_thickness: float = DEFAULT_PLYWOOD_THICKNESS
    division_size: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.covering_material, CoveringMaterial):
            # frozen dataclass: coerce "plywood" -> CoveringMaterial.PLYWOOD
            object.__setattr__(
                self, "covering_material", CoveringMaterial(self.covering_material)
            )

    @property
    def usable_height(self) -> float:
        """Height between the top and bottom frame rails."""
        return self.height - 2 * self.slat_depth

    @property
    def inner_width(self) -> float:
        """Width between the left and right frame sides."""
        return self.width - 2 * self.slat_depth

    @property
    def area(self) -> float:
        """Outer frame area in square length units."""
        return self.width * self.height

    @property
    def has_covering(self) -> bool:
        return self.covering_material is not CoveringMaterial.NONE

    def validate(self) -> list[str]:
        """Validate parameters and return a list of error messages."""
        errors: list[str] = []
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.slat_height <= 0:
            errors.append("Slat height must be positive")
        if self.slat_depth <= 0:
            errors.append("Slat depth must be positive")
        if self.support_spacing <= 0:
            errors.append("Support spacing must be positive")
        elif self.slat_height > 0 and self.support_spacing < self.slat_height:
            # Supports closer than one slat face would overlap
            errors.append(
                f"Support spacing ({self.support_spacing}) must be at least the "
                f"slat height ({self.slat_height})"
            )
        if self.slat_depth > 0:
            if self.width > 0 and self.width <= 2 * self.slat_depth:
                errors.append(
                    f"Width ({self.width}) must exceed twice the slat depth "
                    f"({2 * self.slat_depth})"
                )
            if self.height > 0 and self.height <= 2 * self.slat_depth:
                errors.append(
                    f"Height ({self.height}) must exceed twice the slat depth "
                    f"({2 * self.slat_depth})"
                )
        if (
            self.covering_material is CoveringMaterial.PLYWOOD
            and self.plywood_thickness <= 0
        ):
            errors.append("Plywood thickness must be positive")
        if self.division_size is not None:
            if self.division_size <= 0:
                errors.append("Division size must be positive when set")
            elif self.division_size < MIN_DIVISION_SIZE:
                errors.append(
                    f"Division size must be at least {MIN_DIVISION_SIZE:g} when set"
                )
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    def require_valid(self) -> "FrameParameters":
        """Return self, or raise FrameValidationError listing every problem."""
        errors = self.validate()
        if errors:
            raise FrameValidationError(errors)
        return self

    def with_changes(self, **changes: Any) -> "FrameParameters":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in frame coordinates.

    Origin is the outer top-left corner of the frame; y grows downwards.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle dimensions must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        """Check whether a point lies inside the rectangle (edges included)."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom


@dataclass(frozen=True)
class Point:
    """Pointer position in frame coordinates."""

    x: float
    y: float
