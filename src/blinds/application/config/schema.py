"""Configuration schema for blind frame specifications.

This module contains the Pydantic models describing a stored frame: its
name, physical parameters, manual support positions and cut list options.
Length bounds are generous versions of the configurator's slider ranges.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from blinds.domain.constants import (
    DEFAULT_PLYWOOD_THICKNESS,
    DEFAULT_STOCK_LENGTH,
    MIN_DIVISION_SIZE,
)
from blinds.domain.value_objects import CoveringMaterial

# Supported schema versions for configuration files
# Version 1.0: Frame, covering and cut list configuration
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Display names follow the project dialog limits
MAX_NAME_LENGTH = 100

CoveringMaterialConfig = CoveringMaterial


class FrameConfig(BaseModel):
    """Physical dimensions of the frame and its covering.

    Attributes:
        width: Outer frame width (10 to 10000).
        height: Outer frame height (10 to 10000).
        slat_height: Board face dimension (1 to 500).
        slat_depth: Board thickness (1 to 200).
        support_spacing: Target spacing between supports.
        covering_material: Covering for the bays.
        plywood_thickness: Plywood thickness, used for plywood covering.
        division_size: Spacing of informational tick marks (optional).
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=10.0, le=10000.0)
    height: float = Field(..., ge=10.0, le=10000.0)
    slat_height: float = Field(default=45.0, ge=1.0, le=500.0)
    slat_depth: float = Field(default=20.0, ge=1.0, le=200.0)
    support_spacing: float = Field(default=500.0, gt=0, le=10000.0)
    covering_material: CoveringMaterialConfig = CoveringMaterialConfig.NONE
    plywood_thickness: float = Field(
        default=DEFAULT_PLYWOOD_THICKNESS,
        gt=0,
        le=100.0,
        description="Plywood thickness",
    )
    division_size: float | None = Field(
        default=None,
        ge=MIN_DIVISION_SIZE,
        description="Spacing of division marks (optional)",
    )

    @model_validator(mode="after")
    def validate_frame_geometry(self) -> "FrameConfig":
        """Ensure the sides leave room inside and supports do not overlap."""
        if self.width <= 2 * self.slat_depth:
            raise ValueError(
                f"width ({self.width}) must exceed twice the slat depth "
                f"({2 * self.slat_depth})"
            )
        if self.height <= 2 * self.slat_depth:
            raise ValueError(
                f"height ({self.height}) must exceed twice the slat depth "
                f"({2 * self.slat_depth})"
            )
        if self.support_spacing < self.slat_height:
            raise ValueError(
                f"support_spacing ({self.support_spacing}) must be at least the "
                f"slat height ({self.slat_height})"
            )
        return self


class CutListConfigSchema(BaseModel):
    """Configuration for the stock board cut list.

    Attributes:
        stock_length: Length of one stock board.
    """

    model_config = ConfigDict(extra="forbid")

    stock_length: float = Field(
        default=DEFAULT_STOCK_LENGTH,
        gt=0,
        le=20000.0,
        description="Stock board length",
    )


class BlindConfiguration(BaseModel):
    """Root configuration model for a named blind frame.

    Attributes:
        schema_version: Configuration schema version.
        name: Display name of the frame.
        frame: Frame dimensions and covering.
        overrides: Manual support positions keyed by 1-based support index.
        cut_list: Cut list options.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    name: str = Field(default="Blind", max_length=MAX_NAME_LENGTH)
    frame: FrameConfig
    overrides: dict[int, float] = Field(default_factory=dict)
    cut_list: CutListConfigSchema = Field(default_factory=CutListConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the name and require it to be non-empty."""
        v = v.strip()
        if not v:
            raise ValueError("Frame name is required")
        return v

    @field_validator("overrides")
    @classmethod
    def validate_override_indices(cls, v: dict[int, float]) -> dict[int, float]:
        for index, position in v.items():
            if index < 1:
                raise ValueError(f"Support index must be at least 1, got {index}")
            if position < 0:
                raise ValueError(
                    f"Support {index} position must be non-negative, got {position}"
                )
        return v
