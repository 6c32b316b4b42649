"""Adapters between configuration models and domain objects."""

from __future__ import annotations

from collections.abc import Mapping

from blinds.application.config.schema import (
    BlindConfiguration,
    CutListConfigSchema,
    FrameConfig,
)
from blinds.domain.value_objects import FrameParameters


def config_to_parameters(config: BlindConfiguration) -> FrameParameters:
    """Convert the frame section of a configuration to FrameParameters."""
    frame = config.frame
    return FrameParameters(
        width=frame.width,
        height=frame.height,
        slat_height=frame.slat_height,
        slat_depth=frame.slat_depth,
        support_spacing=frame.support_spacing,
        covering_material=frame.covering_material,
        plywood_thickness=frame.plywood_thickness,
        division_size=frame.division_size,
    )


def config_to_overrides(config: BlindConfiguration) -> dict[int, float]:
    """Return a fresh copy of the manual support positions."""
    return dict(config.overrides)


def config_to_stock_length(config: BlindConfiguration) -> float:
    return config.cut_list.stock_length


def parameters_to_config(
    params: FrameParameters,
    name: str,
    overrides: Mapping[int, float] | None = None,
    stock_length: float | None = None,
) -> BlindConfiguration:
    """Build a configuration model from domain parameters.

    Raises:
        pydantic.ValidationError: If the parameters fall outside the
            configuration bounds.
    """
    cut_list = (
        CutListConfigSchema(stock_length=stock_length)
        if stock_length is not None
        else CutListConfigSchema()
    )
    return BlindConfiguration(
        name=name,
        frame=FrameConfig(
            width=params.width,
            height=params.height,
            slat_height=params.slat_height,
            slat_depth=params.slat_depth,
            support_spacing=params.support_spacing,
            covering_material=params.covering_material,
            plywood_thickness=params.plywood_thickness,
            division_size=params.division_size,
        ),
        overrides=dict(overrides or {}),
        cut_list=cut_list,
    )
