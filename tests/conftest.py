"""Pytest configuration and shared fixtures for blind tests."""

from __future__ import annotations

import pytest

from blinds.domain import CoveringMaterial, FrameLayoutEngine, FrameParameters


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared frame fixtures
# =============================================================================


@pytest.fixture
def engine() -> FrameLayoutEngine:
    """Create a layout engine with the default edge margin."""
    return FrameLayoutEngine()


@pytest.fixture
def plywood_params() -> FrameParameters:
    """2000 tall plywood frame narrower than a plate: 3 supports at 500."""
    return FrameParameters(
        width=1000.0,
        height=2000.0,
        slat_height=45.0,
        slat_depth=20.0,
        support_spacing=500.0,
        covering_material=CoveringMaterial.PLYWOOD,
        plywood_thickness=12.0,
    )


@pytest.fixture
def wide_plywood_params(plywood_params: FrameParameters) -> FrameParameters:
    """Same frame but wider than a plywood plate."""
    return plywood_params.with_changes(width=1300.0)


@pytest.fixture
def fabric_params(plywood_params: FrameParameters) -> FrameParameters:
    """Same frame with fabric covering: 3 evenly distributed supports."""
    return plywood_params.with_changes(covering_material=CoveringMaterial.FABRIC)


@pytest.fixture
def bare_params(plywood_params: FrameParameters) -> FrameParameters:
    """Same frame without covering, and therefore without supports."""
    return plywood_params.with_changes(covering_material=CoveringMaterial.NONE)
