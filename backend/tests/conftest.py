"""Shared fixtures for the Skyara test suite."""

from __future__ import annotations

import pytest

from skyara.data.repository import CostReferenceRepository
from skyara.data.seed import DEFAULT_COST_REFERENCE
from skyara.engine import FeasibilityEngine
from skyara.levels import default_levels
from skyara.models.enums import CalculationMode
from skyara.models.project import Level, ProjectParameters


@pytest.fixture()
def repository() -> CostReferenceRepository:
    return CostReferenceRepository(DEFAULT_COST_REFERENCE)


@pytest.fixture()
def engine(repository: CostReferenceRepository) -> FeasibilityEngine:
    return FeasibilityEngine(repository)


@pytest.fixture()
def params() -> ProjectParameters:
    """Default R+2 parameters on a 100 m² parcel, detailed mode."""
    return ProjectParameters()


@pytest.fixture()
def flat_params() -> ProjectParameters:
    return ProjectParameters(calculation_mode=CalculationMode.FLAT)


@pytest.fixture()
def levels() -> list[Level]:
    """Foundation, RDC, two upper floors and a terrace."""
    return default_levels()
