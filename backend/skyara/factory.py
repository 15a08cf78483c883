"""Factory functions for creating pre-configured FeasibilityEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skyara.data.repository import CostReferenceRepository
from skyara.data.seed import DEFAULT_COST_REFERENCE
from skyara.engine import FeasibilityEngine

if TYPE_CHECKING:
    from skyara.config import Settings


def create_default_engine() -> FeasibilityEngine:
    """Create a FeasibilityEngine wired up with the built-in reference costs.

    Example::

        from skyara import create_default_engine, default_levels, default_parameters

        engine = create_default_engine()
        estimate = engine.estimate(default_parameters(), default_levels(), "R+2 Agadir")
    """
    return FeasibilityEngine(CostReferenceRepository(DEFAULT_COST_REFERENCE))


def create_engine(settings: Settings) -> FeasibilityEngine:
    """Create a FeasibilityEngine honouring the configured cost reference file.

    Falls back to the built-in reference when no file is configured.

    Raises:
        ConfigurationError: If the configured file is missing or invalid.
    """
    if settings.cost_reference_path is None:
        return create_default_engine()
    repository = CostReferenceRepository.from_json_file(settings.cost_reference_path)
    return FeasibilityEngine(repository)
