"""Cost data layer for the Skyara feasibility engine."""

from skyara.data.reference_costs import DetailedCostReference
from skyara.data.repository import CostReferenceRepository, load_cost_reference
from skyara.data.seed import DEFAULT_COST_REFERENCE

__all__ = [
    "DEFAULT_COST_REFERENCE",
    "CostReferenceRepository",
    "DetailedCostReference",
    "load_cost_reference",
]
