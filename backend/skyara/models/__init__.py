"""Domain models for the Skyara feasibility engine."""

from skyara.models.enums import CalculationMode, LevelKind
from skyara.models.estimate import (
    CostBreakdown,
    CostCategory,
    CostDetails,
    EstimateMetadata,
    LevelEstimate,
    MaterialEstimate,
    ProjectEstimate,
    Totals,
)
from skyara.models.project import (
    Deduction,
    FixedDeduction,
    Level,
    PercentDeduction,
    ProjectParameters,
)

__all__ = [
    "CalculationMode",
    "CostBreakdown",
    "CostCategory",
    "CostDetails",
    "Deduction",
    "EstimateMetadata",
    "FixedDeduction",
    "Level",
    "LevelEstimate",
    "LevelKind",
    "MaterialEstimate",
    "PercentDeduction",
    "ProjectEstimate",
    "ProjectParameters",
    "Totals",
]
