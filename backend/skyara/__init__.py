"""Skyara feasibility engine for small residential building projects.

Usage::

    from skyara import create_default_engine, default_levels, default_parameters

    engine = create_default_engine()
    estimate = engine.estimate(default_parameters(), default_levels(), "R+2 Agadir")
"""

from skyara.engine import FeasibilityEngine
from skyara.exceptions import (
    ConfigurationError,
    CostEstimationError,
    ReportRenderingError,
    SkyaraError,
)
from skyara.factory import create_default_engine, create_engine
from skyara.levels import (
    add_upper_floor,
    default_levels,
    default_parameters,
    quick_simulation,
    remove_last_level,
)
from skyara.models.enums import CalculationMode, LevelKind
from skyara.models.estimate import (
    CostBreakdown,
    CostCategory,
    CostDetails,
    LevelEstimate,
    MaterialEstimate,
    ProjectEstimate,
    Totals,
)
from skyara.models.project import (
    FixedDeduction,
    Level,
    PercentDeduction,
    ProjectParameters,
)
from skyara.report import FeasibilityReport, build_report

__all__ = [
    "CalculationMode",
    "ConfigurationError",
    "CostBreakdown",
    "CostCategory",
    "CostDetails",
    "CostEstimationError",
    "FeasibilityEngine",
    "FeasibilityReport",
    "FixedDeduction",
    "Level",
    "LevelEstimate",
    "LevelKind",
    "MaterialEstimate",
    "PercentDeduction",
    "ProjectEstimate",
    "ProjectParameters",
    "ReportRenderingError",
    "SkyaraError",
    "Totals",
    "add_upper_floor",
    "build_report",
    "create_default_engine",
    "create_engine",
    "default_levels",
    "default_parameters",
    "quick_simulation",
    "remove_last_level",
]
