"""Custom exception hierarchy for the Skyara feasibility engine."""

from __future__ import annotations


class SkyaraError(Exception):
    """Base exception for all Skyara errors."""


class ConfigurationError(SkyaraError):
    """Raised when a project or cost reference breaks the engine's input contract."""


class CostEstimationError(SkyaraError):
    """Raised when cost estimation fails."""


class ReportRenderingError(SkyaraError):
    """Raised when a feasibility report cannot be rendered."""
