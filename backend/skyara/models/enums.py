"""Enums for the Skyara domain models."""

from enum import StrEnum


class LevelKind(StrEnum):
    """Structural tier of the building.

    A terrace is not a kind of its own: it is an ``UPPER_FLOOR`` carrying
    ``Level.is_terrace``.
    """

    FOUNDATION = "foundation"
    GROUND_FLOOR = "ground_floor"
    UPPER_FLOOR = "upper_floor"
    BASEMENT = "basement"


class CalculationMode(StrEnum):
    """How level costs are priced."""

    DETAILED = "detailed"
    FLAT = "flat"
