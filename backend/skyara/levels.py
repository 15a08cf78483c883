"""Level list builders and editing helpers.

Level lists are never mutated in place: every helper returns a new list so
the caller can hand a fresh snapshot to the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from skyara.models.enums import LevelKind
from skyara.models.project import Level, ProjectParameters

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_GROSS_WORKS_PRICE = 1100.0  # DH/m²
DEFAULT_FINISHING_PRICE = 1100.0  # DH/m²
TERRACE_UNIT_PRICE = 500.0  # DH/m², gross works and finishing

_MIN_LEVELS = 2


def upper_floor_name(number: int) -> str:
    """French ordinal label of an upper floor ('1er Étage', '2ème Étage', ...)."""
    suffix = "er" if number == 1 else "ème"
    return f"{number}{suffix} Étage"


def default_parameters(**overrides: Any) -> ProjectParameters:
    """Parameters of the default R+2 project on a 100 m² parcel."""
    return ProjectParameters(**overrides)


def default_levels() -> list[Level]:
    """Foundation, RDC, two upper floors and a roof terrace."""
    return [
        Level(
            id="foundation",
            kind=LevelKind.FOUNDATION,
            name="Fondations",
            declared_surface=100.0,
            gross_works_unit_price=500.0,
            finishing_unit_price=0.0,
        ),
        Level(
            id="rdc",
            kind=LevelKind.GROUND_FLOOR,
            name="Rez-de-chaussée",
            declared_surface=84.0,
        ),
        Level(
            id="floor1",
            kind=LevelKind.UPPER_FLOOR,
            name=upper_floor_name(1),
            declared_surface=90.5,
        ),
        Level(
            id="floor2",
            kind=LevelKind.UPPER_FLOOR,
            name=upper_floor_name(2),
            declared_surface=90.5,
        ),
        Level(
            id="terrasse",
            kind=LevelKind.UPPER_FLOOR,
            name="Terrasse",
            is_terrace=True,
            declared_surface=100.0,
            gross_works_unit_price=TERRACE_UNIT_PRICE,
            finishing_unit_price=TERRACE_UNIT_PRICE,
        ),
    ]


def quick_simulation() -> tuple[ProjectParameters, list[Level]]:
    """Preset for a quick check: corner parcel (2 façades), R+2 without terrace."""
    params = default_parameters(terrain_area=100.0, facade_count=2, cos=2.1)
    levels = [
        Level(
            id="foundation",
            kind=LevelKind.FOUNDATION,
            name="Fondations",
            declared_surface=100.0,
            gross_works_unit_price=500.0,
            finishing_unit_price=0.0,
        ),
        Level(id="rdc", kind=LevelKind.GROUND_FLOOR, name="Rez-de-chaussée", declared_surface=91.0),
        Level(id="floor1", kind=LevelKind.UPPER_FLOOR, name=upper_floor_name(1), declared_surface=98.0),
        Level(id="floor2", kind=LevelKind.UPPER_FLOOR, name=upper_floor_name(2), declared_surface=98.0),
    ]
    return params, levels


def add_upper_floor(
    levels: Sequence[Level],
    gross_works_unit_price: float = DEFAULT_GROSS_WORKS_PRICE,
    finishing_unit_price: float = DEFAULT_FINISHING_PRICE,
) -> list[Level]:
    """Return a copy of ``levels`` with one more upper floor.

    The new floor goes right below the terrace when there is one, otherwise
    at the top of the building.
    """
    number = 1 + sum(
        1 for level in levels if level.kind == LevelKind.UPPER_FLOOR and not level.is_terrace
    )

    taken = {level.id for level in levels}
    level_id = f"floor{number}"
    suffix = 2
    while level_id in taken:
        level_id = f"floor{number}-{suffix}"
        suffix += 1

    new_level = Level(
        id=level_id,
        kind=LevelKind.UPPER_FLOOR,
        name=upper_floor_name(number),
        gross_works_unit_price=gross_works_unit_price,
        finishing_unit_price=finishing_unit_price,
    )

    result = list(levels)
    terrace_index = next((i for i, level in enumerate(result) if level.is_terrace), None)
    if terrace_index is None:
        result.append(new_level)
    else:
        result.insert(terrace_index, new_level)
    return result


def remove_last_level(levels: Sequence[Level]) -> list[Level]:
    """Return a copy of ``levels`` without its last level.

    With two levels or fewer (foundation and RDC) the list is returned
    unchanged.
    """
    if len(levels) > _MIN_LEVELS:
        return list(levels[:-1])
    return list(levels)
