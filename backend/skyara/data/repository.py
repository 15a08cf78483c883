"""Cost reference repository and loader."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from skyara.data.reference_costs import DetailedCostReference
from skyara.exceptions import ConfigurationError
from skyara.models.enums import LevelKind

if TYPE_CHECKING:
    from pathlib import Path

    from skyara.data.reference_costs import StoreyReference

logger = logging.getLogger(__name__)


def load_cost_reference(path: Path) -> DetailedCostReference:
    """Load a reference cost table from a JSON file.

    Raises ConfigurationError if the file cannot be read or does not describe
    a valid table.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read cost reference file '{path}': {exc}"
        raise ConfigurationError(msg) from exc

    try:
        reference = DetailedCostReference.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid cost reference file '{path}': {exc}"
        raise ConfigurationError(msg) from exc

    logger.info("Loaded cost reference %s from %s", reference.version, path)
    return reference


class CostReferenceRepository:
    """Repository for looking up reference costs.

    Wraps one read-only DetailedCostReference and resolves the sub-table a
    level kind is priced with.
    """

    def __init__(self, reference: DetailedCostReference) -> None:
        self._reference = reference

    @classmethod
    def from_json_file(cls, path: Path) -> CostReferenceRepository:
        return cls(load_cost_reference(path))

    @property
    def reference(self) -> DetailedCostReference:
        return self._reference

    @property
    def version(self) -> str:
        return self._reference.version

    def get_storey_reference(self, kind: LevelKind) -> StoreyReference:
        """Get the storey sub-table used for a level kind.

        Basements are priced on the ground-floor table (the basement
        multiplier is applied by the estimator).
        """
        if kind in (LevelKind.GROUND_FLOOR, LevelKind.BASEMENT):
            return self._reference.ground_floor
        if kind == LevelKind.UPPER_FLOOR:
            return self._reference.upper_floor
        msg = f"No storey reference for level kind '{kind}'"
        raise ValueError(msg)
