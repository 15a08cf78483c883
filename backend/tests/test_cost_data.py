"""Tests for the reference cost table, its seed data and the repository."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from skyara.data import (
    DEFAULT_COST_REFERENCE,
    CostReferenceRepository,
    DetailedCostReference,
    load_cost_reference,
)
from skyara.exceptions import ConfigurationError
from skyara.models.enums import LevelKind

if TYPE_CHECKING:
    from pathlib import Path

# ---------- Seed data ----------


class TestSeedReference:
    def test_version(self) -> None:
        assert DEFAULT_COST_REFERENCE.version == "2025.1"
        assert DEFAULT_COST_REFERENCE.reference_surface == 100.0

    def test_foundation_total(self) -> None:
        foundation = DEFAULT_COST_REFERENCE.foundation
        assert foundation.labor + foundation.materials == pytest.approx(50_060.0)

    def test_ground_floor_totals(self) -> None:
        storey = DEFAULT_COST_REFERENCE.ground_floor
        assert storey.gross_works.total == pytest.approx(92_460.0)
        assert storey.finishing.total == pytest.approx(96_400.0)

    def test_upper_floor_totals(self) -> None:
        storey = DEFAULT_COST_REFERENCE.upper_floor
        assert storey.gross_works.total == pytest.approx(96_600.0)
        assert storey.finishing.total == pytest.approx(99_200.0)

    def test_terrace_totals(self) -> None:
        terrace = DEFAULT_COST_REFERENCE.terrace
        assert terrace.labor + terrace.materials == pytest.approx(31_380.0)
        assert terrace.finishing == pytest.approx(27_000.0)

    def test_multipliers_and_fees(self) -> None:
        assert DEFAULT_COST_REFERENCE.basement_multiplier == 1.2
        assert DEFAULT_COST_REFERENCE.connection_fees_fixed == 15_000.0

    def test_finishing_labor_shares(self) -> None:
        shares = DEFAULT_COST_REFERENCE.finishing_labor_shares
        assert (shares.plaster, shares.tiling, shares.paint) == (0.4, 0.4, 0.5)
        labor = shares.labor_of(DEFAULT_COST_REFERENCE.upper_floor.finishing)
        assert labor == pytest.approx(16_480.0)

    def test_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_COST_REFERENCE.version = "hacked"  # type: ignore[misc]


# ---------- Repository ----------


class TestCostReferenceRepository:
    def test_version(self, repository: CostReferenceRepository) -> None:
        assert repository.version == "2025.1"
        assert repository.reference is DEFAULT_COST_REFERENCE

    def test_ground_floor_table(self, repository: CostReferenceRepository) -> None:
        table = repository.get_storey_reference(LevelKind.GROUND_FLOOR)
        assert table is DEFAULT_COST_REFERENCE.ground_floor

    def test_upper_floor_table(self, repository: CostReferenceRepository) -> None:
        table = repository.get_storey_reference(LevelKind.UPPER_FLOOR)
        assert table is DEFAULT_COST_REFERENCE.upper_floor

    def test_basement_uses_ground_floor_table(self, repository: CostReferenceRepository) -> None:
        table = repository.get_storey_reference(LevelKind.BASEMENT)
        assert table is DEFAULT_COST_REFERENCE.ground_floor

    def test_foundation_has_no_storey_table(self, repository: CostReferenceRepository) -> None:
        with pytest.raises(ValueError, match="foundation"):
            repository.get_storey_reference(LevelKind.FOUNDATION)


# ---------- JSON loading ----------


class TestLoadCostReference:
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "costs.json"
        path.write_text(DEFAULT_COST_REFERENCE.model_dump_json(), encoding="utf-8")
        assert load_cost_reference(path) == DEFAULT_COST_REFERENCE

    def test_custom_table(self, tmp_path: Path) -> None:
        data = json.loads(DEFAULT_COST_REFERENCE.model_dump_json())
        data["version"] = "casablanca-2026"
        data["connection_fees_fixed"] = 0
        path = tmp_path / "costs.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        repo = CostReferenceRepository.from_json_file(path)
        assert repo.version == "casablanca-2026"
        assert repo.reference.connection_fees_fixed == 0.0

    def test_defaults_fill_optional_fields(self, tmp_path: Path) -> None:
        data = json.loads(DEFAULT_COST_REFERENCE.model_dump_json())
        del data["finishing_labor_shares"]
        del data["basement_multiplier"]
        path = tmp_path / "costs.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        reference = load_cost_reference(path)
        assert reference.basement_multiplier == 1.2
        assert reference.finishing_labor_shares.paint == 0.5

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_cost_reference(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "costs.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid cost reference"):
            load_cost_reference(path)

    def test_negative_amount_raises(self, tmp_path: Path) -> None:
        data = json.loads(DEFAULT_COST_REFERENCE.model_dump_json())
        data["foundation"]["labor"] = -1
        path = tmp_path / "costs.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_cost_reference(path)

    def test_load_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="skyara.data.repository")
        path = tmp_path / "costs.json"
        path.write_text(DEFAULT_COST_REFERENCE.model_dump_json(), encoding="utf-8")
        load_cost_reference(path)
        assert "2025.1" in caplog.text

    def test_json_schema_lists_tables(self) -> None:
        assert "foundation" in DetailedCostReference.model_json_schema()["properties"]
