"""Tests for project input models and estimate output models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skyara.models import (
    CalculationMode,
    FixedDeduction,
    Level,
    LevelKind,
    PercentDeduction,
    ProjectEstimate,
    ProjectParameters,
)

# ---------- Level ----------


class TestLevel:
    def test_defaults(self) -> None:
        level = Level(id="rdc", kind=LevelKind.GROUND_FLOOR)
        assert level.name == ""
        assert not level.is_terrace
        assert level.gross_works_unit_price == 1100.0
        assert level.finishing_unit_price == 1100.0

    def test_kind_from_string(self) -> None:
        level = Level(id="floor1", kind="upper_floor")
        assert level.kind == LevelKind.UPPER_FLOOR

    def test_empty_id_raises(self) -> None:
        with pytest.raises(ValidationError):
            Level(id="", kind=LevelKind.GROUND_FLOOR)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(ValidationError):
            Level(id="x", kind="attic")

    def test_negative_price_raises(self) -> None:
        with pytest.raises(ValidationError):
            Level(id="rdc", kind=LevelKind.GROUND_FLOOR, finishing_unit_price=-1.0)

    @pytest.mark.parametrize(
        "kind", [LevelKind.FOUNDATION, LevelKind.GROUND_FLOOR, LevelKind.BASEMENT]
    )
    def test_terrace_must_be_upper_floor(self, kind: LevelKind) -> None:
        with pytest.raises(ValidationError, match="terrace"):
            Level(id="x", kind=kind, is_terrace=True)

    def test_is_frozen(self) -> None:
        level = Level(id="rdc", kind=LevelKind.GROUND_FLOOR)
        with pytest.raises(ValidationError):
            level.name = "RDC"  # type: ignore[misc]


# ---------- Deductions ----------


class TestDeductions:
    def test_fixed_defaults(self) -> None:
        deduction = FixedDeduction()
        assert deduction.stairs_m2 == 12.0
        assert deduction.walls_m2 == 8.0

    def test_percent_total(self) -> None:
        deduction = PercentDeduction(stairs_percent=10.0, walls_percent=5.0)
        assert deduction.total_percent == 15.0

    def test_percent_over_100_raises(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed 100"):
            PercentDeduction(stairs_percent=70.0, walls_percent=40.0)

    def test_percent_exactly_100_is_allowed(self) -> None:
        assert PercentDeduction(stairs_percent=50.0, walls_percent=50.0).total_percent == 100.0

    def test_discriminated_by_mode(self) -> None:
        params = ProjectParameters.model_validate(
            {"deduction": {"mode": "percent", "stairs_percent": 10, "walls_percent": 5}}
        )
        assert isinstance(params.deduction, PercentDeduction)

    def test_missing_mode_means_fixed(self) -> None:
        params = ProjectParameters.model_validate(
            {"deduction": {"stairs_m2": 10, "walls_m2": 5}}
        )
        assert params.deduction == FixedDeduction(stairs_m2=10.0, walls_m2=5.0)

    def test_model_instances_accepted(self) -> None:
        deduction = PercentDeduction(stairs_percent=10.0, walls_percent=5.0)
        assert ProjectParameters(deduction=deduction).deduction is deduction

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValidationError):
            ProjectParameters.model_validate({"deduction": {"mode": "ratio"}})


# ---------- ProjectParameters ----------


class TestProjectParameters:
    def test_defaults(self) -> None:
        params = ProjectParameters()
        assert params.terrain_area == 100.0
        assert params.facade_count == 1
        assert params.calculation_mode == CalculationMode.DETAILED
        assert isinstance(params.deduction, FixedDeduction)

    def test_facade_deduction(self) -> None:
        assert ProjectParameters(facade_count=1).facade_deduction == 16.0
        assert ProjectParameters(facade_count=2).facade_deduction == 9.0

    def test_max_allowed_surface(self) -> None:
        assert ProjectParameters(terrain_area=120.0, cos=2.5).max_allowed_surface == 300.0

    def test_zero_terrain_is_allowed(self) -> None:
        assert ProjectParameters(terrain_area=0.0).land_price_per_m2 == 5000.0

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("terrain_area", -1.0),
            ("facade_count", 3),
            ("cos", 0.0),
            ("misc_fees_percent", 120.0),
            ("state_tax_percent", -5.0),
            ("sale_price_per_m2", -100.0),
        ],
    )
    def test_out_of_domain_raises(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            ProjectParameters(**{field: value})

    def test_json_round_trip(self) -> None:
        params = ProjectParameters(
            terrain_area=150.0,
            facade_count=2,
            deduction=PercentDeduction(stairs_percent=8.0, walls_percent=4.0),
            calculation_mode=CalculationMode.FLAT,
        )
        restored = ProjectParameters.model_validate_json(params.model_dump_json())
        assert restored == params


# ---------- ProjectEstimate ----------


class TestProjectEstimate:
    def test_json_round_trip(self, engine, params, levels) -> None:
        estimate = engine.estimate(params, levels, "Round trip")
        restored = ProjectEstimate.model_validate_json(estimate.model_dump_json())
        assert restored == estimate

    def test_export_dict(self, engine, params, levels) -> None:
        export = engine.estimate(params, levels, "Export").to_export_dict()
        assert export["project_name"] == "Export"
        assert export["calculation_mode"] == "detailed"
        assert [lv["id"] for lv in export["levels"]] == [lv.id for lv in levels]
        assert export["levels"][-1]["is_terrace"] is True
        assert export["totals"]["construction_cost"] == pytest.approx(703_900.0)
        assert export["metadata"]["cost_data_version"] == "2025.1"

    def test_summary_top_categories_sorted(self, engine, params, levels) -> None:
        summary = engine.estimate(params, levels).to_summary_dict()
        names = [c["name"] for c in summary["top_cost_categories"]]
        assert names == [
            "Finitions (Zellige, Peinture...)",
            "Matériaux Gros Œuvre",
            "Main d'œuvre",
        ]
        assert summary["margin_formatted"].endswith("%")
