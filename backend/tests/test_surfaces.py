"""Tests for gross and sellable surface derivation."""

from __future__ import annotations

import pytest

from skyara.models.enums import LevelKind
from skyara.models.project import FixedDeduction, PercentDeduction, ProjectParameters
from skyara.surfaces import (
    LevelSurface,
    derive_surface,
    derive_surfaces,
    gross_surface,
    sellable_surface,
)

# ---------- gross_surface ----------


class TestGrossSurface:
    def test_foundation_covers_whole_terrain(self, params: ProjectParameters) -> None:
        assert gross_surface(params, LevelKind.FOUNDATION) == pytest.approx(100.0)

    def test_basement_covers_whole_terrain(self, params: ProjectParameters) -> None:
        assert gross_surface(params, LevelKind.BASEMENT) == pytest.approx(100.0)

    def test_ground_floor_one_facade(self, params: ProjectParameters) -> None:
        assert gross_surface(params, LevelKind.GROUND_FLOOR) == pytest.approx(84.0)

    def test_upper_floor_adds_overhang(self, params: ProjectParameters) -> None:
        assert gross_surface(params, LevelKind.UPPER_FLOOR) == pytest.approx(90.5)

    def test_two_facades_use_second_deduction(self) -> None:
        params = ProjectParameters(facade_count=2)
        assert gross_surface(params, LevelKind.GROUND_FLOOR) == pytest.approx(91.0)
        assert gross_surface(params, LevelKind.UPPER_FLOOR) == pytest.approx(97.5)

    def test_small_terrain_is_not_clamped(self) -> None:
        params = ProjectParameters(terrain_area=10.0)
        assert gross_surface(params, LevelKind.GROUND_FLOOR) == pytest.approx(-6.0)

    def test_scales_with_terrain(self) -> None:
        params = ProjectParameters(terrain_area=250.0)
        assert gross_surface(params, LevelKind.GROUND_FLOOR) == pytest.approx(234.0)
        assert gross_surface(params, LevelKind.UPPER_FLOOR) == pytest.approx(240.5)


# ---------- sellable_surface ----------


class TestSellableSurface:
    def test_foundation_is_never_sellable(self, params: ProjectParameters) -> None:
        assert sellable_surface(params, LevelKind.FOUNDATION, 100.0) == 0.0

    def test_fixed_deduction(self, params: ProjectParameters) -> None:
        assert sellable_surface(params, LevelKind.GROUND_FLOOR, 84.0) == pytest.approx(64.0)
        assert sellable_surface(params, LevelKind.UPPER_FLOOR, 90.5) == pytest.approx(70.5)

    def test_basement_is_sellable(self, params: ProjectParameters) -> None:
        assert sellable_surface(params, LevelKind.BASEMENT, 100.0) == pytest.approx(80.0)

    def test_percent_deduction(self) -> None:
        params = ProjectParameters(
            deduction=PercentDeduction(stairs_percent=10.0, walls_percent=5.0),
        )
        assert sellable_surface(params, LevelKind.GROUND_FLOOR, 84.0) == pytest.approx(71.4)

    def test_full_percent_deduction_leaves_nothing(self) -> None:
        params = ProjectParameters(
            deduction=PercentDeduction(stairs_percent=60.0, walls_percent=40.0),
        )
        assert sellable_surface(params, LevelKind.UPPER_FLOOR, 90.5) == 0.0

    def test_over_deduction_is_floored_at_zero(self) -> None:
        params = ProjectParameters(deduction=FixedDeduction(stairs_m2=60.0, walls_m2=50.0))
        assert sellable_surface(params, LevelKind.GROUND_FLOOR, 84.0) == 0.0

    def test_negative_gross_is_floored_at_zero(self, params: ProjectParameters) -> None:
        assert sellable_surface(params, LevelKind.GROUND_FLOOR, -6.0) == 0.0

    def test_never_exceeds_gross(self, params: ProjectParameters) -> None:
        for gross in (0.0, 5.0, 20.0, 84.0, 500.0):
            assert sellable_surface(params, LevelKind.UPPER_FLOOR, gross) <= max(gross, 0.0)


# ---------- derive_surface(s) ----------


class TestDeriveSurfaces:
    def test_terrace_is_derived_like_an_upper_floor(self, params, levels) -> None:
        terrace = levels[-1]
        assert terrace.is_terrace
        assert derive_surface(params, terrace) == LevelSurface(90.5, 70.5)

    def test_declared_surface_is_ignored(self, params, levels) -> None:
        rdc = levels[1].model_copy(update={"declared_surface": 999.0})
        assert derive_surface(params, rdc).gross_surface == pytest.approx(84.0)

    def test_preserves_input_order(self, params, levels) -> None:
        surfaces = derive_surfaces(params, levels)
        assert [s.gross_surface for s in surfaces] == pytest.approx(
            [100.0, 84.0, 90.5, 90.5, 90.5]
        )
        assert [s.sellable_surface for s in surfaces] == pytest.approx(
            [0.0, 64.0, 70.5, 70.5, 70.5]
        )

    def test_empty_levels(self, params) -> None:
        assert derive_surfaces(params, []) == []
