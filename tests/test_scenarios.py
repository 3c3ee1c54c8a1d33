"""Tests for what-if runs and sensitivity grids."""

import pytest

from urban_feasibility.calculations.engine import calculate
from urban_feasibility.models import default_parameters
from urban_feasibility.scenarios import (
    GRID_COLUMNS,
    apply_what_if,
    run_sensitivity_grid,
    run_what_if,
)

SITE_AREA = 100_000


class TestApplyWhatIf:
    """Tests for scaling parameter inputs."""

    def test_scales_revenue_inputs(self, default_params):
        """Prices and rents should scale by the revenue multiplier."""
        scaled = apply_what_if(default_params, revenue_multiplier=1.2)

        assert scaled.studio_sale_price == pytest.approx(default_params.studio_sale_price * 1.2)
        assert scaled.mixed_use_four_bed_sale_price == pytest.approx(
            default_params.mixed_use_four_bed_sale_price * 1.2
        )
        assert scaled.two_bed_rent_per_month == pytest.approx(default_params.two_bed_rent_per_month * 1.2)
        assert scaled.commercial_rent_per_sqm == pytest.approx(default_params.commercial_rent_per_sqm * 1.2)
        assert scaled.residential_construction_cost == default_params.residential_construction_cost

    def test_scales_cost_inputs(self, default_params):
        """Construction and infrastructure costs should scale by the cost multiplier."""
        scaled = apply_what_if(default_params, cost_multiplier=0.9)

        assert scaled.commercial_construction_cost == pytest.approx(
            default_params.commercial_construction_cost * 0.9
        )
        assert scaled.infrastructure_cost_per_sqm == pytest.approx(
            default_params.infrastructure_cost_per_sqm * 0.9
        )
        assert scaled.studio_sale_price == default_params.studio_sale_price

    def test_explicit_land_cost_scaled(self, reference_params):
        """An explicit land cost should scale with costs."""
        scaled = apply_what_if(reference_params, cost_multiplier=2.0)

        assert scaled.land_acquisition_cost == 3_000_000

    def test_base_untouched(self, default_params):
        """The base parameters should not change."""
        apply_what_if(default_params, 1.5, 1.5)

        assert default_params == default_parameters()

    def test_negative_multiplier_raises(self, default_params):
        """Negative multipliers should raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            apply_what_if(default_params, revenue_multiplier=-1.0)


class TestRunWhatIf:
    """Tests for single what-if runs."""

    def test_identity_matches_base(self, default_params):
        """Multipliers of 1 should reproduce the base calculation."""
        assert run_what_if(SITE_AREA, default_params) == calculate(SITE_AREA, default_params)

    def test_revenue_scales_linearly(self, default_params):
        """Sale revenue should scale with the revenue multiplier."""
        base = calculate(SITE_AREA, default_params)
        scaled = run_what_if(SITE_AREA, default_params, revenue_multiplier=1.1)

        assert scaled.total_revenue == pytest.approx(base.total_revenue * 1.1)
        assert scaled.total_units == base.total_units

    def test_construction_cost_scales(self, default_params):
        """Construction cost should scale with the cost multiplier."""
        base = calculate(SITE_AREA, default_params)
        scaled = run_what_if(SITE_AREA, default_params, cost_multiplier=1.2)

        assert scaled.total_construction_cost == pytest.approx(base.total_construction_cost * 1.2)
        # Land cost derived from site area is not scaled
        assert scaled.land_acquisition_cost == base.land_acquisition_cost


class TestSensitivityGrid:
    """Tests for revenue x cost grids."""

    def test_default_grid(self, default_params):
        """The default grid should cover 5 x 5 combinations."""
        grid = run_sensitivity_grid(SITE_AREA, default_params)

        assert list(grid.columns) == GRID_COLUMNS
        assert len(grid) == 25
        assert grid["revenue_multiplier"].min() == pytest.approx(0.8)
        assert grid["cost_multiplier"].max() == pytest.approx(1.2)

    def test_custom_multipliers_order(self, default_params):
        """Rows should vary the cost multiplier fastest."""
        grid = run_sensitivity_grid(SITE_AREA, default_params, [0.9, 1.1], [1.0, 1.5, 2.0])

        assert len(grid) == 6
        assert grid["revenue_multiplier"].tolist() == [0.9, 0.9, 0.9, 1.1, 1.1, 1.1]
        assert grid["cost_multiplier"].tolist() == [1.0, 1.5, 2.0, 1.0, 1.5, 2.0]

    def test_profit_moves_with_multipliers(self, default_params):
        """Higher revenue should raise profit; higher cost should lower it."""
        grid = run_sensitivity_grid(SITE_AREA, default_params, [1.0, 1.2], [1.0, 1.2])
        by_key = grid.set_index(["revenue_multiplier", "cost_multiplier"])["gross_profit"]

        assert by_key[(1.2, 1.0)] > by_key[(1.0, 1.0)]
        assert by_key[(1.0, 1.2)] < by_key[(1.0, 1.0)]
