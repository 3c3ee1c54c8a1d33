"""Tests for land allocation and subdivision."""

import pytest

from urban_feasibility.calculations.land import (
    allocate_land,
    count_subdivisions,
    subdivide_land,
)


class TestAllocateLand:
    """Tests for splitting the site across land uses."""

    def test_default_allocation(self, default_params):
        """Each land use should get its percentage of the site."""
        land = allocate_land(100_000, default_params)

        assert land.open_space_area == pytest.approx(20_000)
        assert land.public_realm_area == pytest.approx(20_000)
        assert land.residential_area == pytest.approx(10_000)
        assert land.commercial_area == pytest.approx(10_000)
        assert land.institutional_area == pytest.approx(7_000)
        assert land.industrial_area == pytest.approx(7_000)
        assert land.mixed_use_area == pytest.approx(26_000)

    @pytest.mark.parametrize("total_area", [1, 2_500.5, 100_000, 3_750_000])
    def test_allocation_closes_when_percentages_sum_to_100(self, default_params, total_area):
        """Allocated areas should add back up to the site area."""
        land = allocate_land(total_area, default_params)

        assert land.allocated_area == pytest.approx(total_area)

    def test_percentages_not_summing_to_100_are_applied_as_given(self, default_params):
        """Invalid percentages should not be normalized."""
        params = default_params.with_overrides(residential_percent=50.0)
        land = allocate_land(100_000, params)

        assert land.residential_area == pytest.approx(50_000)
        assert land.allocated_area == pytest.approx(140_000)

    def test_zero_area(self, default_params):
        """A zero-area site should allocate nothing."""
        land = allocate_land(0, default_params)

        assert land.allocated_area == 0


class TestCountSubdivisions:
    """Tests for whole plot/block counting."""

    def test_floors_partial_plots(self):
        """Only whole plots should be counted."""
        assert count_subdivisions(10_000, 3_000) == 3

    def test_exact_fit(self):
        """An area that divides exactly should count every plot."""
        assert count_subdivisions(9_000, 3_000) == 3

    @pytest.mark.parametrize("area,size", [(0, 3_000), (10_000, 0), (-5, 100), (100, -5)])
    def test_non_positive_inputs_give_zero(self, area, size):
        """Zero or negative area or size should yield no plots."""
        assert count_subdivisions(area, size) == 0


class TestSubdivideLand:
    """Tests for plot and block counts per land use."""

    def test_default_subdivision(self, default_params):
        """Default parameters on a 10 ha site should give known counts."""
        land = allocate_land(100_000, default_params)
        sub = subdivide_land(land, default_params)

        # Plots: 10,000/8,000, 7,000/3,000, 7,000/3,000, 26,000/6,000
        assert sub.commercial_plots == 1
        assert sub.institutional_plots == 2
        assert sub.industrial_plots == 2
        assert sub.mixed_use_plots == 4
        assert sub.non_residential_plots == 9

        # Blocks: 10,000/5,000, 10,000/5,000, 7,000/3,000, 7,000/3,000, 26,000/5,000
        assert sub.residential_blocks == 2
        assert sub.commercial_blocks == 2
        assert sub.institutional_blocks == 2
        assert sub.industrial_blocks == 2
        assert sub.mixed_use_blocks == 5
        assert sub.total_blocks == 13

    def test_zero_plot_size_gives_no_plots(self, default_params):
        """A land use with no plot size should not be subdivided."""
        params = default_params.with_overrides(commercial_plot_size=0.0)
        land = allocate_land(100_000, params)

        assert subdivide_land(land, params).commercial_plots == 0
