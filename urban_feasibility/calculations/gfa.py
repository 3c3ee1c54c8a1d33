"""Gross floor area (GFA) calculations, including residential plot allocation."""

import math
from dataclasses import dataclass
from typing import Dict

from ..models.lookups import MIXED_USE_BREAKDOWN_DEFAULTS, UNIT_TYPES
from ..models.parameters import DevelopmentParameters
from .land import LandAllocation
from .ratios import safe_divide


@dataclass
class ResidentialPlotAllocation:
    """Residential land split into whole plots by unit type."""

    area_by_type: Dict[str, float]  # Land allotted to each unit type (sqm)
    plots_by_type: Dict[str, int]
    gfa_per_plot_by_type: Dict[str, float]
    gfa_by_type: Dict[str, float]
    total_gfa: float
    total_plots: int
    avg_gfa_per_plot: float


@dataclass
class GFAResult:
    """GFA by land use (sqm)."""

    residential_gfa: float
    commercial_gfa: float
    institutional_gfa: float
    industrial_gfa: float
    mixed_use_gfa: float
    mixed_use_residential_gfa: float
    mixed_use_commercial_gfa: float
    mixed_use_institutional_gfa: float
    residential_plots: ResidentialPlotAllocation

    @property
    def total_gfa(self) -> float:
        """Total GFA across land uses (mixed-use sub-GFA is not double counted)."""
        return (
            self.residential_gfa
            + self.commercial_gfa
            + self.institutional_gfa
            + self.industrial_gfa
            + self.mixed_use_gfa
        )


def calculate_built_gfa(area: float, plot_coverage: float, floors: float) -> float:
    """GFA of a land use built as continuous floorplate.

    GFA = area x coverage% x floors
    """
    return area * (plot_coverage / 100) * floors


def allocate_residential_plots(
    residential_area: float,
    parameters: DevelopmentParameters,
) -> ResidentialPlotAllocation:
    """Allocate residential land into whole plots per unit type.

    Each unit type receives its share of the residential area, which is cut
    into as many whole plots of that type's plot size as fit. Leftover land
    is not built on, so the resulting GFA is at most
    residential_area x coverage x floors, and equal to it only when every
    share divides exactly into plots.

    Args:
        residential_area: Residential land area (sqm).
        parameters: Development parameters (unit mix, plot sizes, coverage, floors).

    Returns:
        ResidentialPlotAllocation with per-type plots and GFA.

    Example:
        >>> alloc = allocate_residential_plots(10_000, default_parameters())
        >>> alloc.plots_by_type["studio"]
        20  # 1,000 sqm / 50 sqm plots
    """
    plot_sizes = parameters.unit_values("residential_", "_plot_size")
    percentages = parameters.unit_values("residential_", "_percent")
    coverage = parameters.residential_plot_coverage
    floors = parameters.residential_floors

    area_by_type: Dict[str, float] = {}
    plots_by_type: Dict[str, int] = {}
    gfa_per_plot_by_type: Dict[str, float] = {}
    gfa_by_type: Dict[str, float] = {}

    for unit_type in UNIT_TYPES:
        plot_size = plot_sizes[unit_type]
        area_for_type = residential_area * (percentages[unit_type] / 100)
        plots = math.floor(area_for_type / plot_size) if plot_size > 0 else 0
        gfa_per_plot = plot_size * (coverage / 100) * floors

        area_by_type[unit_type] = area_for_type
        plots_by_type[unit_type] = plots
        gfa_per_plot_by_type[unit_type] = gfa_per_plot
        gfa_by_type[unit_type] = plots * gfa_per_plot

    total_gfa = sum(gfa_by_type.values())
    total_plots = sum(plots_by_type.values())

    return ResidentialPlotAllocation(
        area_by_type=area_by_type,
        plots_by_type=plots_by_type,
        gfa_per_plot_by_type=gfa_per_plot_by_type,
        gfa_by_type=gfa_by_type,
        total_gfa=total_gfa,
        total_plots=total_plots,
        avg_gfa_per_plot=safe_divide(total_gfa, total_plots),
    )


def calculate_gfa(land: LandAllocation, parameters: DevelopmentParameters) -> GFAResult:
    """Convert allocated land into GFA per land use.

    Commercial, institutional, industrial and mixed-use GFA use
    coverage x floors. Mixed-use GFA is split into residential, commercial
    and institutional shares; each share falls back to 60/30/10 when unset.
    Residential GFA comes from the plot allocator.

    Args:
        land: Land allocation.
        parameters: Development parameters.

    Returns:
        GFAResult with GFA for each land use.
    """
    p = parameters

    commercial_gfa = calculate_built_gfa(land.commercial_area, p.commercial_plot_coverage, p.commercial_floors)
    institutional_gfa = calculate_built_gfa(
        land.institutional_area, p.institutional_plot_coverage, p.institutional_floors
    )
    industrial_gfa = calculate_built_gfa(land.industrial_area, p.industrial_plot_coverage, p.industrial_floors)
    mixed_use_gfa = calculate_built_gfa(land.mixed_use_area, p.mixed_use_plot_coverage, p.mixed_use_floors)

    residential_pct = p.mixed_use_residential_percent or MIXED_USE_BREAKDOWN_DEFAULTS["residential"]
    commercial_pct = p.mixed_use_commercial_percent or MIXED_USE_BREAKDOWN_DEFAULTS["commercial"]
    institutional_pct = p.mixed_use_institutional_percent or MIXED_USE_BREAKDOWN_DEFAULTS["institutional"]

    residential_plots = allocate_residential_plots(land.residential_area, p)

    return GFAResult(
        residential_gfa=residential_plots.total_gfa,
        commercial_gfa=commercial_gfa,
        institutional_gfa=institutional_gfa,
        industrial_gfa=industrial_gfa,
        mixed_use_gfa=mixed_use_gfa,
        mixed_use_residential_gfa=mixed_use_gfa * (residential_pct / 100),
        mixed_use_commercial_gfa=mixed_use_gfa * (commercial_pct / 100),
        mixed_use_institutional_gfa=mixed_use_gfa * (institutional_pct / 100),
        residential_plots=residential_plots,
    )
