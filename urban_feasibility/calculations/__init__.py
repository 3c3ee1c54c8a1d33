"""Calculation stages for the urban feasibility engine."""

from .land import allocate_land, subdivide_land, LandAllocation, SubdivisionResult
from .gfa import calculate_gfa, allocate_residential_plots, GFAResult, ResidentialPlotAllocation
from .units import derive_units, calculate_units_by_area, classify_units, UnitResult
from .population import calculate_population, calculate_parking, calculate_density
from .costs import calculate_costs, CostResult
from .revenue import calculate_revenue, RevenueResult, escalate_rent
from .metrics import calculate_financial_metrics, FinancialMetrics, format_summary_table

# Engine entry points
from .engine import (
    calculate,
    calculate_technical,
    calculate_economics,
)

# Multi-year projection
from .projection import generate_projection, ProjectionResult

__all__ = [
    "allocate_land",
    "subdivide_land",
    "LandAllocation",
    "SubdivisionResult",
    "calculate_gfa",
    "allocate_residential_plots",
    "GFAResult",
    "ResidentialPlotAllocation",
    "derive_units",
    "calculate_units_by_area",
    "classify_units",
    "UnitResult",
    "calculate_population",
    "calculate_parking",
    "calculate_density",
    "calculate_costs",
    "CostResult",
    "calculate_revenue",
    "RevenueResult",
    "escalate_rent",
    "calculate_financial_metrics",
    "FinancialMetrics",
    "format_summary_table",
    "calculate",
    "calculate_technical",
    "calculate_economics",
    "generate_projection",
    "ProjectionResult",
]
