"""Calculation result: the complete technical and financial report for a site."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .lookups import UNIT_TYPES, RevenueModel


@dataclass
class CalculationResult:
    """Flat record of every metric produced by a feasibility calculation.

    All fields default to zero so a result is always structurally complete,
    including the fallback report returned when a calculation fails.
    """

    # === Area Breakdown (sqm) ===
    total_area: float = 0.0
    open_space_area: float = 0.0
    public_realm_area: float = 0.0
    public_realm_percent: float = 0.0
    residential_area: float = 0.0
    commercial_area: float = 0.0
    institutional_area: float = 0.0
    industrial_area: float = 0.0
    mixed_use_area: float = 0.0

    # === GFA by Type (sqm) ===
    residential_gfa: float = 0.0
    commercial_gfa: float = 0.0
    institutional_gfa: float = 0.0
    industrial_gfa: float = 0.0
    mixed_use_gfa: float = 0.0
    mixed_use_residential_gfa: float = 0.0
    mixed_use_commercial_gfa: float = 0.0
    mixed_use_institutional_gfa: float = 0.0
    total_gfa: float = 0.0

    # === Plots ===
    residential_plots: int = 0
    commercial_plots: int = 0
    institutional_plots: int = 0
    industrial_plots: int = 0
    mixed_use_plots: int = 0
    total_plots: int = 0
    residential_studio_plots: int = 0
    residential_one_bed_plots: int = 0
    residential_two_bed_plots: int = 0
    residential_three_bed_plots: int = 0
    residential_four_bed_plots: int = 0

    # === Blocks ===
    residential_blocks: int = 0
    commercial_blocks: int = 0
    institutional_blocks: int = 0
    industrial_blocks: int = 0
    mixed_use_blocks: int = 0
    total_blocks: int = 0

    # === Unit Distribution ===
    total_units: int = 0
    affordable_units: int = 0
    market_rate_units: int = 0
    executive_units: int = 0

    # Unit mix (mixed-use + regular residential)
    studio_units: int = 0
    one_bed_units: int = 0
    two_bed_units: int = 0
    three_bed_units: int = 0
    four_bed_units: int = 0

    # Units in mixed-use buildings
    mixed_use_studio_units: int = 0
    mixed_use_one_bed_units: int = 0
    mixed_use_two_bed_units: int = 0
    mixed_use_three_bed_units: int = 0
    mixed_use_four_bed_units: int = 0

    # Units on regular residential plots
    regular_studio_units: int = 0
    regular_one_bed_units: int = 0
    regular_two_bed_units: int = 0
    regular_three_bed_units: int = 0
    regular_four_bed_units: int = 0

    # GFA consumed by whole units
    mixed_use_studio_gfa: float = 0.0
    mixed_use_one_bed_gfa: float = 0.0
    mixed_use_two_bed_gfa: float = 0.0
    mixed_use_three_bed_gfa: float = 0.0
    mixed_use_four_bed_gfa: float = 0.0
    regular_studio_gfa: float = 0.0
    regular_one_bed_gfa: float = 0.0
    regular_two_bed_gfa: float = 0.0
    regular_three_bed_gfa: float = 0.0
    regular_four_bed_gfa: float = 0.0

    residential_gfa_per_plot: float = 0.0
    mixed_use_gfa_per_plot: float = 0.0

    # === Population ===
    total_population: float = 0.0
    adults: float = 0.0
    children: float = 0.0

    # === Parking ===
    total_parking_spaces: int = 0
    resident_parking: int = 0
    guest_parking: int = 0
    disabled_parking: int = 0

    # === Density ===
    units_per_hectare: float = 0.0
    people_per_hectare: float = 0.0
    plot_ratio: float = 0.0
    residential_far: float = 0.0
    commercial_far: float = 0.0
    mixed_use_far: float = 0.0
    institutional_far: float = 0.0
    industrial_far: float = 0.0

    # === Construction Costs ===
    total_construction_cost: float = 0.0
    residential_construction_cost: float = 0.0
    commercial_construction_cost: float = 0.0
    mixed_use_construction_cost: float = 0.0
    institutional_construction_cost: float = 0.0
    industrial_construction_cost: float = 0.0
    infrastructure_cost: float = 0.0

    # === Development Costs ===
    land_acquisition_cost: float = 0.0
    professional_fees: float = 0.0
    contingency_cost: float = 0.0
    marketing_cost: float = 0.0
    total_development_cost: float = 0.0

    # === Revenue ===
    total_revenue: float = 0.0
    residential_revenue: float = 0.0
    mixed_use_revenue: float = 0.0
    # Sale and mixed: commercial sale + GFA x commercial_rental_rate. Rental: commercial rent.
    commercial_revenue: float = 0.0

    # Sale revenue by unit type
    studio_revenue: float = 0.0
    one_bed_revenue: float = 0.0
    two_bed_revenue: float = 0.0
    three_bed_revenue: float = 0.0
    four_bed_revenue: float = 0.0
    mixed_use_studio_revenue: float = 0.0
    mixed_use_one_bed_revenue: float = 0.0
    mixed_use_two_bed_revenue: float = 0.0
    mixed_use_three_bed_revenue: float = 0.0
    mixed_use_four_bed_revenue: float = 0.0
    commercial_sale_revenue: float = 0.0
    # Sale: GFA x commercial_rental_rate. Rental and mixed: annual commercial rent (rent/sqm x 12),
    # so under the mixed model it is not a component of commercial_revenue.
    commercial_rental_revenue: float = 0.0

    # === Profitability ===
    gross_profit: float = 0.0
    operating_expenses: float = 0.0
    tax_amount: float = 0.0
    net_profit: float = 0.0
    profit_margin: float = 0.0  # Percent
    return_on_investment: float = 0.0  # Percent
    break_even_years: float = 0.0

    # === Financing ===
    total_loan_amount: float = 0.0
    total_equity_amount: float = 0.0
    annual_interest_cost: float = 0.0
    total_interest_cost: float = 0.0

    development_timeline_months: int = 0

    # === Unit Economics ===
    average_unit_price: float = 0.0
    construction_cost_per_unit: float = 0.0
    profit_per_unit: float = 0.0

    # === Rental Revenue ===
    total_rental_revenue: float = 0.0  # NOI over the development timeline
    annual_rental_revenue: float = 0.0  # Annual NOI
    residential_rental_revenue: float = 0.0
    studio_rental_revenue: float = 0.0
    one_bed_rental_revenue: float = 0.0
    two_bed_rental_revenue: float = 0.0
    three_bed_rental_revenue: float = 0.0
    four_bed_rental_revenue: float = 0.0

    # Rental operating metrics (annual)
    gross_potential_rent: float = 0.0
    effective_gross_rent: float = 0.0
    net_operating_income: float = 0.0
    vacancy_loss: float = 0.0
    management_fees: float = 0.0
    total_operating_costs: float = 0.0

    total_combined_revenue: float = 0.0

    revenue_model: RevenueModel = RevenueModel.SALE

    @classmethod
    def empty(cls, total_area: float = 0.0) -> "CalculationResult":
        """Get an all-zero result that keeps only the site area.

        This is the "unable to calculate" report, distinct from a valid
        zero-size development only by context.
        """
        return cls(total_area=total_area)

    def unit_values(self, prefix: str, suffix: str) -> Dict[str, float]:
        """Collect a per-unit-type result group.

        Example:
            >>> result.unit_values("regular_", "_units")
            {'studio': 12, 'one_bed': 30, ...}
        """
        return {unit_type: getattr(self, f"{prefix}{unit_type}{suffix}") for unit_type in UNIT_TYPES}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping for downstream consumers."""
        data = asdict(self)
        data["revenue_model"] = self.revenue_model.value
        return data
