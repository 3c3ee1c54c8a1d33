"""Feasibility engine: runs every calculation stage and assembles the result."""

import logging
from dataclasses import replace
from typing import Any, Dict

from ..models.lookups import BUILT_LAND_USES, UNIT_TYPES
from ..models.parameters import DevelopmentParameters
from ..models.result import CalculationResult
from .costs import calculate_costs
from .gfa import calculate_gfa
from .land import allocate_land, subdivide_land
from .metrics import calculate_financial_metrics
from .population import calculate_density, calculate_parking, calculate_population
from .ratios import safe_divide
from .revenue import calculate_revenue
from .units import derive_units

logger = logging.getLogger(__name__)


def _per_type(prefix: str, suffix: str, values: Dict[str, Any]) -> Dict[str, Any]:
    """Map a per-unit-type dict onto result field names."""
    return {f"{prefix}{unit_type}{suffix}": values[unit_type] for unit_type in UNIT_TYPES}


def calculate_technical(total_area: float, parameters: DevelopmentParameters) -> CalculationResult:
    """Run the land, GFA, unit, population, parking and density stages.

    Args:
        total_area: Site area (sqm).
        parameters: Development parameters.

    Returns:
        CalculationResult with the technical fields populated and every
        financial field at zero.
    """
    p = parameters

    land = allocate_land(total_area, p)
    subdivision = subdivide_land(land, p)
    gfa = calculate_gfa(land, p)
    units = derive_units(gfa, p)
    population = calculate_population(units.units_by_type, p)
    parking = calculate_parking(units.total_units, p)
    density = calculate_density(land, gfa, units.total_units, population.total_population)

    plots = gfa.residential_plots

    return CalculationResult(
        # Areas
        total_area=total_area,
        open_space_area=land.open_space_area,
        public_realm_area=land.public_realm_area,
        public_realm_percent=p.public_realm_percent,
        residential_area=land.residential_area,
        commercial_area=land.commercial_area,
        institutional_area=land.institutional_area,
        industrial_area=land.industrial_area,
        mixed_use_area=land.mixed_use_area,
        # GFA
        residential_gfa=gfa.residential_gfa,
        commercial_gfa=gfa.commercial_gfa,
        institutional_gfa=gfa.institutional_gfa,
        industrial_gfa=gfa.industrial_gfa,
        mixed_use_gfa=gfa.mixed_use_gfa,
        mixed_use_residential_gfa=gfa.mixed_use_residential_gfa,
        mixed_use_commercial_gfa=gfa.mixed_use_commercial_gfa,
        mixed_use_institutional_gfa=gfa.mixed_use_institutional_gfa,
        total_gfa=gfa.total_gfa,
        # Plots and blocks
        residential_plots=plots.total_plots,
        commercial_plots=subdivision.commercial_plots,
        institutional_plots=subdivision.institutional_plots,
        industrial_plots=subdivision.industrial_plots,
        mixed_use_plots=subdivision.mixed_use_plots,
        total_plots=plots.total_plots + subdivision.non_residential_plots,
        **_per_type("residential_", "_plots", plots.plots_by_type),
        residential_blocks=subdivision.residential_blocks,
        commercial_blocks=subdivision.commercial_blocks,
        institutional_blocks=subdivision.institutional_blocks,
        industrial_blocks=subdivision.industrial_blocks,
        mixed_use_blocks=subdivision.mixed_use_blocks,
        total_blocks=subdivision.total_blocks,
        # Units
        total_units=units.total_units,
        affordable_units=units.affordability.affordable_units,
        market_rate_units=units.affordability.market_rate_units,
        executive_units=units.affordability.executive_units,
        **_per_type("", "_units", units.units_by_type),
        **_per_type("mixed_use_", "_units", units.mixed_use.units),
        **_per_type("regular_", "_units", units.regular.units),
        **_per_type("mixed_use_", "_gfa", units.mixed_use.gfa),
        **_per_type("regular_", "_gfa", units.regular.gfa),
        residential_gfa_per_plot=plots.avg_gfa_per_plot,
        mixed_use_gfa_per_plot=safe_divide(gfa.mixed_use_gfa, subdivision.mixed_use_plots),
        # Population and parking
        total_population=population.total_population,
        adults=population.adults,
        children=population.children,
        total_parking_spaces=parking.total_parking_spaces,
        resident_parking=parking.resident_parking,
        guest_parking=parking.guest_parking,
        disabled_parking=parking.disabled_parking,
        # Density
        units_per_hectare=density.units_per_hectare,
        people_per_hectare=density.people_per_hectare,
        plot_ratio=density.plot_ratio,
        **{f"{use}_far": far for use, far in density.far_by_use.items()},
        development_timeline_months=p.development_timeline_months,
        revenue_model=p.revenue_model,
    )


def calculate_economics(
    result: CalculationResult,
    parameters: DevelopmentParameters,
) -> CalculationResult:
    """Run the cost, revenue and financial stages on a technical result.

    Reads GFA and unit counts from the given result, so it also works on a
    hand-built result.

    Args:
        result: Result with area, GFA and unit fields populated.
        parameters: Development parameters.

    Returns:
        New CalculationResult with the financial fields populated.
    """
    p = parameters

    gfa_by_use = {use: getattr(result, f"{use}_gfa") for use in BUILT_LAND_USES}
    regular_units = result.unit_values("regular_", "_units")
    mixed_use_units = result.unit_values("mixed_use_", "_units")

    costs = calculate_costs(gfa_by_use, result.total_area, p)
    revenue = calculate_revenue(regular_units, mixed_use_units, result.commercial_gfa, p)
    metrics = calculate_financial_metrics(revenue.total_revenue, costs, result.total_units, p)

    updates: Dict[str, Any] = {
        # Costs
        "total_construction_cost": costs.total_construction_cost,
        **{f"{use}_construction_cost": cost for use, cost in costs.construction_by_use.items()},
        "infrastructure_cost": costs.infrastructure_cost,
        "land_acquisition_cost": costs.land_acquisition_cost,
        "professional_fees": costs.professional_fees,
        "contingency_cost": costs.contingency_cost,
        "marketing_cost": costs.marketing_cost,
        "total_development_cost": costs.total_development_cost,
        # Revenue
        "revenue_model": revenue.revenue_model,
        "total_revenue": revenue.total_revenue,
        "residential_revenue": revenue.residential_revenue,
        "mixed_use_revenue": revenue.mixed_use_revenue,
        "commercial_revenue": revenue.commercial_revenue,
        "commercial_sale_revenue": revenue.commercial_sale_revenue,
        "commercial_rental_revenue": revenue.commercial_rental_revenue,
        "total_combined_revenue": revenue.total_combined_revenue,
        # Profitability
        "gross_profit": metrics.gross_profit,
        "operating_expenses": metrics.operating_expenses,
        "tax_amount": metrics.tax_amount,
        "net_profit": metrics.net_profit,
        "profit_margin": metrics.profit_margin,
        "return_on_investment": metrics.return_on_investment,
        "break_even_years": metrics.break_even_years,
        # Financing
        "total_loan_amount": metrics.financing.total_loan_amount,
        "total_equity_amount": metrics.financing.total_equity_amount,
        "annual_interest_cost": metrics.financing.annual_interest_cost,
        "total_interest_cost": metrics.financing.total_interest_cost,
        "development_timeline_months": p.development_timeline_months,
        # Unit economics
        "average_unit_price": metrics.average_unit_price,
        "construction_cost_per_unit": metrics.construction_cost_per_unit,
        "profit_per_unit": metrics.profit_per_unit,
    }

    # Fields a model does not produce are reset so a reused result never
    # carries stale values from another model.
    zeros = dict.fromkeys(UNIT_TYPES, 0.0)

    sale = revenue.sale
    updates.update(_per_type("", "_revenue", sale.regular_by_type if sale else zeros))
    updates.update(_per_type("mixed_use_", "_revenue", sale.mixed_use_by_type if sale else zeros))

    rental = revenue.rental
    if rental is not None:
        updates.update(
            total_rental_revenue=rental.total_rental_revenue,
            annual_rental_revenue=rental.annual_rental_revenue,
            residential_rental_revenue=rental.residential_rental_revenue,
            gross_potential_rent=rental.gross_potential_rent,
            effective_gross_rent=rental.effective_gross_rent,
            net_operating_income=rental.net_operating_income,
            vacancy_loss=rental.vacancy_loss,
            management_fees=rental.management_fees,
            total_operating_costs=rental.total_operating_costs,
            **_per_type("", "_rental_revenue", rental.rent_by_type),
        )
    else:
        updates.update(
            total_rental_revenue=0.0,
            annual_rental_revenue=0.0,
            residential_rental_revenue=0.0,
            gross_potential_rent=0.0,
            effective_gross_rent=0.0,
            net_operating_income=0.0,
            vacancy_loss=0.0,
            management_fees=0.0,
            total_operating_costs=0.0,
            **_per_type("", "_rental_revenue", zeros),
        )

    return replace(result, **updates)


def calculate(total_area: float, parameters: DevelopmentParameters) -> CalculationResult:
    """Calculate the complete feasibility report for a site.

    Parameter warnings are logged and do not stop the calculation. Any
    failure inside a stage is logged and an all-zero result carrying the
    site area is returned instead of raising.

    Args:
        total_area: Site area (sqm).
        parameters: Development parameters.

    Returns:
        CalculationResult.

    Example:
        >>> result = calculate(100_000, default_parameters())
        >>> result.total_units > 0
        True
    """
    for warning in parameters.validate():
        logger.warning("Parameter validation: %s", warning)

    try:
        technical = calculate_technical(total_area, parameters)
        return calculate_economics(technical, parameters)
    except Exception:
        logger.exception("Feasibility calculation failed for total_area=%s", total_area)
        return CalculationResult.empty(total_area)
