"""Revenue calculations for the sale, rental and mixed revenue models."""

from dataclasses import dataclass
from typing import Dict, Mapping

from ..models.lookups import UNIT_TYPES, RevenueModel
from ..models.parameters import DevelopmentParameters
from .units import get_total_units


@dataclass
class SaleRevenueResult:
    """Revenue from selling units and commercial floor area."""

    regular_by_type: Dict[str, float]
    mixed_use_by_type: Dict[str, float]
    residential_revenue: float
    mixed_use_revenue: float
    commercial_sale_revenue: float
    commercial_rental_revenue: float  # GFA x commercial rental rate
    commercial_revenue: float  # Sale + rental rate term

    @property
    def total_revenue(self) -> float:
        return self.residential_revenue + self.mixed_use_revenue + self.commercial_revenue


@dataclass
class RentalRevenueResult:
    """Rental income and operating metrics (annual unless noted)."""

    rent_by_type: Dict[str, float]  # Regular + mixed-use units of each type
    residential_rental_revenue: float
    commercial_rental_revenue: float
    gross_potential_rent: float
    vacancy_loss: float
    effective_gross_rent: float
    management_fees: float
    total_operating_costs: float
    net_operating_income: float
    annual_rental_revenue: float
    total_rental_revenue: float  # NOI over the development timeline


@dataclass
class RevenueResult:
    """Revenue under the selected revenue model."""

    revenue_model: RevenueModel
    total_revenue: float
    residential_revenue: float
    mixed_use_revenue: float
    commercial_revenue: float
    commercial_sale_revenue: float
    commercial_rental_revenue: float
    sale: SaleRevenueResult | None  # None under the rental model
    rental: RentalRevenueResult | None  # None under the sale model

    @property
    def total_combined_revenue(self) -> float:
        """Sale plus rental revenue; equal to total_revenue in every model."""
        return self.total_revenue


def calculate_sale_revenue(
    regular_units: Mapping[str, int],
    mixed_use_units: Mapping[str, int],
    commercial_gfa: float,
    parameters: DevelopmentParameters,
) -> SaleRevenueResult:
    """Calculate revenue from selling all units and commercial space.

    Commercial revenue is GFA x sale price plus GFA x commercial rental rate;
    the rental-rate term is included even though the space is sold.

    Args:
        regular_units: Regular residential units by type.
        mixed_use_units: Mixed-use units by type.
        commercial_gfa: Commercial GFA (sqm).
        parameters: Development parameters with sale prices.

    Returns:
        SaleRevenueResult.
    """
    regular_prices = parameters.unit_values("", "_sale_price")
    mixed_use_prices = parameters.unit_values("mixed_use_", "_sale_price")

    regular_by_type = {t: regular_units[t] * regular_prices[t] for t in UNIT_TYPES}
    mixed_use_by_type = {t: mixed_use_units[t] * mixed_use_prices[t] for t in UNIT_TYPES}

    commercial_sale_revenue = commercial_gfa * parameters.commercial_sale_price
    commercial_rental_revenue = commercial_gfa * parameters.commercial_rental_rate

    return SaleRevenueResult(
        regular_by_type=regular_by_type,
        mixed_use_by_type=mixed_use_by_type,
        residential_revenue=sum(regular_by_type.values()),
        mixed_use_revenue=sum(mixed_use_by_type.values()),
        commercial_sale_revenue=commercial_sale_revenue,
        commercial_rental_revenue=commercial_rental_revenue,
        commercial_revenue=commercial_sale_revenue + commercial_rental_revenue,
    )


def calculate_rental_revenue(
    regular_units: Mapping[str, int],
    mixed_use_units: Mapping[str, int],
    commercial_gfa: float,
    parameters: DevelopmentParameters,
) -> RentalRevenueResult:
    """Calculate rental income over the development timeline.

    GPR = sum(units x monthly rent x 12) + commercial GFA x rent/sqm x 12
    EGR = GPR - vacancy loss
    NOI = EGR - management fees - operating costs
    Total = NOI x timeline years (no escalation)

    Mixed-use and regular units of the same type share one rent.

    Args:
        regular_units: Regular residential units by type.
        mixed_use_units: Mixed-use units by type.
        commercial_gfa: Commercial GFA (sqm).
        parameters: Development parameters with rents and operating rates.

    Returns:
        RentalRevenueResult.
    """
    p = parameters
    rents = p.unit_values("", "_rent_per_month")

    rent_by_type = {
        t: (regular_units[t] + mixed_use_units[t]) * rents[t] * 12
        for t in UNIT_TYPES
    }
    residential_rental_revenue = sum(rent_by_type.values())
    commercial_rental_revenue = commercial_gfa * p.commercial_rent_per_sqm * 12

    gross_potential_rent = residential_rental_revenue + commercial_rental_revenue
    vacancy_loss = gross_potential_rent * (p.rental_vacancy_rate / 100)
    effective_gross_rent = gross_potential_rent - vacancy_loss
    management_fees = effective_gross_rent * (p.property_management_fee / 100)

    residential_units = get_total_units(regular_units) + get_total_units(mixed_use_units)
    total_operating_costs = residential_units * p.rental_operating_costs * 12

    net_operating_income = effective_gross_rent - management_fees - total_operating_costs

    return RentalRevenueResult(
        rent_by_type=rent_by_type,
        residential_rental_revenue=residential_rental_revenue,
        commercial_rental_revenue=commercial_rental_revenue,
        gross_potential_rent=gross_potential_rent,
        vacancy_loss=vacancy_loss,
        effective_gross_rent=effective_gross_rent,
        management_fees=management_fees,
        total_operating_costs=total_operating_costs,
        net_operating_income=net_operating_income,
        annual_rental_revenue=net_operating_income,
        total_rental_revenue=net_operating_income * p.development_timeline_years,
    )


def calculate_revenue(
    regular_units: Mapping[str, int],
    mixed_use_units: Mapping[str, int],
    commercial_gfa: float,
    parameters: DevelopmentParameters,
) -> RevenueResult:
    """Calculate revenue under the parameters' revenue model.

    - sale: unit and commercial sales only.
    - rental: rental NOI over the timeline only.
    - mixed: sale revenue plus rental NOI over the timeline.

    Args:
        regular_units: Regular residential units by type.
        mixed_use_units: Mixed-use units by type.
        commercial_gfa: Commercial GFA (sqm).
        parameters: Development parameters.

    Returns:
        RevenueResult with totals and the underlying sale/rental breakdowns.
    """
    model = parameters.revenue_model
    args = (regular_units, mixed_use_units, commercial_gfa, parameters)

    if model == RevenueModel.SALE:
        sale = calculate_sale_revenue(*args)
        return RevenueResult(
            revenue_model=model,
            total_revenue=sale.total_revenue,
            residential_revenue=sale.residential_revenue,
            mixed_use_revenue=sale.mixed_use_revenue,
            commercial_revenue=sale.commercial_revenue,
            commercial_sale_revenue=sale.commercial_sale_revenue,
            commercial_rental_revenue=sale.commercial_rental_revenue,
            sale=sale,
            rental=None,
        )

    rental = calculate_rental_revenue(*args)

    if model == RevenueModel.RENTAL:
        return RevenueResult(
            revenue_model=model,
            total_revenue=rental.total_rental_revenue,
            residential_revenue=rental.residential_rental_revenue,
            mixed_use_revenue=0.0,
            commercial_revenue=rental.commercial_rental_revenue,
            commercial_sale_revenue=0.0,
            commercial_rental_revenue=rental.commercial_rental_revenue,
            sale=None,
            rental=rental,
        )

    if model == RevenueModel.MIXED:
        sale = calculate_sale_revenue(*args)
        return RevenueResult(
            revenue_model=model,
            total_revenue=sale.total_revenue + rental.total_rental_revenue,
            residential_revenue=sale.residential_revenue,
            mixed_use_revenue=sale.mixed_use_revenue,
            commercial_revenue=sale.commercial_revenue,
            commercial_sale_revenue=sale.commercial_sale_revenue,
            commercial_rental_revenue=rental.commercial_rental_revenue,
            sale=sale,
            rental=rental,
        )

    raise ValueError(f"Unknown revenue model: {model}")


def escalate_rent(
    base_rent: float,
    years_elapsed: int,
    growth_rate: float,
) -> float:
    """Apply annual rent escalation. Works element-wise on numpy arrays.

    Args:
        base_rent: Starting rent amount.
        years_elapsed: Number of years since base period.
        growth_rate: Annual growth rate (e.g., 0.03 for 3%).

    Returns:
        Escalated rent amount.
    """
    return base_rent * (1 + growth_rate) ** years_elapsed
