"""Reference inputs for the economics and engine tests."""

from urban_feasibility.models import (
    CalculationResult,
    DensityLevel,
    DevelopmentParameters,
    RevenueModel,
    default_parameters,
)


def get_reference_parameters() -> DevelopmentParameters:
    """Get the reference cost and price parameters.

    With the reference technical result these should produce:
    - Total construction cost: 71,000,000
    - Total development cost: 83,150,000
    - Total revenue (sale): 310,000,000
    - Gross profit: 226,850,000
    - Profit margin: ~73.18%

    Returns:
        DevelopmentParameters for the reference case.
    """
    return default_parameters().with_overrides(
        density_level=DensityLevel.MEDIUM,

        # Construction costs per sqm
        residential_construction_cost=1000.0,
        commercial_construction_cost=1500.0,
        mixed_use_construction_cost=1200.0,
        institutional_construction_cost=0.0,
        industrial_construction_cost=0.0,
        infrastructure_cost_per_sqm=0.0,

        # Soft costs
        land_acquisition_cost=1_500_000.0,
        professional_fees_percent=10.0,
        contingency_percent=5.0,
        marketing_cost_percent=0.0,

        # Sale prices (only studios, one-beds and commercial sell)
        studio_sale_price=500_000.0,
        one_bed_sale_price=800_000.0,
        two_bed_sale_price=0.0,
        three_bed_sale_price=0.0,
        four_bed_sale_price=0.0,
        mixed_use_studio_sale_price=0.0,
        mixed_use_one_bed_sale_price=0.0,
        mixed_use_two_bed_sale_price=0.0,
        mixed_use_three_bed_sale_price=0.0,
        mixed_use_four_bed_sale_price=0.0,
        commercial_sale_price=10_000.0,
        commercial_rental_rate=0.0,
    )


def get_zero_price_parameters() -> DevelopmentParameters:
    """Get the reference parameters with every sale price zeroed."""
    params = get_reference_parameters()
    return params.with_overrides(
        studio_sale_price=0.0,
        one_bed_sale_price=0.0,
        commercial_sale_price=0.0,
    )


def get_rental_parameters(revenue_model: RevenueModel = RevenueModel.RENTAL) -> DevelopmentParameters:
    """Get zero-price parameters configured for rental income.

    Args:
        revenue_model: RENTAL or MIXED.

    Returns:
        DevelopmentParameters with rents and a 36-month timeline.
    """
    return get_zero_price_parameters().with_overrides(
        revenue_model=revenue_model,
        development_timeline_months=36,
        studio_rent_per_month=40_000.0,
        one_bed_rent_per_month=60_000.0,
        two_bed_rent_per_month=90_000.0,
        three_bed_rent_per_month=120_000.0,
        four_bed_rent_per_month=160_000.0,
        commercial_rent_per_sqm=1000.0,
        rental_vacancy_rate=5.0,
        property_management_fee=8.0,
        rental_operating_costs=5000.0,
    )


def get_reference_technical_result() -> CalculationResult:
    """Get a technical result with known GFA and regular unit counts.

    Returns:
        CalculationResult with 500 regular residential units and
        residential/commercial/mixed-use GFA of 50,000/10,000/5,000 sqm.
    """
    return CalculationResult(
        total_area=10_000,
        residential_gfa=50_000,
        commercial_gfa=10_000,
        mixed_use_gfa=5_000,
        total_gfa=65_000,
        regular_studio_units=100,
        regular_one_bed_units=200,
        regular_two_bed_units=100,
        regular_three_bed_units=50,
        regular_four_bed_units=50,
        studio_units=100,
        one_bed_units=200,
        two_bed_units=100,
        three_bed_units=50,
        four_bed_units=50,
        total_units=500,
    )


# Expected economics for the reference case
EXPECTED_TCC = 71_000_000
EXPECTED_TDC = 83_150_000
EXPECTED_REVENUE = 310_000_000
EXPECTED_GROSS_PROFIT = 226_850_000
EXPECTED_MARGIN = 73.18

# Expected rental economics (36-month timeline)
# GPR = 12 x (39M residential + 10M commercial) = 588M
EXPECTED_GPR = 588_000_000
EXPECTED_VACANCY = 29_400_000
EXPECTED_EGR = 558_600_000
EXPECTED_MANAGEMENT = 44_688_000
EXPECTED_OPERATING = 30_000_000  # 500 units x 5,000 x 12
EXPECTED_NOI = 483_912_000
EXPECTED_TOTAL_RENTAL = 1_451_736_000  # NOI x 3 years
