"""Development parameters: every input of a feasibility calculation."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping

from .lookups import (
    PERCENT_SUM_TOLERANCE,
    UNIT_TYPES,
    BudgetClassification,
    DensityLevel,
    DevelopmentType,
    RevenueModel,
)


@dataclass(frozen=True)
class DevelopmentParameters:
    """Complete input parameters for a feasibility calculation.

    Percentages are expressed 0-100. Areas and sizes are in square meters,
    costs and prices in AED. Defaults reflect typical UAE market rates.
    """

    # === Classification ===
    development_type: DevelopmentType = DevelopmentType.MIXED_USE
    density_level: DensityLevel = DensityLevel.HIGH
    budget_classification: BudgetClassification = BudgetClassification.MARKET_RATE
    revenue_model: RevenueModel = RevenueModel.SALE

    # === Land Use Allocation (% of site) ===
    open_space_percent: float = 20.0
    public_realm_percent: float = 20.0
    residential_percent: float = 10.0
    commercial_percent: float = 10.0
    institutional_percent: float = 7.0
    industrial_percent: float = 7.0
    mixed_use_percent: float = 26.0

    # === Mixed-Use GFA Breakdown (% of mixed-use GFA) ===
    mixed_use_residential_percent: float = 60.0
    mixed_use_commercial_percent: float = 30.0
    mixed_use_institutional_percent: float = 10.0

    # === Plot Coverage (%) ===
    residential_plot_coverage: float = 30.0
    commercial_plot_coverage: float = 30.0
    mixed_use_plot_coverage: float = 30.0
    industrial_plot_coverage: float = 30.0
    institutional_plot_coverage: float = 30.0

    # === Floors ===
    mixed_use_floors: int = 20
    residential_floors: int = 2
    commercial_floors: int = 4
    institutional_floors: int = 2
    industrial_floors: int = 2

    # === Block Sizes (sqm) ===
    mixed_use_block_size: float = 5000.0
    residential_block_size: float = 5000.0
    commercial_block_size: float = 5000.0
    institutional_block_size: float = 3000.0
    industrial_block_size: float = 3000.0

    # === Plot Sizes (sqm) ===
    mixed_use_plot_size: float = 6000.0
    residential_plot_size: float = 400.0  # Informational; residential plots are sized per unit type
    commercial_plot_size: float = 8000.0
    institutional_plot_size: float = 3000.0
    industrial_plot_size: float = 3000.0

    # Residential plot size by unit type (also used as residential unit size)
    residential_studio_plot_size: float = 50.0
    residential_one_bed_plot_size: float = 70.0
    residential_two_bed_plot_size: float = 95.0
    residential_three_bed_plot_size: float = 120.0
    residential_four_bed_plot_size: float = 150.0

    # === Unit Mix: Mixed-Use (%) ===
    mixed_use_studio_percent: float = 15.0
    mixed_use_one_bed_percent: float = 25.0
    mixed_use_two_bed_percent: float = 35.0
    mixed_use_three_bed_percent: float = 20.0
    mixed_use_four_bed_percent: float = 5.0

    # === Unit Mix: Residential (%) ===
    residential_studio_percent: float = 10.0
    residential_one_bed_percent: float = 20.0
    residential_two_bed_percent: float = 40.0
    residential_three_bed_percent: float = 25.0
    residential_four_bed_percent: float = 5.0

    # === Mixed-Use Unit Sizes (sqm) ===
    mixed_use_studio_size: float = 45.0
    mixed_use_one_bed_size: float = 60.0
    mixed_use_two_bed_size: float = 85.0
    mixed_use_three_bed_size: float = 110.0
    mixed_use_four_bed_size: float = 140.0

    # === Parking ===
    parking_spaces_per_unit: float = 1.5
    guest_parking_percent: float = 15.0
    disabled_parking_percent: float = 5.0

    # === Demographics (% of population) ===
    adults_percent: float = 65.0
    children_percent: float = 35.0

    # === Construction Costs (AED per sqm of GFA) ===
    residential_construction_cost: float = 4500.0
    commercial_construction_cost: float = 5500.0
    mixed_use_construction_cost: float = 5000.0
    institutional_construction_cost: float = 4000.0
    industrial_construction_cost: float = 3500.0
    infrastructure_cost_per_sqm: float = 800.0  # Per sqm of site

    # === Residential Sale Prices (AED per unit) ===
    studio_sale_price: float = 600_000.0
    one_bed_sale_price: float = 900_000.0
    two_bed_sale_price: float = 1_400_000.0
    three_bed_sale_price: float = 2_000_000.0
    four_bed_sale_price: float = 2_800_000.0

    # === Commercial Rates (AED per sqm) ===
    commercial_sale_price: float = 1500.0
    commercial_rental_rate: float = 120.0  # Counted alongside sale revenue in the sale model

    # === Mixed-Use Sale Prices (AED per unit) ===
    mixed_use_studio_sale_price: float = 700_000.0
    mixed_use_one_bed_sale_price: float = 1_000_000.0
    mixed_use_two_bed_sale_price: float = 1_500_000.0
    mixed_use_three_bed_sale_price: float = 2_200_000.0
    mixed_use_four_bed_sale_price: float = 3_000_000.0

    # === Timeline & Soft Costs ===
    development_timeline_months: int = 36
    land_acquisition_cost: float = 0.0  # 0 = derive from site area
    professional_fees_percent: float = 12.0
    contingency_percent: float = 10.0
    marketing_cost_percent: float = 5.0

    # === Financing (%) ===
    financing_interest_rate: float = 6.5
    loan_to_value_ratio: float = 70.0
    equity_percentage: float = 30.0

    # === Rental Rates (AED per unit per month) ===
    studio_rent_per_month: float = 4000.0
    one_bed_rent_per_month: float = 6000.0
    two_bed_rent_per_month: float = 9000.0
    three_bed_rent_per_month: float = 12000.0
    four_bed_rent_per_month: float = 16000.0
    commercial_rent_per_sqm: float = 100.0  # AED per sqm per month

    # === Rental Operations ===
    rental_vacancy_rate: float = 5.0
    property_management_fee: float = 8.0
    annual_rent_increase: float = 3.0
    rental_operating_costs: float = 500.0  # AED per unit per month

    def __post_init__(self) -> None:
        """Coerce enum fields given as their string values.

        Raises:
            ValueError: If an enum field holds an unknown value.
        """
        for name, enum_cls in _ENUM_FIELDS.items():
            value = getattr(self, name)
            if isinstance(value, enum_cls):
                continue
            try:
                object.__setattr__(self, name, enum_cls(value))
            except ValueError:
                allowed = ", ".join(repr(member.value) for member in enum_cls)
                raise ValueError(f"Unknown {name}: {value!r} (expected one of {allowed})") from None

    @property
    def development_timeline_years(self) -> float:
        """Development timeline in years."""
        return self.development_timeline_months / 12

    def unit_values(self, prefix: str, suffix: str) -> Dict[str, float]:
        """Collect a per-unit-type parameter group.

        Args:
            prefix: Field name prefix (e.g., "mixed_use_").
            suffix: Field name suffix (e.g., "_size").

        Returns:
            Dict of unit type -> value, in UNIT_TYPES order.

        Example:
            >>> default_parameters().unit_values("mixed_use_", "_size")["studio"]
            45.0
        """
        return {unit_type: getattr(self, f"{prefix}{unit_type}{suffix}") for unit_type in UNIT_TYPES}

    def validate(self) -> list[str]:
        """Check the percentage-sum invariants.

        Returns:
            List of warning messages. Empty if every group sums to 100.
        """
        return validate_parameters(self)

    def with_overrides(self, **changes: Any) -> "DevelopmentParameters":
        """Create a copy with some fields replaced.

        Raises:
            TypeError: If a field name is not a parameter.
            ValueError: If an enum field is given an unknown value.
        """
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping with enum values as strings."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, _ENUM_TYPES) else value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DevelopmentParameters":
        """Build parameters from a plain mapping, defaulting omitted fields.

        Enum fields accept either the enum member or its string value.

        Args:
            data: Field name -> value.

        Returns:
            New DevelopmentParameters instance.

        Raises:
            ValueError: If a key is not a parameter or an enum value is unknown.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(unknown)}")

        return cls(**data)


_ENUM_FIELDS = {
    "development_type": DevelopmentType,
    "density_level": DensityLevel,
    "budget_classification": BudgetClassification,
    "revenue_model": RevenueModel,
}
_ENUM_TYPES = tuple(_ENUM_FIELDS.values())


def default_parameters() -> DevelopmentParameters:
    """Get a fresh default parameter set.

    Returns:
        New DevelopmentParameters with the default values.
    """
    return DevelopmentParameters()


def _check_sum(label: str, values: Iterable[Any]) -> str | None:
    try:
        total = sum(value or 0 for value in values)
    except (TypeError, ValueError):
        return f"{label} percentages are not all numeric"
    if abs(total - 100) > PERCENT_SUM_TOLERANCE:
        return f"{label} percentages sum to {total:g}%, should be exactly 100%"
    return None


def validate_parameters(parameters: DevelopmentParameters) -> list[str]:
    """Validate the percentage groups of a parameter set.

    Violations are advisory: callers may still calculate with these
    parameters, and results stay consistent with the values as given.
    Unset (None) percentages count as zero.

    Args:
        parameters: Parameters to check.

    Returns:
        One warning per group whose sum differs from 100 by more than 0.1.
    """
    p = parameters
    checks = [
        ("Land use", [
            p.residential_percent, p.commercial_percent, p.institutional_percent,
            p.industrial_percent, p.mixed_use_percent, p.open_space_percent,
            p.public_realm_percent,
        ]),
        ("Mixed-use unit mix", p.unit_values("mixed_use_", "_percent").values()),
        ("Residential unit mix", p.unit_values("residential_", "_percent").values()),
        ("Mixed-use breakdown", [
            p.mixed_use_residential_percent, p.mixed_use_commercial_percent,
            p.mixed_use_institutional_percent,
        ]),
    ]

    warnings = []
    for label, values in checks:
        message = _check_sum(label, values)
        if message:
            warnings.append(message)
    return warnings
