"""Unit calculations: unit mix by bedroom type and affordability bands."""

import math
from dataclasses import dataclass
from typing import Dict, Mapping

from ..models.lookups import (
    UNIT_DISTRIBUTIONS,
    UNIT_TYPES,
    BudgetClassification,
    DevelopmentType,
)
from ..models.parameters import DevelopmentParameters
from .gfa import GFAResult


@dataclass
class UnitMixResult:
    """Whole units carved out of one GFA pool."""

    units: Dict[str, int]
    gfa: Dict[str, float]  # GFA consumed by whole units of each type

    @property
    def total_units(self) -> int:
        return sum(self.units.values())


@dataclass
class AffordabilityResult:
    """Units split across affordability bands."""

    affordable_units: int
    market_rate_units: int
    executive_units: int


@dataclass
class UnitResult:
    """All unit counts for a development."""

    mixed_use: UnitMixResult
    regular: UnitMixResult
    units_by_type: Dict[str, int]  # mixed-use + regular
    affordability: AffordabilityResult

    @property
    def total_units(self) -> int:
        return sum(self.units_by_type.values())


def calculate_units_by_area(
    available_gfa: float,
    unit_sizes: Mapping[str, float],
    unit_percentages: Mapping[str, float],
) -> UnitMixResult:
    """Allocate a GFA pool into whole units by bedroom type.

    Each type receives its percentage of the pool and fits as many whole
    units of its size as possible. Partial units are dropped, so the GFA
    consumed can be less than the pool.

    Args:
        available_gfa: GFA available for units (sqm).
        unit_sizes: Unit size by type (sqm). Types sized 0 get no units.
        unit_percentages: Share of the pool by type (0-100).

    Returns:
        UnitMixResult with unit counts and consumed GFA by type.

    Example:
        >>> mix = calculate_units_by_area(
        ...     10_000,
        ...     unit_sizes={"studio": 45, ...},
        ...     unit_percentages={"studio": 15, ...},
        ... )
        >>> mix.units["studio"]
        33  # floor(1,500 / 45)
    """
    units: Dict[str, int] = {}
    gfa: Dict[str, float] = {}

    for unit_type in UNIT_TYPES:
        size = unit_sizes[unit_type]
        gfa_for_type = available_gfa * (unit_percentages[unit_type] / 100)

        if size > 0:
            count = math.floor(gfa_for_type / size)
            units[unit_type] = count
            gfa[unit_type] = count * size
        else:
            units[unit_type] = 0
            gfa[unit_type] = 0.0

    return UnitMixResult(units=units, gfa=gfa)


def classify_units(
    total_units: int,
    development_type: DevelopmentType,
    budget_classification: BudgetClassification,
) -> AffordabilityResult:
    """Split units into affordable, market-rate and executive bands.

    Mixed-use and gated-community developments use a fixed distribution;
    other developments put every unit in the band of their budget
    classification. Bands are floored and any remainder goes to the largest
    band (first band wins a tie).

    Args:
        total_units: Total number of units.
        development_type: Development typology.
        budget_classification: Band used when no fixed distribution applies.

    Returns:
        AffordabilityResult whose bands sum to total_units.
    """
    distribution = UNIT_DISTRIBUTIONS.get(development_type)

    if distribution is not None:
        bands = {
            "affordable": math.floor(total_units * distribution.affordable),
            "market_rate": math.floor(total_units * distribution.market_rate),
            "executive": math.floor(total_units * distribution.executive),
        }
    else:
        bands = {"affordable": 0, "market_rate": 0, "executive": 0}
        if budget_classification == BudgetClassification.AFFORDABLE:
            bands["affordable"] = total_units
        elif budget_classification == BudgetClassification.EXECUTIVE:
            bands["executive"] = total_units
        else:
            bands["market_rate"] = total_units

    remainder = total_units - sum(bands.values())
    if remainder > 0:
        largest = max(bands, key=lambda band: bands[band])
        bands[largest] += remainder

    return AffordabilityResult(
        affordable_units=bands["affordable"],
        market_rate_units=bands["market_rate"],
        executive_units=bands["executive"],
    )


def derive_units(gfa: GFAResult, parameters: DevelopmentParameters) -> UnitResult:
    """Derive unit counts for mixed-use and regular residential GFA.

    Mixed-use units are sized by the mixed-use unit sizes. Regular
    residential units have no unit size of their own and use the
    residential plot size of each type instead.

    Args:
        gfa: GFA by land use.
        parameters: Development parameters.

    Returns:
        UnitResult with per-pool and combined counts and affordability bands.
    """
    mixed_use = calculate_units_by_area(
        gfa.mixed_use_residential_gfa,
        parameters.unit_values("mixed_use_", "_size"),
        parameters.unit_values("mixed_use_", "_percent"),
    )

    regular = calculate_units_by_area(
        gfa.residential_gfa,
        parameters.unit_values("residential_", "_plot_size"),
        parameters.unit_values("residential_", "_percent"),
    )

    units_by_type = {
        unit_type: mixed_use.units[unit_type] + regular.units[unit_type]
        for unit_type in UNIT_TYPES
    }

    affordability = classify_units(
        sum(units_by_type.values()),
        parameters.development_type,
        parameters.budget_classification,
    )

    return UnitResult(
        mixed_use=mixed_use,
        regular=regular,
        units_by_type=units_by_type,
        affordability=affordability,
    )


def get_total_units(units_by_type: Mapping[str, int]) -> int:
    """Get total unit count across bedroom types."""
    return sum(units_by_type[unit_type] for unit_type in UNIT_TYPES)
