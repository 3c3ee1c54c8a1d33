"""Population, parking demand and density metrics."""

import math
from dataclasses import dataclass
from typing import Dict, Mapping

from ..models.lookups import OCCUPANCY_RATES, SQM_PER_HECTARE, UNIT_TYPES
from ..models.parameters import DevelopmentParameters
from .gfa import GFAResult
from .land import LandAllocation
from .ratios import safe_divide


@dataclass
class PopulationResult:
    """Resident population."""

    total_population: float
    adults: float
    children: float


@dataclass
class ParkingResult:
    """Parking spaces by category."""

    resident_parking: int
    guest_parking: int
    disabled_parking: int

    @property
    def total_parking_spaces(self) -> int:
        return self.resident_parking + self.guest_parking + self.disabled_parking


@dataclass
class DensityResult:
    """Density ratios for the site."""

    units_per_hectare: float
    people_per_hectare: float
    plot_ratio: float  # Total GFA / site area
    far_by_use: Dict[str, float]  # GFA / allocated area per built land use


def calculate_population(
    units_by_type: Mapping[str, int],
    parameters: DevelopmentParameters,
) -> PopulationResult:
    """Estimate resident population from unit counts.

    Population = sum(units x average occupancy) over bedroom types, split
    into adults and children by the demographic percentages.

    Args:
        units_by_type: Total units by bedroom type.
        parameters: Development parameters with demographic split.

    Returns:
        PopulationResult.
    """
    total_population = sum(units_by_type[t] * OCCUPANCY_RATES[t] for t in UNIT_TYPES)

    return PopulationResult(
        total_population=total_population,
        adults=total_population * (parameters.adults_percent / 100),
        children=total_population * (parameters.children_percent / 100),
    )


def calculate_parking(total_units: int, parameters: DevelopmentParameters) -> ParkingResult:
    """Calculate parking demand, rounding every category up to whole spaces.

    Args:
        total_units: Total number of units.
        parameters: Development parameters with parking ratios.

    Returns:
        ParkingResult with resident, guest and disabled spaces.

    Example:
        >>> calculate_parking(101, default_parameters()).resident_parking
        152  # ceil(101 x 1.5)
    """
    resident = math.ceil(total_units * parameters.parking_spaces_per_unit)
    guest = math.ceil(resident * (parameters.guest_parking_percent / 100))
    disabled = math.ceil(resident * (parameters.disabled_parking_percent / 100))

    return ParkingResult(
        resident_parking=resident,
        guest_parking=guest,
        disabled_parking=disabled,
    )


def calculate_density(
    land: LandAllocation,
    gfa: GFAResult,
    total_units: int,
    total_population: float,
) -> DensityResult:
    """Calculate density ratios. Every ratio is 0 when its denominator is 0.

    Args:
        land: Land allocation.
        gfa: GFA by land use.
        total_units: Total number of units.
        total_population: Resident population.

    Returns:
        DensityResult.
    """
    hectares = land.total_area / SQM_PER_HECTARE

    far_by_use = {
        "residential": safe_divide(gfa.residential_gfa, land.residential_area),
        "commercial": safe_divide(gfa.commercial_gfa, land.commercial_area),
        "mixed_use": safe_divide(gfa.mixed_use_gfa, land.mixed_use_area),
        "institutional": safe_divide(gfa.institutional_gfa, land.institutional_area),
        "industrial": safe_divide(gfa.industrial_gfa, land.industrial_area),
    }

    return DensityResult(
        units_per_hectare=safe_divide(total_units, hectares),
        people_per_hectare=safe_divide(total_population, hectares),
        plot_ratio=safe_divide(gfa.total_gfa, land.total_area),
        far_by_use=far_by_use,
    )
