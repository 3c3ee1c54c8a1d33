"""Lookup tables and enumerations for the feasibility calculator."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class DevelopmentType(Enum):
    """Development typology; selects the affordability distribution."""

    MIXED_USE = "Mixed-Use"
    GATED_COMMUNITY = "Gated Community"
    RURAL = "Rural"


class DensityLevel(Enum):
    """Density level; scales construction costs."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class BudgetClassification(Enum):
    """Single affordability band used outside mixed-use and gated developments."""

    AFFORDABLE = "Affordable"
    MARKET_RATE = "Market Rate"
    EXECUTIVE = "Executive"


class RevenueModel(Enum):
    """How the development earns its revenue."""

    SALE = "sale"
    RENTAL = "rental"
    MIXED = "mixed"


# Bedroom types in the order they appear on every parameter and result group.
UNIT_TYPES = ("studio", "one_bed", "two_bed", "three_bed", "four_bed")

# Built land-use types (those that carry GFA and construction cost)
BUILT_LAND_USES = ("residential", "commercial", "mixed_use", "institutional", "industrial")

# All land-use categories that share the site
LAND_USES = ("open_space", "public_realm") + BUILT_LAND_USES

SQM_PER_HECTARE = 10_000


# Average persons per unit by bedroom type
OCCUPANCY_RATES: Dict[str, float] = {
    "studio": 1.5,
    "one_bed": 2.0,
    "two_bed": 2.5,
    "three_bed": 3.5,
    "four_bed": 4.5,
}


@dataclass(frozen=True)
class UnitDistribution:
    """Fixed split of units across affordability bands (fractions of 1)."""

    affordable: float
    market_rate: float
    executive: float


UNIT_DISTRIBUTIONS: Dict[DevelopmentType, UnitDistribution] = {
    DevelopmentType.MIXED_USE: UnitDistribution(affordable=0.4, market_rate=0.4, executive=0.2),
    DevelopmentType.GATED_COMMUNITY: UnitDistribution(affordable=0.2, market_rate=0.5, executive=0.3),
}


# Mixed-use GFA split used when a breakdown percentage is unset (percent)
MIXED_USE_BREAKDOWN_DEFAULTS: Dict[str, float] = {
    "residential": 60.0,
    "commercial": 30.0,
    "institutional": 10.0,
}


DENSITY_COST_MULTIPLIERS: Dict[DensityLevel, float] = {
    DensityLevel.HIGH: 1.1,
    DensityLevel.MEDIUM: 1.0,
    DensityLevel.LOW: 0.9,
}

# Land cost per sqm when no acquisition cost is given (AED, typical UAE land)
DEFAULT_LAND_COST_PER_SQM = 2000.0

# Operating expenses as a fraction of total revenue
OPERATING_EXPENSES_PCT = 0.15

# Corporate tax rate (UAE free zones)
TAX_RATE = 0.05

# Tolerance in percentage points for the percentage-sum checks
PERCENT_SUM_TOLERANCE = 0.1


def get_density_multiplier(density_level: DensityLevel) -> float:
    """Get the construction cost multiplier for a density level.

    Args:
        density_level: Density level of the development.

    Returns:
        Multiplier applied to per-sqm construction costs (1.0 if unknown).
    """
    return DENSITY_COST_MULTIPLIERS.get(density_level, 1.0)
