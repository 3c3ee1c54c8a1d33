"""Data models for the urban feasibility calculator."""

from .lookups import (
    DevelopmentType,
    DensityLevel,
    BudgetClassification,
    RevenueModel,
    UNIT_TYPES,
    BUILT_LAND_USES,
    LAND_USES,
    OCCUPANCY_RATES,
    UNIT_DISTRIBUTIONS,
    DENSITY_COST_MULTIPLIERS,
)
from .parameters import (
    DevelopmentParameters,
    default_parameters,
    validate_parameters,
)
from .result import CalculationResult

__all__ = [
    "DevelopmentType",
    "DensityLevel",
    "BudgetClassification",
    "RevenueModel",
    "UNIT_TYPES",
    "BUILT_LAND_USES",
    "LAND_USES",
    "OCCUPANCY_RATES",
    "UNIT_DISTRIBUTIONS",
    "DENSITY_COST_MULTIPLIERS",
    "DevelopmentParameters",
    "default_parameters",
    "validate_parameters",
    "CalculationResult",
]
