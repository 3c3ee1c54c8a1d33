"""What-if runs and revenue/cost sensitivity grids.

Every scenario re-runs the full engine on scaled inputs, so all derived
metrics stay consistent with each other.
"""

import logging
from dataclasses import dataclass
from itertools import product
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from .calculations.engine import calculate
from .models.lookups import BUILT_LAND_USES, UNIT_TYPES
from .models.parameters import DevelopmentParameters
from .models.result import CalculationResult

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIERS = np.linspace(0.8, 1.2, 5)

REVENUE_FIELDS = (
    [f"{unit_type}_sale_price" for unit_type in UNIT_TYPES]
    + [f"mixed_use_{unit_type}_sale_price" for unit_type in UNIT_TYPES]
    + [f"{unit_type}_rent_per_month" for unit_type in UNIT_TYPES]
    + ["commercial_sale_price", "commercial_rental_rate", "commercial_rent_per_sqm"]
)

COST_FIELDS = [f"{use}_construction_cost" for use in BUILT_LAND_USES] + [
    "infrastructure_cost_per_sqm",
    "land_acquisition_cost",  # 0 stays 0, so a derived land cost is not scaled
]

GRID_COLUMNS = [
    "revenue_multiplier",
    "cost_multiplier",
    "total_revenue",
    "total_development_cost",
    "gross_profit",
    "net_profit",
    "profit_margin",
    "return_on_investment",
]


@dataclass
class WhatIfScenario:
    """A single revenue/cost adjustment and its result."""

    revenue_multiplier: float
    cost_multiplier: float
    result: CalculationResult

    def to_row(self) -> Dict[str, float]:
        r = self.result
        return {
            "revenue_multiplier": self.revenue_multiplier,
            "cost_multiplier": self.cost_multiplier,
            "total_revenue": r.total_revenue,
            "total_development_cost": r.total_development_cost,
            "gross_profit": r.gross_profit,
            "net_profit": r.net_profit,
            "profit_margin": r.profit_margin,
            "return_on_investment": r.return_on_investment,
        }


def apply_what_if(
    parameters: DevelopmentParameters,
    revenue_multiplier: float = 1.0,
    cost_multiplier: float = 1.0,
) -> DevelopmentParameters:
    """Scale price and cost inputs.

    Sale prices, rents and commercial rates are multiplied by
    revenue_multiplier; construction costs, infrastructure cost and an
    explicit land cost by cost_multiplier.

    Args:
        parameters: Base parameters (not modified).
        revenue_multiplier: Factor for revenue inputs (1.0 = unchanged).
        cost_multiplier: Factor for cost inputs (1.0 = unchanged).

    Returns:
        New DevelopmentParameters with the scaled values.

    Raises:
        ValueError: If a multiplier is negative.
    """
    if revenue_multiplier < 0 or cost_multiplier < 0:
        raise ValueError(
            f"Multipliers must be non-negative, got revenue={revenue_multiplier} cost={cost_multiplier}"
        )

    changes = {name: getattr(parameters, name) * revenue_multiplier for name in REVENUE_FIELDS}
    changes.update({name: getattr(parameters, name) * cost_multiplier for name in COST_FIELDS})

    return parameters.with_overrides(**changes)


def run_what_if(
    total_area: float,
    parameters: DevelopmentParameters,
    revenue_multiplier: float = 1.0,
    cost_multiplier: float = 1.0,
) -> CalculationResult:
    """Calculate a site with scaled revenue and cost inputs."""
    adjusted = apply_what_if(parameters, revenue_multiplier, cost_multiplier)
    return calculate(total_area, adjusted)


def run_sensitivity_grid(
    total_area: float,
    parameters: DevelopmentParameters,
    revenue_multipliers: Iterable[float] | None = None,
    cost_multipliers: Iterable[float] | None = None,
) -> pd.DataFrame:
    """Run every combination of revenue and cost multipliers.

    Args:
        total_area: Site area (sqm).
        parameters: Base parameters.
        revenue_multipliers: Revenue factors. Defaults to 0.8-1.2 in 5 steps.
        cost_multipliers: Cost factors. Defaults to 0.8-1.2 in 5 steps.

    Returns:
        DataFrame with one row per combination, revenue multiplier varying
        slowest, and GRID_COLUMNS as columns.
    """
    if revenue_multipliers is None:
        revenue_multipliers = DEFAULT_MULTIPLIERS
    if cost_multipliers is None:
        cost_multipliers = DEFAULT_MULTIPLIERS

    scenarios: List[WhatIfScenario] = []
    for revenue_multiplier, cost_multiplier in product(revenue_multipliers, cost_multipliers):
        result = run_what_if(total_area, parameters, revenue_multiplier, cost_multiplier)
        scenarios.append(WhatIfScenario(
            revenue_multiplier=float(revenue_multiplier),
            cost_multiplier=float(cost_multiplier),
            result=result,
        ))

    logger.info("Ran sensitivity grid with %d scenarios", len(scenarios))

    return pd.DataFrame([s.to_row() for s in scenarios], columns=GRID_COLUMNS)
