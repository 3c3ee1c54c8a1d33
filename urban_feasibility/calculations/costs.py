"""Cost calculations: construction, land, soft costs and total development cost."""

from dataclasses import dataclass
from typing import Dict, Mapping

from ..models.lookups import BUILT_LAND_USES, DEFAULT_LAND_COST_PER_SQM, get_density_multiplier
from ..models.parameters import DevelopmentParameters


@dataclass
class CostResult:
    """Results of the development cost calculation."""

    construction_by_use: Dict[str, float]  # Building cost per built land use
    infrastructure_cost: float
    total_construction_cost: float  # Buildings + infrastructure
    land_acquisition_cost: float
    professional_fees: float
    contingency_cost: float
    marketing_cost: float
    total_development_cost: float
    density_multiplier: float

    @property
    def soft_costs(self) -> float:
        return self.professional_fees + self.contingency_cost + self.marketing_cost


def calculate_land_acquisition_cost(total_area: float, land_acquisition_cost: float) -> float:
    """Get the land cost, deriving it from site area when none is given.

    Args:
        total_area: Site area (sqm).
        land_acquisition_cost: Explicit land cost (0 or less = not given).

    Returns:
        The explicit cost if positive, else total_area x default land cost per sqm.
    """
    if land_acquisition_cost > 0:
        return land_acquisition_cost
    return total_area * DEFAULT_LAND_COST_PER_SQM


def calculate_costs(
    gfa_by_use: Mapping[str, float],
    total_area: float,
    parameters: DevelopmentParameters,
) -> CostResult:
    """Calculate Total Development Cost (TDC).

    Construction = sum(GFA x cost per sqm x density multiplier) + infrastructure
    TDC = Construction + Land + Professional Fees + Contingency + Marketing

    Soft costs are percentages of total construction cost, infrastructure
    included.

    Args:
        gfa_by_use: GFA by built land use (residential, commercial, mixed_use,
            institutional, industrial).
        total_area: Site area (sqm).
        parameters: Development parameters with cost rates.

    Returns:
        CostResult with all cost components and TDC.

    Example:
        >>> costs = calculate_costs(
        ...     {"residential": 50_000, "commercial": 10_000, "mixed_use": 5_000,
        ...      "institutional": 0, "industrial": 0},
        ...     total_area=10_000,
        ...     parameters=params,  # Medium density, 1000/1500/1200 per sqm
        ... )
        >>> costs.total_construction_cost
        71000000.0
    """
    p = parameters
    multiplier = get_density_multiplier(p.density_level)

    construction_by_use = {
        use: gfa_by_use[use] * getattr(p, f"{use}_construction_cost") * multiplier
        for use in BUILT_LAND_USES
    }

    infrastructure_cost = total_area * p.infrastructure_cost_per_sqm
    total_construction_cost = sum(construction_by_use.values()) + infrastructure_cost

    land_acquisition_cost = calculate_land_acquisition_cost(total_area, p.land_acquisition_cost)

    professional_fees = total_construction_cost * (p.professional_fees_percent / 100)
    contingency_cost = total_construction_cost * (p.contingency_percent / 100)
    marketing_cost = total_construction_cost * (p.marketing_cost_percent / 100)

    total_development_cost = (
        total_construction_cost
        + land_acquisition_cost
        + professional_fees
        + contingency_cost
        + marketing_cost
    )

    return CostResult(
        construction_by_use=construction_by_use,
        infrastructure_cost=infrastructure_cost,
        total_construction_cost=total_construction_cost,
        land_acquisition_cost=land_acquisition_cost,
        professional_fees=professional_fees,
        contingency_cost=contingency_cost,
        marketing_cost=marketing_cost,
        total_development_cost=total_development_cost,
        density_multiplier=multiplier,
    )
