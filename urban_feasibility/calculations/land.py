"""Land calculations: allocating the site across land uses and subdividing it."""

import math
from dataclasses import dataclass

from ..models.parameters import DevelopmentParameters


@dataclass
class LandAllocation:
    """Site area allocated to each land use (sqm)."""

    total_area: float
    open_space_area: float
    public_realm_area: float
    residential_area: float
    commercial_area: float
    institutional_area: float
    industrial_area: float
    mixed_use_area: float

    @property
    def allocated_area(self) -> float:
        """Sum of all allocated areas (equals total_area when percentages sum to 100)."""
        return (
            self.open_space_area
            + self.public_realm_area
            + self.residential_area
            + self.commercial_area
            + self.institutional_area
            + self.industrial_area
            + self.mixed_use_area
        )


@dataclass
class SubdivisionResult:
    """Plot and block counts for the land uses subdivided by fixed sizes."""

    commercial_plots: int
    institutional_plots: int
    industrial_plots: int
    mixed_use_plots: int
    residential_blocks: int
    commercial_blocks: int
    institutional_blocks: int
    industrial_blocks: int
    mixed_use_blocks: int

    @property
    def non_residential_plots(self) -> int:
        return (
            self.commercial_plots
            + self.institutional_plots
            + self.industrial_plots
            + self.mixed_use_plots
        )

    @property
    def total_blocks(self) -> int:
        return (
            self.residential_blocks
            + self.commercial_blocks
            + self.institutional_blocks
            + self.industrial_blocks
            + self.mixed_use_blocks
        )


def allocate_land(total_area: float, parameters: DevelopmentParameters) -> LandAllocation:
    """Split the site into land-use areas by percentage.

    Percentages are applied as given. If they do not sum to 100 the
    allocated areas will not sum to the site area either.

    Args:
        total_area: Site area in square meters.
        parameters: Development parameters with land-use percentages.

    Returns:
        LandAllocation with the area of each land use.

    Example:
        >>> land = allocate_land(100_000, default_parameters())
        >>> land.mixed_use_area
        26000.0
    """
    p = parameters
    return LandAllocation(
        total_area=total_area,
        open_space_area=total_area * (p.open_space_percent / 100),
        public_realm_area=total_area * (p.public_realm_percent / 100),
        residential_area=total_area * (p.residential_percent / 100),
        commercial_area=total_area * (p.commercial_percent / 100),
        institutional_area=total_area * (p.institutional_percent / 100),
        industrial_area=total_area * (p.industrial_percent / 100),
        mixed_use_area=total_area * (p.mixed_use_percent / 100),
    )


def count_subdivisions(area: float, size: float) -> int:
    """Count whole plots or blocks of a given size that fit in an area.

    Args:
        area: Area to subdivide (sqm).
        size: Size of one plot or block (sqm).

    Returns:
        floor(area / size), or 0 if either value is not positive.
    """
    if area <= 0 or size <= 0:
        return 0
    return math.floor(area / size)


def subdivide_land(land: LandAllocation, parameters: DevelopmentParameters) -> SubdivisionResult:
    """Count plots and blocks per land use.

    Residential plots are not counted here; they are sized per unit type by
    the residential plot allocator.

    Args:
        land: Land allocation from allocate_land.
        parameters: Development parameters with plot and block sizes.

    Returns:
        SubdivisionResult with plot and block counts.
    """
    p = parameters
    return SubdivisionResult(
        commercial_plots=count_subdivisions(land.commercial_area, p.commercial_plot_size),
        institutional_plots=count_subdivisions(land.institutional_area, p.institutional_plot_size),
        industrial_plots=count_subdivisions(land.industrial_area, p.industrial_plot_size),
        mixed_use_plots=count_subdivisions(land.mixed_use_area, p.mixed_use_plot_size),
        residential_blocks=count_subdivisions(land.residential_area, p.residential_block_size),
        commercial_blocks=count_subdivisions(land.commercial_area, p.commercial_block_size),
        institutional_blocks=count_subdivisions(land.institutional_area, p.institutional_block_size),
        industrial_blocks=count_subdivisions(land.industrial_area, p.industrial_block_size),
        mixed_use_blocks=count_subdivisions(land.mixed_use_area, p.mixed_use_block_size),
    )
