"""Multi-year revenue and NOI projection with investment metrics."""

import logging
from dataclasses import dataclass
from datetime import date

import numpy as np
import numpy_financial as npf
import pandas as pd

from ..models.result import CalculationResult
from .revenue import escalate_rent

logger = logging.getLogger(__name__)

DEFAULT_GROWTH_RATE_PCT = 3.0
DEFAULT_DISCOUNT_RATE = 0.08
DEFAULT_NOI_MARGIN = 0.65  # 35% operating expenses on projected revenue
SALE_REVENUE_SPREAD_YEARS = 10  # Sale revenue is spread evenly to get an annual base

PROJECTION_COLUMNS = [
    "year",
    "year_number",
    "annual_revenue",
    "cumulative_revenue",
    "occupancy_rate",
    "net_operating_income",
    "cumulative_noi",
]


@dataclass
class ProjectionResult:
    """Projection rows and summary investment metrics."""

    table: pd.DataFrame  # One row per year, PROJECTION_COLUMNS
    growth_rate_pct: float
    initial_investment: float
    total_revenue: float
    peak_annual_revenue: float
    average_annual_revenue: float
    npv: float
    irr: float  # Annual, decimal (0.12 = 12%)
    payback_year: int | None  # Year number (1-based), None if beyond the horizon


def base_annual_revenue(result: CalculationResult) -> float:
    """Get the first-year revenue for a projection.

    Annual rental NOI when the development earns rent, otherwise total
    revenue spread evenly over ten years.
    """
    if result.annual_rental_revenue > 0:
        return result.annual_rental_revenue
    return result.total_revenue / SALE_REVENUE_SPREAD_YEARS


def _irr(cash_flows: list[float]) -> float:
    try:
        irr = npf.irr(cash_flows)
        if irr is not None and not np.isnan(irr):
            return float(irr)
        return 0.0
    except Exception:
        return 0.0


def generate_projection(
    result: CalculationResult,
    growth_rate_pct: float | None = None,
    years: int = 10,
    start_year: int | None = None,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
    noi_margin: float = DEFAULT_NOI_MARGIN,
    initial_investment: float | None = None,
) -> ProjectionResult:
    """Project revenue and NOI forward year by year.

    Year n (0-based):
        revenue = base x (1 + growth)^n
        NOI = revenue x noi_margin
        occupancy = min(95, 80 + 5n)

    NPV discounts each year's NOI from the end of that year and subtracts
    the initial investment. IRR is computed on [-investment, NOI...].

    Args:
        result: Calculation result to project from.
        growth_rate_pct: Annual revenue growth (%). Defaults to 3%.
        years: Projection horizon.
        start_year: Calendar year of the first row. Defaults to this year.
        discount_rate: Discount rate for NPV (decimal).
        noi_margin: Share of revenue kept as NOI (decimal).
        initial_investment: Investment recovered by NOI. Defaults to TDC.

    Returns:
        ProjectionResult with the yearly table and summary metrics.

    Raises:
        ValueError: If years is not positive.
    """
    if years <= 0:
        raise ValueError(f"Projection horizon must be positive, got {years} years")

    if growth_rate_pct is None:
        growth_rate_pct = DEFAULT_GROWTH_RATE_PCT
    if start_year is None:
        start_year = date.today().year
    if initial_investment is None:
        initial_investment = result.total_development_cost

    growth = growth_rate_pct / 100
    base = base_annual_revenue(result)

    year_index = np.arange(years)
    annual_revenue = escalate_rent(base, year_index, growth)
    noi = annual_revenue * noi_margin

    table = pd.DataFrame(
        {
            "year": start_year + year_index,
            "year_number": year_index + 1,
            "annual_revenue": annual_revenue,
            "cumulative_revenue": np.cumsum(annual_revenue),
            "occupancy_rate": np.minimum(95, 80 + 5 * year_index),
            "net_operating_income": noi,
            "cumulative_noi": np.cumsum(noi),
        },
        columns=PROJECTION_COLUMNS,
    )

    # First value is undiscounted, so NOI is discounted from year 1
    cash_flows = [-initial_investment] + noi.tolist()
    npv = float(npf.npv(discount_rate, cash_flows))
    irr = _irr(cash_flows)

    paid_back = table.loc[table["cumulative_noi"] >= initial_investment, "year_number"]
    payback_year = int(paid_back.iloc[0]) if not paid_back.empty else None

    total_revenue = float(table["cumulative_revenue"].iloc[-1])

    logger.debug(
        "Projected %d years at %.1f%% growth: NPV=%.0f IRR=%.4f payback=%s",
        years, growth_rate_pct, npv, irr, payback_year,
    )

    return ProjectionResult(
        table=table,
        growth_rate_pct=growth_rate_pct,
        initial_investment=initial_investment,
        total_revenue=total_revenue,
        peak_annual_revenue=float(table["annual_revenue"].max()),
        average_annual_revenue=total_revenue / years,
        npv=npv,
        irr=irr,
        payback_year=payback_year,
    )
