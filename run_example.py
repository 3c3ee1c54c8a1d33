#!/usr/bin/env python3
"""Example script to run the feasibility calculator on a sample site."""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import pandas as pd

from urban_feasibility.models import RevenueModel, default_parameters
from urban_feasibility.calculations import calculate, format_summary_table, generate_projection
from urban_feasibility.scenarios import run_sensitivity_grid

SAMPLE_SITE_AREA = 100_000  # sqm (10 hectares)


def run_revenue_models(total_area: float):
    """Run the default parameters under each revenue model."""
    base = default_parameters()

    for model in RevenueModel:
        result = calculate(total_area, base.with_overrides(revenue_model=model))
        print()
        print(format_summary_table(result))


def run_projection(total_area: float):
    """Project a rental development ten years forward."""
    params = default_parameters().with_overrides(revenue_model=RevenueModel.RENTAL)
    result = calculate(total_area, params)
    projection = generate_projection(result, growth_rate_pct=params.annual_rent_increase)

    print("\n" + "=" * 60)
    print("10-YEAR PROJECTION (RENTAL)")
    print("=" * 60)
    print(projection.table.to_string(index=False, float_format=lambda v: f"{v:,.0f}"))
    print()
    print(f"{'Initial Investment':<25} {projection.initial_investment:>20,.0f}")
    print(f"{'NPV @ 8%':<25} {projection.npv:>20,.0f}")
    print(f"{'IRR':<25} {projection.irr:>19.2%}")
    payback = projection.payback_year if projection.payback_year is not None else "> horizon"
    print(f"{'Payback (years)':<25} {payback!s:>20}")


def run_sensitivity(total_area: float):
    """Show gross margin across revenue and cost multipliers."""
    grid = run_sensitivity_grid(total_area, default_parameters())
    margins = grid.pivot(index="revenue_multiplier", columns="cost_multiplier", values="profit_margin")

    print("\n" + "=" * 60)
    print("PROFIT MARGIN SENSITIVITY (%) rows=revenue x, cols=cost x")
    print("=" * 60)
    with pd.option_context("display.float_format", "{:,.1f}".format):
        print(margins)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Urban Feasibility Calculator")
    parser.add_argument(
        "--area",
        type=float,
        default=SAMPLE_SITE_AREA,
        help="Site area in square meters",
    )
    parser.add_argument(
        "--sensitivity",
        action="store_true",
        help="Also run the revenue/cost sensitivity grid",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_revenue_models(args.area)
    run_projection(args.area)

    if args.sensitivity:
        run_sensitivity(args.area)

    print("\nDone.")


if __name__ == "__main__":
    main()
