"""Financial metrics and summary reporting."""

from dataclasses import dataclass

from ..models.lookups import OPERATING_EXPENSES_PCT, TAX_RATE
from ..models.parameters import DevelopmentParameters
from ..models.result import CalculationResult
from .costs import CostResult
from .ratios import safe_divide


@dataclass
class FinancingResult:
    """Capital structure and interest carry over the development timeline."""

    total_loan_amount: float
    total_equity_amount: float
    annual_interest_cost: float
    total_interest_cost: float


@dataclass
class FinancialMetrics:
    """Profitability, returns and unit economics."""

    gross_profit: float
    operating_expenses: float
    tax_amount: float
    net_profit: float
    profit_margin: float  # Percent of revenue
    return_on_investment: float  # Percent of equity
    break_even_years: float
    financing: FinancingResult

    # Unit economics
    average_unit_price: float
    construction_cost_per_unit: float
    profit_per_unit: float


def calculate_financing(
    total_development_cost: float,
    parameters: DevelopmentParameters,
) -> FinancingResult:
    """Split TDC into loan and equity and carry interest over the timeline.

    Loan and equity are sized independently from their own percentages, so
    they need not sum to TDC.

    Args:
        total_development_cost: TDC.
        parameters: Development parameters with LTV, equity and interest rate.

    Returns:
        FinancingResult.
    """
    p = parameters
    loan = total_development_cost * (p.loan_to_value_ratio / 100)
    equity = total_development_cost * (p.equity_percentage / 100)
    annual_interest = loan * (p.financing_interest_rate / 100)

    return FinancingResult(
        total_loan_amount=loan,
        total_equity_amount=equity,
        annual_interest_cost=annual_interest,
        total_interest_cost=annual_interest * p.development_timeline_years,
    )


def calculate_break_even_years(equity: float, net_profit: float, years: float) -> float:
    """Years of annualized net profit needed to return the equity.

    Returns 0 when the timeline is zero or annualized net profit is not
    positive.
    """
    annual_net_profit = safe_divide(net_profit, years)
    if annual_net_profit <= 0:
        return 0.0
    return abs(equity / annual_net_profit)


def calculate_financial_metrics(
    total_revenue: float,
    costs: CostResult,
    total_units: int,
    parameters: DevelopmentParameters,
) -> FinancialMetrics:
    """Calculate profit, returns and unit economics.

    Gross Profit = Revenue - TDC
    Operating Expenses = Revenue x 15%
    Tax = (Revenue - TDC - Operating Expenses - Interest) x 5%
    Net Profit = Gross Profit - Operating Expenses - Interest - Tax

    Tax is applied to losses too, so it can be negative.

    Args:
        total_revenue: Total revenue under the active revenue model.
        costs: Development costs.
        total_units: Total number of units.
        parameters: Development parameters with financing terms.

    Returns:
        FinancialMetrics. Every ratio is 0 when its denominator is 0.

    Example:
        >>> metrics = calculate_financial_metrics(310_000_000, costs, 500, params)
        >>> round(metrics.profit_margin, 2)  # TDC 83.15M
        73.18
    """
    tdc = costs.total_development_cost
    financing = calculate_financing(tdc, parameters)
    interest = financing.total_interest_cost

    gross_profit = total_revenue - tdc
    operating_expenses = total_revenue * OPERATING_EXPENSES_PCT
    tax_amount = (total_revenue - tdc - operating_expenses - interest) * TAX_RATE
    net_profit = gross_profit - operating_expenses - interest - tax_amount

    return FinancialMetrics(
        gross_profit=gross_profit,
        operating_expenses=operating_expenses,
        tax_amount=tax_amount,
        net_profit=net_profit,
        profit_margin=safe_divide(gross_profit, total_revenue) * 100,
        return_on_investment=safe_divide(net_profit, financing.total_equity_amount) * 100,
        break_even_years=calculate_break_even_years(
            financing.total_equity_amount,
            net_profit,
            parameters.development_timeline_years,
        ),
        financing=financing,
        average_unit_price=safe_divide(total_revenue, total_units),
        construction_cost_per_unit=safe_divide(costs.total_construction_cost, total_units),
        profit_per_unit=safe_divide(net_profit, total_units),
    )


def format_summary_table(result: CalculationResult) -> str:
    """Format the key technical and financial metrics as a text table.

    Args:
        result: Calculation result.

    Returns:
        Formatted string table.
    """
    r = result

    lines = [
        "=" * 60,
        f"FEASIBILITY SUMMARY ({r.revenue_model.value.upper()} MODEL)",
        "=" * 60,
        "",
        f"{'Site Area (sqm)':<30} {r.total_area:>27,.0f}",
        f"{'Total GFA (sqm)':<30} {r.total_gfa:>27,.0f}",
        f"{'Plot Ratio':<30} {r.plot_ratio:>27.2f}",
        f"{'Plots / Blocks':<30} {r.total_plots:>18,d} / {r.total_blocks:>6,d}",
        "",
        f"{'Total Units':<30} {r.total_units:>27,d}",
        f"{'  Affordable':<30} {r.affordable_units:>27,d}",
        f"{'  Market Rate':<30} {r.market_rate_units:>27,d}",
        f"{'  Executive':<30} {r.executive_units:>27,d}",
        f"{'Population':<30} {r.total_population:>27,.0f}",
        f"{'Parking Spaces':<30} {r.total_parking_spaces:>27,d}",
        f"{'Units / Hectare':<30} {r.units_per_hectare:>27.1f}",
        "",
        "-" * 60,
        f"{'Construction Cost':<30} {r.total_construction_cost:>27,.0f}",
        f"{'Land Cost':<30} {r.land_acquisition_cost:>27,.0f}",
        f"{'Total Development Cost':<30} {r.total_development_cost:>27,.0f}",
        f"{'Total Revenue':<30} {r.total_revenue:>27,.0f}",
    ]

    if r.annual_rental_revenue:
        lines.append(f"{'  Annual NOI':<30} {r.annual_rental_revenue:>27,.0f}")

    lines += [
        f"{'Gross Profit':<30} {r.gross_profit:>27,.0f}",
        f"{'Net Profit':<30} {r.net_profit:>27,.0f}",
        "",
        f"{'Profit Margin':<30} {r.profit_margin:>26.2f}%",
        f"{'ROI':<30} {r.return_on_investment:>26.2f}%",
        f"{'Break-even (years)':<30} {r.break_even_years:>27.1f}",
        f"{'Profit / Unit':<30} {r.profit_per_unit:>27,.0f}",
        "=" * 60,
    ]

    return "\n".join(lines)
