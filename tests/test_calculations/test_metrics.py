"""Tests for financial metrics and the summary table."""

import math

import pytest

from urban_feasibility.calculations.costs import calculate_costs
from urban_feasibility.calculations.metrics import (
    calculate_break_even_years,
    calculate_financial_metrics,
    calculate_financing,
    format_summary_table,
)
from urban_feasibility.models import CalculationResult, RevenueModel

from tests.fixtures.test_inputs import (
    EXPECTED_GROSS_PROFIT,
    EXPECTED_MARGIN,
    EXPECTED_REVENUE,
    EXPECTED_TDC,
)

REFERENCE_GFA = {
    "residential": 50_000,
    "commercial": 10_000,
    "mixed_use": 5_000,
    "institutional": 0,
    "industrial": 0,
}


@pytest.fixture
def reference_costs(reference_params):
    return calculate_costs(REFERENCE_GFA, 10_000, reference_params)


class TestCalculateFinancing:
    """Tests for loan, equity and interest."""

    def test_default_terms(self, reference_params):
        """Loan and equity should be LTV and equity shares of TDC."""
        financing = calculate_financing(EXPECTED_TDC, reference_params)

        assert financing.total_loan_amount == pytest.approx(EXPECTED_TDC * 0.70)
        assert financing.total_equity_amount == pytest.approx(EXPECTED_TDC * 0.30)
        assert financing.annual_interest_cost == pytest.approx(EXPECTED_TDC * 0.70 * 0.065)
        # 36-month timeline
        assert financing.total_interest_cost == pytest.approx(EXPECTED_TDC * 0.70 * 0.065 * 3)


class TestFinancialMetrics:
    """Tests for profit, margin, ROI and break-even."""

    def test_reference_profit_and_margin(self, reference_params, reference_costs):
        """310M revenue against 83.15M TDC should give a ~73.18% margin."""
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 500, reference_params)

        assert metrics.gross_profit == pytest.approx(EXPECTED_GROSS_PROFIT)
        assert metrics.profit_margin == pytest.approx(EXPECTED_MARGIN, abs=0.01)

    def test_net_profit_waterfall(self, reference_params, reference_costs):
        """Net profit should deduct opex, interest and tax from gross profit."""
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 500, reference_params)
        interest = metrics.financing.total_interest_cost

        assert metrics.operating_expenses == pytest.approx(EXPECTED_REVENUE * 0.15)
        assert metrics.tax_amount == pytest.approx(
            (EXPECTED_REVENUE - EXPECTED_TDC - EXPECTED_REVENUE * 0.15 - interest) * 0.05
        )
        assert metrics.net_profit == pytest.approx(
            metrics.gross_profit - metrics.operating_expenses - interest - metrics.tax_amount
        )

    def test_roi_and_break_even(self, reference_params, reference_costs):
        """ROI and break-even should be measured against equity."""
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 500, reference_params)
        equity = metrics.financing.total_equity_amount

        assert metrics.return_on_investment == pytest.approx(metrics.net_profit / equity * 100)
        assert metrics.break_even_years == pytest.approx(equity / (metrics.net_profit / 3))

    def test_unit_economics(self, reference_params, reference_costs):
        """Unit economics should divide by total units."""
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 500, reference_params)

        assert metrics.average_unit_price == pytest.approx(620_000)
        assert metrics.construction_cost_per_unit == pytest.approx(142_000)
        assert metrics.profit_per_unit == pytest.approx(metrics.net_profit / 500)

    def test_zero_revenue(self, reference_params, reference_costs):
        """Zero revenue should give a loss equal to TDC and a 0 margin."""
        metrics = calculate_financial_metrics(0, reference_costs, 500, reference_params)

        assert metrics.gross_profit == pytest.approx(-EXPECTED_TDC)
        assert metrics.profit_margin == 0
        assert metrics.break_even_years == 0

    def test_zero_units(self, reference_params, reference_costs):
        """No units should give zero unit economics."""
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 0, reference_params)

        assert metrics.average_unit_price == 0
        assert metrics.construction_cost_per_unit == 0
        assert metrics.profit_per_unit == 0

    def test_zero_equity(self, reference_params, reference_costs):
        """No equity should give 0 ROI."""
        params = reference_params.with_overrides(equity_percentage=0.0)
        metrics = calculate_financial_metrics(EXPECTED_REVENUE, reference_costs, 500, params)

        assert metrics.return_on_investment == 0
        assert metrics.break_even_years == 0


class TestBreakEvenYears:
    """Tests for the break-even guard."""

    def test_positive_profit(self):
        """Break-even should be equity over annual net profit."""
        assert calculate_break_even_years(300, 600, 3) == pytest.approx(1.5)

    @pytest.mark.parametrize("net_profit,years", [(-600, 3), (0, 3), (600, 0)])
    def test_guarded_cases(self, net_profit, years):
        """Losses and a zero timeline should give 0."""
        result = calculate_break_even_years(300, net_profit, years)

        assert result == 0
        assert math.isfinite(result)


class TestFormatSummaryTable:
    """Tests for the text summary."""

    def test_contains_key_metrics(self):
        """The summary should show the model and key figures."""
        result = CalculationResult(
            total_area=10_000,
            total_units=500,
            total_revenue=310_000_000,
            total_development_cost=83_150_000,
            profit_margin=73.18,
        )
        table = format_summary_table(result)

        assert "SALE MODEL" in table
        assert "310,000,000" in table
        assert "83,150,000" in table
        assert "73.18%" in table
        assert "Annual NOI" not in table

    def test_rental_shows_noi(self):
        """Rental results should include annual NOI."""
        result = CalculationResult(revenue_model=RevenueModel.RENTAL, annual_rental_revenue=1_000_000)

        table = format_summary_table(result)

        assert "RENTAL MODEL" in table
        assert "Annual NOI" in table
