"""Cash flow analysis: NOI, cap rate, CoC return, DSCR.

Pure functions: Decimal in, Decimal out. No I/O.

Every ratio goes through safe_div, so a zero or negative denominator yields 0
instead of raising. The calculator is total for any numeric input.
"""

from decimal import Decimal

from src.models.property import PropertyInputs
from src.models.results import CalculationResults
from src.engine.debt import monthly_payment

HUNDRED = Decimal("100")


def safe_div(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator, or 0 when the denominator is not positive."""
    if denominator <= 0:
        return Decimal("0")
    return numerator / denominator


def effective_rent(inputs: PropertyInputs) -> Decimal:
    """Expected rent scaled by occupancy."""
    return inputs.expected_rent * (inputs.occupancy / HUNDRED)


def monthly_operating_expenses(inputs: PropertyInputs) -> Decimal:
    """Sum of monthly expense lines. Property tax is annual and converted here."""
    return (
        inputs.repair_fund
        + inputs.management
        + inputs.insurance
        + inputs.property_tax / 12
        + inputs.utilities
        + inputs.internet
        + inputs.other_costs
        + inputs.unexpected_costs
    )


def calculate_cash_flow(inputs: PropertyInputs) -> CalculationResults:
    """Compute the full cash flow snapshot for one set of inputs."""
    payment = monthly_payment(
        inputs.mortgage_amount, inputs.interest_rate, inputs.loan_term_years
    )
    rent = effective_rent(inputs)
    expenses = monthly_operating_expenses(inputs)

    noi = rent - expenses
    monthly_cf = noi - payment
    annual_cf = monthly_cf * 12

    cash_on_cash = safe_div(annual_cf, inputs.own_funds) * HUNDRED

    return CalculationResults(
        mortgage_payment=payment,
        total_investment=inputs.own_funds,
        effective_rent=rent,
        total_monthly_expenses=expenses,
        noi=noi,
        monthly_cash_flow=monthly_cf,
        annual_cash_flow=annual_cf,
        annual_debt_service=payment * 12,
        annual_expenses=expenses * 12,
        annual_income=rent * 12,
        cash_on_cash_return=cash_on_cash,
        cap_rate=safe_div(noi * 12, inputs.purchase_price) * HUNDRED,
        # ROI is reported as cash-on-cash; there is no separate formula
        roi=cash_on_cash,
        # No debt reports 0, same as no coverage
        dscr=safe_div(noi, payment),
        break_even_occupancy=safe_div(expenses + payment, inputs.expected_rent) * HUNDRED,
        total_investment_roi=safe_div(annual_cf, inputs.purchase_price) * HUNDRED,
        expense_ratio=safe_div(expenses, rent) * HUNDRED,
    )
