from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CalculationResults:
    # Financing
    mortgage_payment: Decimal = Decimal("0")  # Monthly
    total_investment: Decimal = Decimal("0")  # Own funds

    # Monthly operations
    effective_rent: Decimal = Decimal("0")
    total_monthly_expenses: Decimal = Decimal("0")  # Operating only, excludes mortgage
    noi: Decimal = Decimal("0")
    monthly_cash_flow: Decimal = Decimal("0")

    # Annual
    annual_cash_flow: Decimal = Decimal("0")
    annual_debt_service: Decimal = Decimal("0")
    annual_expenses: Decimal = Decimal("0")
    annual_income: Decimal = Decimal("0")

    # Metrics (percent unless noted)
    cash_on_cash_return: Decimal = Decimal("0")
    cap_rate: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")
    dscr: Decimal = Decimal("0")  # Ratio
    break_even_occupancy: Decimal = Decimal("0")
    total_investment_roi: Decimal = Decimal("0")
    expense_ratio: Decimal = Decimal("0")


@dataclass(frozen=True)
class MonthlyTimelineItem:
    month: int
    year: Decimal  # month / 12, one decimal
    rent: Decimal
    expenses: Decimal  # Operating + mortgage
    cash_flow: Decimal
    is_positive: bool


@dataclass(frozen=True)
class ProfitTimerResult:
    months_to_positive: int
    years_to_positive: Decimal
    monthly_timeline: tuple[MonthlyTimelineItem, ...]
    final_cash_flow: Decimal
    is_never_positive: bool
