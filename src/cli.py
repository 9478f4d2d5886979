"""CLI for running the cash flow calculator and profit timer.

Usage:
    python -m src.cli --price 3000000 --own-funds 600000 --mortgage 2400000 \\
        --rate 5 --years 30 --rent 14000 --occupancy 95 --property-tax 6000
    python -m src.cli ... --rent-growth 3 --expense-reduction 500 --expense-reduction-type fixed
"""

import argparse
import sys
from decimal import Decimal, InvalidOperation

from src.config import settings
from src.engine.cashflow import calculate_cash_flow
from src.engine.formatting import format_currency, format_percent
from src.engine.profit_timer import calculate_time_to_positive
from src.models.currency import Currency
from src.models.profit_timer import Adjustment, AdjustmentType, ProfitTimerInputs
from src.models.property import PropertyInputs, Scenario
from src.models.results import CalculationResults, ProfitTimerResult

# (flag, PropertyInputs field, help)
INPUT_FLAGS = [
    ("--price", "purchase_price", "Purchase price"),
    ("--own-funds", "own_funds", "Owner's cash contribution"),
    ("--mortgage", "mortgage_amount", "Mortgage principal"),
    ("--rate", "interest_rate", "Annual interest rate in percent"),
    ("--years", "loan_term_years", "Loan term in years"),
    ("--rent", "expected_rent", "Expected monthly rent"),
    ("--occupancy", "occupancy", "Occupancy in percent (default: 100)"),
    ("--repair-fund", "repair_fund", "Monthly repair fund"),
    ("--management", "management", "Monthly management fee"),
    ("--insurance", "insurance", "Monthly insurance"),
    ("--property-tax", "property_tax", "ANNUAL property tax"),
    ("--utilities", "utilities", "Monthly utilities"),
    ("--internet", "internet", "Monthly internet"),
    ("--other", "other_costs", "Other monthly costs"),
    ("--unexpected", "unexpected_costs", "Unexpected monthly costs"),
]


def _decimal(value: str) -> Decimal:
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not number.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rental cash flow calculator")
    for flag, dest, help_text in INPUT_FLAGS:
        default = Decimal("100") if dest == "occupancy" else Decimal("0")
        parser.add_argument(flag, dest=dest, type=_decimal, default=default, help=help_text)

    types = [t.value for t in AdjustmentType]
    parser.add_argument("--rent-growth", type=_decimal, default=Decimal("0"),
                        help="Annual rent growth (default: 0)")
    parser.add_argument("--rent-growth-type", choices=types, default="percentage")
    parser.add_argument("--expense-reduction", type=_decimal, default=Decimal("0"),
                        help="Annual operating expense reduction (default: 0)")
    parser.add_argument("--expense-reduction-type", choices=types, default="percentage")
    parser.add_argument("--currency", choices=[c.value for c in Currency],
                        default=settings.currency.value)
    return parser


def print_results(results: CalculationResults, currency: Currency) -> None:
    money = [
        ("Mortgage payment", results.mortgage_payment),
        ("Effective rent", results.effective_rent),
        ("Operating expenses", results.total_monthly_expenses),
        ("NOI", results.noi),
        ("Monthly cash flow", results.monthly_cash_flow),
        ("Annual cash flow", results.annual_cash_flow),
    ]
    percents = [
        ("Cash-on-cash", results.cash_on_cash_return),
        ("Cap rate", results.cap_rate),
        ("Total investment ROI", results.total_investment_roi),
        ("Break-even occupancy", results.break_even_occupancy),
        ("Expense ratio", results.expense_ratio),
    ]
    print(f"\n{'=' * 60}")
    print("  Cash Flow")
    print(f"{'=' * 60}")
    for label, value in money:
        print(f"  {label + ':':<24}{format_currency(value, currency):>20}")
    for label, value in percents:
        print(f"  {label + ':':<24}{format_percent(value):>20}")
    print(f"  {'DSCR:':<24}{results.dscr:>20.2f}")
    print()


def print_timer(result: ProfitTimerResult, currency: Currency) -> None:
    print(f"{'=' * 60}")
    print("  Profit Timer")
    print(f"{'=' * 60}")
    if result.is_never_positive:
        print(f"  Never positive within {result.months_to_positive} months")
    else:
        print(f"  Positive after {result.months_to_positive} months "
              f"({result.years_to_positive} years)")
    print(f"  Final cash flow: {format_currency(result.final_cash_flow, currency)}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    inputs = PropertyInputs(**{dest: getattr(args, dest) for _, dest, _ in INPUT_FLAGS})
    currency = Currency(args.currency)

    results = calculate_cash_flow(inputs)
    print_results(results, currency)

    if results.monthly_cash_flow < 0:
        timer = calculate_time_to_positive(ProfitTimerInputs(
            scenario=Scenario(id="cli", name="cli", inputs=inputs),
            rent_growth=Adjustment(AdjustmentType(args.rent_growth_type), args.rent_growth),
            expense_reduction=Adjustment(
                AdjustmentType(args.expense_reduction_type), args.expense_reduction
            ),
        ))
        print_timer(timer, currency)
    return 0


if __name__ == "__main__":
    sys.exit(main())
