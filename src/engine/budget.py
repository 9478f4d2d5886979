"""Monthly expense tracking against category budgets.

Pure functions over already-loaded expenses and categories. No I/O.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from src.models.expense import (
    Category,
    CategorySpending,
    Expense,
    MonthlyBudgetSummary,
)
from src.engine.cashflow import safe_div


def current_month(today: date | None = None) -> str:
    """Month key in YYYY-MM format."""
    today = today or date.today()
    return f"{today.year}-{today.month:02d}"


def parse_month(month: str) -> tuple[int, int]:
    """Split a YYYY-MM key into (year, month). Raises ValueError if malformed."""
    parts = month.split("-")
    if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2:
        raise ValueError(f"Month must be YYYY-MM, got {month!r}")
    year, mon = int(parts[0]), int(parts[1])
    if not 1 <= mon <= 12:
        raise ValueError(f"Month out of range: {month!r}")
    return year, mon


def expenses_for_month(expenses: Iterable[Expense], month: str) -> list[Expense]:
    year, mon = parse_month(month)
    return [e for e in expenses if e.date.year == year and e.date.month == mon]


def monthly_summary(
    expenses: Iterable[Expense],
    categories: Sequence[Category],
    month: str,
    total_budget: Decimal = Decimal("0"),
) -> MonthlyBudgetSummary:
    """Total spent in a month against the budget.

    An explicit total budget wins when positive; otherwise the category
    budgets are summed.
    """
    in_month = expenses_for_month(expenses, month)
    total_spent = sum((e.amount for e in in_month), Decimal("0"))
    if total_budget > 0:
        budget_total = total_budget
    else:
        budget_total = sum((c.budget for c in categories), Decimal("0"))

    return MonthlyBudgetSummary(
        month=month,
        expenses=tuple(in_month),
        total_spent=total_spent,
        budget_total=budget_total,
    )


def category_spending(
    expenses: Iterable[Expense],
    categories: Sequence[Category],
    month: str,
) -> list[CategorySpending]:
    """Per-category spending for a month, in category order."""
    in_month = expenses_for_month(expenses, month)
    spending: list[CategorySpending] = []
    for category in categories:
        spent = sum(
            (e.amount for e in in_month if e.category == category.id), Decimal("0")
        )
        spending.append(CategorySpending(
            category=category,
            spent=spent,
            budget=category.budget,
            percentage=safe_div(spent, category.budget) * 100,
            is_over_budget=category.budget > 0 and spent > category.budget,
        ))
    return spending
