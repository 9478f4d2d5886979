"""Expense budget routes."""

from fastapi import APIRouter, HTTPException

from src.api.schemas import (
    BudgetSummaryRequest,
    BudgetSummaryResponse,
    CategorySpendingResponse,
    ExpenseSchema,
)
from src.engine.budget import category_spending, monthly_summary
from src.models.expense import DEFAULT_CATEGORIES

router = APIRouter(prefix="/api/v1/budget", tags=["budget"])


@router.post("/summary", response_model=BudgetSummaryResponse)
def budget_summary(req: BudgetSummaryRequest):
    """Month spending totals and per-category budget usage."""
    expenses = [e.to_expense() for e in req.expenses]
    if req.categories is None:
        categories = list(DEFAULT_CATEGORIES)
    else:
        categories = [c.to_category() for c in req.categories]

    try:
        summary = monthly_summary(expenses, categories, req.month, req.total_budget)
        spending = category_spending(expenses, categories, req.month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BudgetSummaryResponse(
        month=summary.month,
        total_spent=summary.total_spent,
        budget_total=summary.budget_total,
        remaining=summary.remaining,
        expenses=[ExpenseSchema.model_validate(e) for e in summary.expenses],
        categories=[CategorySpendingResponse.model_validate(s) for s in spending],
    )
