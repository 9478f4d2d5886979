from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    color: str
    budget: Decimal = Decimal("0")  # Monthly
    is_custom: bool = False


@dataclass(frozen=True)
class Expense:
    id: str
    amount: Decimal
    category: str  # Category id
    date: date
    description: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True)
class CategorySpending:
    category: Category
    spent: Decimal
    budget: Decimal
    percentage: Decimal  # Of budget
    is_over_budget: bool


@dataclass(frozen=True)
class MonthlyBudgetSummary:
    month: str  # YYYY-MM
    expenses: tuple[Expense, ...]
    total_spent: Decimal
    budget_total: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.budget_total - self.total_spent


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="food", name="Food & Dining", icon="🍔", color="#FF6B6B"),
    Category(id="transport", name="Transportation", icon="🚗", color="#4ECDC4"),
    Category(id="housing", name="Housing", icon="🏠", color="#45B7D1"),
    Category(id="healthcare", name="Healthcare", icon="💊", color="#96CEB4"),
    Category(id="entertainment", name="Entertainment", icon="🎬", color="#FFEAA7"),
    Category(id="shopping", name="Shopping", icon="👕", color="#DFE6E9"),
    Category(id="education", name="Education", icon="📚", color="#74B9FF"),
    Category(id="savings", name="Savings", icon="💰", color="#55EFC4"),
    Category(id="gifts", name="Gifts", icon="🎁", color="#FD79A8"),
    Category(id="bills", name="Bills", icon="📱", color="#A29BFE"),
)
