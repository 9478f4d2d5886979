"""Pydantic schemas for API request/response models."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.models.expense import Category, Expense
from src.models.profit_timer import Adjustment, AdjustmentType, ProfitTimerInputs
from src.models.property import PropertyInputs, Scenario


# ---- Request schemas ----

class PropertyInputsSchema(BaseModel):
    """Blank form fields arrive as 0."""
    purchase_price: Decimal = Decimal("0")
    own_funds: Decimal = Decimal("0")
    mortgage_amount: Decimal = Decimal("0")
    interest_rate: Decimal = Field(Decimal("0"), description="Annual rate in percent")
    loan_term_years: Decimal = Decimal("0")
    expected_rent: Decimal = Field(Decimal("0"), description="Monthly")
    occupancy: Decimal = Field(Decimal("0"), description="Percent, 0-100")
    repair_fund: Decimal = Decimal("0")
    management: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    property_tax: Decimal = Field(Decimal("0"), description="Annual")
    utilities: Decimal = Decimal("0")
    internet: Decimal = Decimal("0")
    other_costs: Decimal = Decimal("0")
    unexpected_costs: Decimal = Decimal("0")

    def to_inputs(self) -> PropertyInputs:
        return PropertyInputs(**self.model_dump())


class ScenarioSchema(BaseModel):
    id: str
    name: str = ""
    inputs: PropertyInputsSchema
    created_at: datetime | None = None

    def to_scenario(self) -> Scenario:
        return Scenario(
            id=self.id,
            name=self.name,
            inputs=self.inputs.to_inputs(),
            created_at=self.created_at,
        )


class AdjustmentSchema(BaseModel):
    type: AdjustmentType = AdjustmentType.PERCENTAGE
    value: Decimal = Decimal("0")

    def to_adjustment(self) -> Adjustment:
        return Adjustment(type=self.type, value=self.value)


class ProfitTimerRequest(BaseModel):
    scenario: ScenarioSchema
    rent_growth: AdjustmentSchema = Field(default_factory=AdjustmentSchema)
    expense_reduction: AdjustmentSchema = Field(default_factory=AdjustmentSchema)

    def to_inputs(self) -> ProfitTimerInputs:
        return ProfitTimerInputs(
            scenario=self.scenario.to_scenario(),
            rent_growth=self.rent_growth.to_adjustment(),
            expense_reduction=self.expense_reduction.to_adjustment(),
        )


class CategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    icon: str = ""
    color: str = ""
    budget: Decimal = Decimal("0")
    is_custom: bool = False

    def to_category(self) -> Category:
        return Category(**self.model_dump())


class ExpenseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: Decimal
    category: str
    date: date
    description: str = ""
    created_at: datetime | None = None

    def to_expense(self) -> Expense:
        return Expense(**self.model_dump())


class BudgetSummaryRequest(BaseModel):
    month: str = Field(..., description="YYYY-MM")
    expenses: list[ExpenseSchema] = []
    # Omitted means the default category set
    categories: list[CategorySchema] | None = None
    total_budget: Decimal = Decimal("0")


# ---- Response schemas ----

class CalculationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    mortgage_payment: Decimal
    total_investment: Decimal
    effective_rent: Decimal
    total_monthly_expenses: Decimal
    noi: Decimal
    monthly_cash_flow: Decimal
    annual_cash_flow: Decimal
    annual_debt_service: Decimal
    annual_expenses: Decimal
    annual_income: Decimal
    cash_on_cash_return: Decimal
    cap_rate: Decimal
    roi: Decimal
    dscr: Decimal
    break_even_occupancy: Decimal
    total_investment_roi: Decimal
    expense_ratio: Decimal


class MonthlyTimelineItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: int
    year: Decimal
    rent: Decimal
    expenses: Decimal
    cash_flow: Decimal
    is_positive: bool


class ProfitTimerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    months_to_positive: int
    years_to_positive: Decimal
    monthly_timeline: list[MonthlyTimelineItemResponse]
    final_cash_flow: Decimal
    is_never_positive: bool


class ScreeningResponse(BaseModel):
    negative_scenario_ids: list[str]


class CategorySpendingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: CategorySchema
    spent: Decimal
    budget: Decimal
    percentage: Decimal
    is_over_budget: bool


class BudgetSummaryResponse(BaseModel):
    month: str
    total_spent: Decimal
    budget_total: Decimal
    remaining: Decimal
    expenses: list[ExpenseSchema]
    categories: list[CategorySpendingResponse]
