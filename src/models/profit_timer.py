from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from src.models.property import Scenario


class AdjustmentType(Enum):
    PERCENTAGE = "percentage"  # Percent of the running value, compounding
    FIXED = "fixed"  # Absolute currency delta


@dataclass(frozen=True)
class Adjustment:
    type: AdjustmentType = AdjustmentType.PERCENTAGE
    value: Decimal = Decimal("0")


@dataclass(frozen=True)
class ProfitTimerInputs:
    scenario: Scenario
    rent_growth: Adjustment = field(default_factory=Adjustment)
    expense_reduction: Adjustment = field(default_factory=Adjustment)


@dataclass(frozen=True)
class ProfitTimerCalculation:
    """Saved summary of one profit timer run against a scenario."""
    id: str
    name: str
    scenario_id: str
    rent_growth: Adjustment
    expense_reduction: Adjustment
    months_to_positive: int
    years_to_positive: Decimal
    created_at: datetime
    updated_at: datetime
