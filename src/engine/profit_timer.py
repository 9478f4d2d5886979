"""Profit timer: months until a negative cash flow turns non-negative.

Walks forward month by month from the calculator's baseline. Rent growth and
operating expense reduction are applied once per completed year and compound
on the running values. The mortgage payment stays fixed for the whole run.

Pure computation. No I/O.
"""

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Iterable

from src.models.profit_timer import (
    Adjustment,
    AdjustmentType,
    ProfitTimerCalculation,
    ProfitTimerInputs,
)
from src.models.property import Scenario
from src.models.results import MonthlyTimelineItem, ProfitTimerResult
from src.engine.cashflow import calculate_cash_flow

logger = logging.getLogger(__name__)

MAX_MONTHS = 600  # 50 years
ONE_PLACE = Decimal("0.1")
HALF = Decimal("0.5")


def round_whole(value: Decimal) -> Decimal:
    """Round to whole currency units, halves toward +infinity."""
    return (value + HALF).to_integral_value(rounding=ROUND_FLOOR)


def to_years(month: int) -> Decimal:
    return (Decimal(month) / 12).quantize(ONE_PLACE, ROUND_HALF_UP)


def grow_rent(rent: Decimal, growth: Adjustment) -> Decimal:
    if growth.type is AdjustmentType.PERCENTAGE:
        return rent * (1 + growth.value / 100)
    return rent + growth.value


def reduce_expenses(expenses: Decimal, reduction: Adjustment) -> Decimal:
    if reduction.type is AdjustmentType.PERCENTAGE:
        return expenses * (1 - reduction.value / 100)
    return max(expenses - reduction.value, Decimal("0"))


def calculate_time_to_positive(inputs: ProfitTimerInputs) -> ProfitTimerResult:
    """Find the first month at which monthly cash flow is non-negative.

    A scenario that is already non-negative returns immediately with a single
    month-0 timeline entry. Otherwise the simulation runs for at most
    MAX_MONTHS; if cash flow never crosses zero the full timeline is returned
    with is_never_positive set.
    """
    baseline = calculate_cash_flow(inputs.scenario.inputs)
    mortgage = baseline.mortgage_payment

    if baseline.monthly_cash_flow >= 0:
        logger.debug(
            "Scenario %s already cash flow positive (%s)",
            inputs.scenario.id, baseline.monthly_cash_flow,
        )
        current = MonthlyTimelineItem(
            month=0,
            year=Decimal("0"),
            rent=baseline.effective_rent,
            expenses=baseline.total_monthly_expenses + mortgage,
            cash_flow=baseline.monthly_cash_flow,
            is_positive=True,
        )
        return ProfitTimerResult(
            months_to_positive=0,
            years_to_positive=Decimal("0"),
            monthly_timeline=(current,),
            final_cash_flow=baseline.monthly_cash_flow,
            is_never_positive=False,
        )

    rent = baseline.effective_rent
    operating = baseline.total_monthly_expenses
    cash_flow = baseline.monthly_cash_flow
    timeline: list[MonthlyTimelineItem] = []

    for month in range(1, MAX_MONTHS + 1):
        # Adjust at the end of each completed year
        if month % 12 == 0:
            rent = grow_rent(rent, inputs.rent_growth)
            operating = reduce_expenses(operating, inputs.expense_reduction)

        total_expenses = operating + mortgage
        cash_flow = rent - total_expenses

        timeline.append(MonthlyTimelineItem(
            month=month,
            year=to_years(month),
            rent=round_whole(rent),
            expenses=round_whole(total_expenses),
            cash_flow=round_whole(cash_flow),
            is_positive=cash_flow >= 0,
        ))

        if cash_flow >= 0:
            logger.debug(
                "Scenario %s turns positive at month %d", inputs.scenario.id, month
            )
            return ProfitTimerResult(
                months_to_positive=month,
                years_to_positive=to_years(month),
                monthly_timeline=tuple(timeline),
                final_cash_flow=round_whole(cash_flow),
                is_never_positive=False,
            )

    logger.info(
        "Scenario %s still negative after %d months (final cash flow %s)",
        inputs.scenario.id, MAX_MONTHS, round_whole(cash_flow),
    )
    return ProfitTimerResult(
        months_to_positive=MAX_MONTHS,
        years_to_positive=to_years(MAX_MONTHS),
        monthly_timeline=tuple(timeline),
        final_cash_flow=round_whole(cash_flow),
        is_never_positive=True,
    )


def negative_cash_flow_scenarios(scenarios: Iterable[Scenario]) -> list[Scenario]:
    """Scenarios whose baseline monthly cash flow is negative, in input order."""
    return [
        s for s in scenarios
        if calculate_cash_flow(s.inputs).monthly_cash_flow < 0
    ]


def build_calculation_record(
    name: str,
    inputs: ProfitTimerInputs,
    result: ProfitTimerResult,
    now: datetime | None = None,
) -> ProfitTimerCalculation:
    """Summarize a profit timer run as a record callers can save."""
    timestamp = now or datetime.now(timezone.utc)
    return ProfitTimerCalculation(
        id=uuid.uuid4().hex,
        name=name,
        scenario_id=inputs.scenario.id,
        rent_growth=inputs.rent_growth,
        expense_reduction=inputs.expense_reduction,
        months_to_positive=result.months_to_positive,
        years_to_positive=result.years_to_positive,
        created_at=timestamp,
        updated_at=timestamp,
    )
