"""Cash flow and profit timer routes — the primary API entry point."""

import logging

from fastapi import APIRouter

from src.api.schemas import (
    PropertyInputsSchema,
    ScenarioSchema,
    ProfitTimerRequest,
    CalculationResponse,
    ProfitTimerResponse,
    ScreeningResponse,
)
from src.engine.cashflow import calculate_cash_flow
from src.engine.profit_timer import calculate_time_to_positive, negative_cash_flow_scenarios

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


@router.post("/cash-flow", response_model=CalculationResponse)
def cash_flow(req: PropertyInputsSchema):
    """Property inputs → monthly/annual cash flow snapshot."""
    result = calculate_cash_flow(req.to_inputs())
    return CalculationResponse.model_validate(result)


@router.post("/profit-timer", response_model=ProfitTimerResponse)
def profit_timer(req: ProfitTimerRequest):
    """Project months until the scenario's cash flow turns non-negative."""
    inputs = req.to_inputs()
    result = calculate_time_to_positive(inputs)
    logger.info(
        "Profit timer for %s: %d months (never positive: %s)",
        inputs.scenario.id, result.months_to_positive, result.is_never_positive,
    )
    return ProfitTimerResponse.model_validate(result)


@router.post("/profit-timer/screen", response_model=ScreeningResponse)
def screen_scenarios(scenarios: list[ScenarioSchema]):
    """Ids of the scenarios a profit timer is meaningful for."""
    negative = negative_cash_flow_scenarios(s.to_scenario() for s in scenarios)
    return ScreeningResponse(negative_scenario_ids=[s.id for s in negative])
