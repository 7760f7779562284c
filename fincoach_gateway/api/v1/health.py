"""Financial health endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from fincoach_gateway.api.v1.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    HealthScoreRequest,
    HealthScoreResponse,
)
from fincoach_gateway.api.dependencies import get_request_id, get_settings
from fincoach_gateway.config import Settings
from fincoach_gateway.domain.health import (
    calculate_financial_health_score,
    calculate_emergency_fund_target,
    calculate_debt_to_income_ratio,
    calculate_net_worth,
    calculate_affordability_score,
)
from fincoach_gateway.domain.exceptions import InvalidInputError
from fincoach_gateway.infrastructure.observability.metrics import record_health_score
from fincoach_gateway.infrastructure.observability.logging import log_health_score

router = APIRouter()


@router.post("/health/score", response_model=HealthScoreResponse)
def health_score(
    request_body: HealthScoreRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Four-component financial health score.

    Returns:
        Total score (0-100) with savings / emergency / debt / net_worth points (0-25 each),
        plus emergency fund target, debt service % of income and net worth
    """
    request_id = get_request_id(request)

    try:
        result = calculate_financial_health_score(
            monthly_income=request_body.monthly_income,
            total_expenses=request_body.total_expenses,
            emergency_fund=request_body.emergency_fund,
            total_debt=request_body.total_debt,
            current_savings=request_body.current_savings,
        )
    except InvalidInputError as e:
        logging.warning(f"Invalid health score input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    breakdown = result.breakdown.as_dict()
    record_health_score(result.score)
    log_health_score(request_id, result.score, breakdown)

    return HealthScoreResponse(
        score=result.score,
        breakdown=breakdown,
        emergency_fund_target=calculate_emergency_fund_target(
            request_body.total_expenses, app_settings.emergency_fund_months
        ),
        debt_to_income_ratio=calculate_debt_to_income_ratio(
            request_body.monthly_debt_payments, request_body.monthly_income
        ),
        net_worth=calculate_net_worth(
            request_body.current_savings + request_body.emergency_fund, request_body.total_debt
        ),
    )


@router.post("/health/affordability", response_model=AffordabilityResponse)
def affordability(request_body: AffordabilityRequest, request: Request):
    """Savings rate and emergency cover summarized as a status"""
    try:
        result = calculate_affordability_score(
            request_body.monthly_income,
            request_body.total_expenses,
            request_body.emergency_fund,
        )
    except InvalidInputError as e:
        logging.warning(f"Invalid affordability input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return AffordabilityResponse(score=result.score, status=result.status)
