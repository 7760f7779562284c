"""Savings simulator endpoints - scenario savings, projections and savings health"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from fincoach_gateway.api.v1.schemas import (
    ProjectionRequest,
    ProjectionSchema,
    SimulationRequest,
    SimulationResponse,
)
from fincoach_gateway.api.dependencies import get_request_id, get_settings
from fincoach_gateway.config import Settings
from fincoach_gateway.domain.savings import (
    calculate_potential_savings,
    calculate_compound_interest,
    project_savings_horizons,
)
from fincoach_gateway.domain.models import CompoundInterestProjection
from fincoach_gateway.domain.health import calculate_savings_health_score, savings_health_band
from fincoach_gateway.domain.exceptions import InvalidInputError
from fincoach_gateway.infrastructure.observability.metrics import record_simulation
from fincoach_gateway.infrastructure.observability.logging import log_simulation
from fincoach_gateway.utils.currency import format_inr, format_indian_number

router = APIRouter()


def _projection_schema(projection: CompoundInterestProjection) -> ProjectionSchema:
    return ProjectionSchema(
        **asdict(projection),
        future_value_display=format_indian_number(projection.future_value),
    )


@router.post("/savings/simulate", response_model=SimulationResponse)
def simulate(
    request_body: SimulationRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Run a what-if savings simulation.

    Flow:
    1. Apply scenario cuts to the expense list
    2. Score the resulting savings rate
    3. Project the monthly savings over each horizon
    """
    start_time = time.time()
    request_id = get_request_id(request)

    expenses = [e.to_domain() for e in request_body.expenses]
    annual_rate = (
        request_body.annual_rate
        if request_body.annual_rate is not None
        else app_settings.default_annual_rate
    )
    horizons = request_body.horizons or app_settings.projection_horizons

    try:
        total_expenses = sum(e.amount for e in expenses)
        potential_savings = calculate_potential_savings(expenses, request_body.scenario.to_domain())
        health_score = calculate_savings_health_score(
            request_body.monthly_income, total_expenses, potential_savings
        )
        band = savings_health_band(health_score)
        projections = project_savings_horizons(max(potential_savings, 0), annual_rate, horizons)

    except InvalidInputError as e:
        logging.warning(f"Invalid simulation input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_simulation(band, potential_savings)
    log_simulation(request_id, len(expenses), potential_savings, health_score, band, duration_ms)

    return SimulationResponse(
        total_expenses=total_expenses,
        potential_savings=potential_savings,
        potential_savings_display=format_inr(potential_savings),
        health_score=health_score,
        health_band=band,
        projections=[_projection_schema(p) for p in projections],
    )


@router.post("/savings/projection", response_model=ProjectionSchema)
def projection(
    request_body: ProjectionRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Future value of a fixed monthly contribution"""
    annual_rate = (
        request_body.annual_rate
        if request_body.annual_rate is not None
        else app_settings.default_annual_rate
    )

    try:
        result = calculate_compound_interest(request_body.monthly_contribution, annual_rate, request_body.years)
    except InvalidInputError as e:
        logging.warning(f"Invalid projection input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return _projection_schema(result)
