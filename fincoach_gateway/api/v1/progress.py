"""Level/XP endpoints"""

from dataclasses import asdict
from fastapi import APIRouter, Query

from fincoach_gateway.api.v1.schemas import AwardRequest, AwardResponse, ProgressResponse
from fincoach_gateway.domain.gamification import award_experience, calculate_level, get_xp_progress
from fincoach_gateway.infrastructure.observability.metrics import xp_award_counter

router = APIRouter()


@router.get("/progress", response_model=ProgressResponse)
def get_progress(experience: int = Query(..., ge=0, description="Cumulative XP")):
    """Level and XP within the current level"""
    progress = get_xp_progress(experience)

    return ProgressResponse(
        experience=experience,
        level=calculate_level(experience),
        current=progress.current,
        required=progress.required,
    )


@router.post("/progress/award", response_model=AwardResponse)
def award(request_body: AwardRequest):
    """Grant XP for an action; unknown actions grant nothing"""
    result = award_experience(request_body.experience, request_body.action)

    if result.points:
        xp_award_counter.labels(action=result.action).inc()

    return AwardResponse(**asdict(result))
