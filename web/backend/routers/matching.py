#!/usr/bin/env python3
"""
Matching endpoints - score a job against a student's preferences.
"""

from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_app_context
from ..models.requests import MatchScoreRequest
from ..models.responses import MatchScoreResponse

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.post("/score", response_model=MatchScoreResponse)
def score_match(
    request: MatchScoreRequest,
    context: AppContext = Depends(get_app_context)
):
    """Score a job (0-100 in steps of 25) against job preferences."""
    result = context.matcher.score_match(request.job, request.preferences)
    return MatchScoreResponse(
        success=True,
        is_match=result.is_match,
        score=result.score,
        reasons=result.reasons
    )
