#!/usr/bin/env python3
"""
Recommendation endpoints - ranked postings for a job seeker.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.scorer import MatchScorer
from ..dependencies import get_db, get_scorer, get_app_config
from ..services.recommendation_service import RecommendationService
from ..models.responses import RecommendationsResponse

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: int = Query(..., ge=1, description="User ID of the job seeker"),
    db: Session = Depends(get_db),
    scorer: MatchScorer = Depends(get_scorer),
    config: AppConfig = Depends(get_app_config)
):
    """
    Get up to 10 recommended postings for a job seeker.

    Postings are ranked by skills, experience, location, title,
    compensation and recency fit. Users without a seeker profile get an
    empty list.
    """
    service = RecommendationService(db, scorer, config.recommendations)
    recommendations = service.get_recommendations(user_id)

    return RecommendationsResponse(
        success=True,
        count=len(recommendations),
        recommendations=recommendations,
        ai_powered=scorer.ai_powered
    )
