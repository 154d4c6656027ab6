"""
Recommendation router.

Endpoint for personalized learning-resource recommendations.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.dependencies import get_recommendation_manager
from backend.models.recommendation import RecommendRequest, RecommendResponse
from skill_recommender.recommenders import RecommendationManager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RecommendResponse)
async def recommend(
    request: RecommendRequest,
    recommendation_manager: RecommendationManager = Depends(get_recommendation_manager),
):
    """
    Recommend learning resources for the user's current activity.

    Args:
        request: User, platform, activity type, topic, difficulty and description.

    Returns:
        Ordered recommendations with title, url and description or reason.
    """
    try:
        result = await recommendation_manager.recommend(request.to_domain())
        return RecommendResponse(**result.to_dict())

    except Exception:
        logger.exception(f"Recommendation failed for platform {request.platform!r}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
