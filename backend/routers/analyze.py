"""
Analysis router.

Endpoint forwarding an arbitrary learning context to a chat model.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from backend.dependencies import get_learning_analyzer
from backend.models.analysis import AnalyzeResponse
from skill_recommender.generation import LearningAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AnalyzeResponse)
async def analyze(
    context: Dict[str, Any] = Body(...),
    analyzer: LearningAnalyzer = Depends(get_learning_analyzer),
):
    """
    Suggest resources, channels or practice paths for a learning context.

    Args:
        context: Arbitrary context payload; `site` names the platform.

    Returns:
        The model's free-text recommendation.
    """
    try:
        return await analyzer.analyze(context)

    except Exception:
        logger.exception("Analysis failed")
        raise HTTPException(status_code=500, detail="Internal Server Error")
