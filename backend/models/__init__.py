"""
Pydantic models for API requests and responses.
"""

from .recommendation import (
    RecommendRequest,
    RecommendResponse,
)
from .analysis import (
    AnalyzeResponse,
)

__all__ = [
    # Recommendation models
    "RecommendRequest",
    "RecommendResponse",
    # Analysis models
    "AnalyzeResponse",
]
