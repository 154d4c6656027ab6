"""
Recommendation Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from skill_recommender.recommenders import RecommendationRequest


class RecommendRequest(BaseModel):
    """Recommendation request payload."""

    user_id: str = Field(..., alias="userId", description="Opaque user identifier")
    platform: Optional[str] = Field(None, description="Platform identifier, e.g. 'YouTube' or 'LeetCode'")
    activity_type: Optional[str] = Field(None, description="Current activity, e.g. 'watch'")
    topic: Optional[str] = Field(None, description="Topic being studied")
    difficulty: Optional[str] = Field(None, description="Difficulty label of the activity")
    description: Optional[str] = Field(None, description="Activity description (problem text)")

    class Config:
        populate_by_name = True

    def to_domain(self) -> RecommendationRequest:
        return RecommendationRequest(
            user_id=self.user_id,
            platform=self.platform or "",
            activity_type=self.activity_type,
            topic=self.topic,
            difficulty=self.difficulty,
            description=self.description,
        )


class RecommendResponse(BaseModel):
    """Recommendation result for API responses."""

    recommendations: List[Dict[str, Any]]
