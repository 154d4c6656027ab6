"""
Base pipeline interface for platform-specific recommendation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from skill_recommender.results import ErrorKind, Result


def build_cache_key(platform: Any, activity_type: Any, topic: Any) -> str:
    """
    Compose the cache/deduplication key for a request.

    The three parts are joined with hyphens as-is; hyphens inside a part
    are not escaped, so the key is treated as one opaque string.

    Examples:
        >>> build_cache_key("YouTube", "watch", "python")
        'YouTube-watch-python'
    """
    return f"{platform}-{activity_type}-{topic}"


@dataclass
class RecommendationRequest:
    """
    An inbound recommendation request.

    Attributes:
        user_id: Opaque user identifier.
        platform: Platform identifier (e.g., 'YouTube', 'LeetCode').
        activity_type: What the user is doing (e.g., 'watch', 'solve').
        topic: Topic the user is studying.
        difficulty: Difficulty label of the current activity.
        description: Description of the current activity (problem text).
    """

    user_id: str
    platform: str
    activity_type: Optional[str] = None
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    description: Optional[str] = None

    @property
    def cache_key(self) -> str:
        return build_cache_key(self.platform, self.activity_type, self.topic)


@dataclass
class RecommendationResult:
    """
    Ordered recommendation set returned to the caller and cached.

    Each entry has at least a title and url, plus a description or reason.

    Attributes:
        recommendations: Recommendation entries, best first.
    """

    recommendations: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert result to the API response shape."""
        return {"recommendations": [dict(entry) for entry in self.recommendations]}

    @classmethod
    def empty(cls) -> "RecommendationResult":
        return cls(recommendations=[])

    def __len__(self) -> int:
        return len(self.recommendations)


@dataclass
class PipelineContext:
    """
    Per-request user context handed to pipelines.

    Attributes:
        profile_summary: Human-readable dominant-interest summary.
        dominant_topics: Lowercase heaviest topics of the user.
    """

    profile_summary: str = ""
    dominant_topics: List[str] = field(default_factory=list)


@dataclass
class PipelineOutcome:
    """
    What a pipeline produced and whether it may be cached.

    Attributes:
        result: The recommendation set.
        cacheable: Whether the orchestrator should store the result.
        source: How the result was obtained ('ai', 'fallback', 'heuristic',
            'empty').
    """

    result: RecommendationResult
    cacheable: bool = False
    source: str = "empty"

    @classmethod
    def empty(cls) -> "PipelineOutcome":
        return cls(result=RecommendationResult.empty(), cacheable=False, source="empty")


class BasePlatformPipeline(ABC):
    """
    Abstract base class for platform pipelines.

    A pipeline turns a request into recommendations for one family of
    platforms: fetch candidates from a provider, rank them, and decide
    whether the result may be cached. One pipeline class can serve several
    platform identifiers, so each instance carries its own name.

    Example:
        >>> pipeline = VideoPipeline("YouTube", provider, gateway)
        >>> outcome = await pipeline.run(request, context)
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def run(
        self,
        request: RecommendationRequest,
        context: PipelineContext,
    ) -> PipelineOutcome:
        """
        Produce recommendations for a request.

        Args:
            request: The inbound request.
            context: The requesting user's profile context.

        Returns:
            PipelineOutcome with the result and its cacheability.
        """
        pass

    @staticmethod
    def require(request: RecommendationRequest, fields: Sequence[str]) -> Result[RecommendationRequest]:
        """Fail with MISSING_INPUT unless every named request field is non-blank."""
        missing = [name for name in fields if not (getattr(request, name) or "").strip()]
        if missing:
            return Result.fail(ErrorKind.MISSING_INPUT, f"missing {', '.join(missing)}")
        return Result.ok(request)
