"""
Video pipeline (YouTube).

Searches videos for the topic and asks the generation service to rank and
annotate them. Falls back to the first few raw videos when the ranking is
unusable.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from skill_recommender.generation.extractor import AnswerShape, extract_structured
from skill_recommender.generation.gateway import GenerationGateway
from skill_recommender.generation.prompts import build_video_ranking_prompt
from skill_recommender.providers.base import BaseProvider, Candidate
from skill_recommender.recommenders.base import (
    BasePlatformPipeline,
    PipelineContext,
    PipelineOutcome,
    RecommendationRequest,
    RecommendationResult,
)
from skill_recommender.results import ErrorKind, Result

logger = logging.getLogger(__name__)


def parse_ranked_videos(items: List[Any]) -> Result[List[Dict[str, Any]]]:
    """
    Keep the object entries of a ranking answer.

    An answer without any object entries (including the gateway's empty
    answer) carries no ranking.
    """
    ranked = [item for item in items if isinstance(item, dict)]
    if not ranked:
        return Result.fail(ErrorKind.MALFORMED_ANSWER, "ranking is empty")
    return Result.ok(ranked)


class VideoPipeline(BasePlatformPipeline):
    """
    Pipeline for video platforms.

    When the provider finds no videos, the generation service is not
    called and the empty result is not cached.

    Attributes:
        provider: Video provider.
        gateway: Generation gateway.
        fallback_limit: Raw videos returned when ranking fails.
    """

    def __init__(
        self,
        name: str,
        provider: BaseProvider,
        gateway: GenerationGateway,
        fallback_limit: int = 3,
    ):
        super().__init__(name)
        self.provider = provider
        self.gateway = gateway
        self.fallback_limit = fallback_limit

    async def run(
        self,
        request: RecommendationRequest,
        context: PipelineContext,
    ) -> PipelineOutcome:
        if not self.require(request, ("topic",)).is_ok:
            return PipelineOutcome.empty()

        videos = await self.provider.search(request.topic)
        if not videos:
            logger.info(f"{self.name}: no videos for {request.topic!r}")
            return PipelineOutcome.empty()

        prompt = build_video_ranking_prompt(request.topic, videos, context.profile_summary)
        text = await self.gateway.generate(prompt)

        ranked = (
            extract_structured(text, AnswerShape.ARRAY)
            .and_then(parse_ranked_videos)
            .map(lambda entries: (entries, "ai"))
            .or_else(lambda failure: self._fallback(failure, videos))
        )
        recommendations, source = ranked.unwrap()

        return PipelineOutcome(
            result=RecommendationResult(recommendations=recommendations),
            cacheable=True,
            source=source,
        )

    def _fallback(self, failure: Result[Any], videos: Sequence[Candidate]) -> Result[Any]:
        logger.warning(
            f"{self.name}: ranking unusable ({failure.message}), "
            f"returning first {self.fallback_limit} videos"
        )
        return Result.ok(([v.to_dict() for v in videos[: self.fallback_limit]], "fallback"))
