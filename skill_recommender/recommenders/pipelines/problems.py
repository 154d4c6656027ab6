"""
Practice-problem pipeline (LeetCode, HackerRank).

Fetches practice problems for the topic and asks the generation service
for similar problems, hints and a solution outline. When the model answer
is unusable, the raw candidates are returned instead.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from skill_recommender.generation.extractor import AnswerShape, extract_structured
from skill_recommender.generation.gateway import GenerationGateway
from skill_recommender.generation.prompts import build_problem_mentor_prompt
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

HINTS_TITLE = "💡 AI Hints"
SOLUTION_TITLE = "🧠 Solution Strategy"
PLACEHOLDER_URL = "#"


def parse_mentor_answer(data: Dict[str, Any]) -> Result[Dict[str, Any]]:
    """
    Validate the mentor answer object.

    Requires `similar_problems` and `hints` lists and a `solution_outline`.
    Similar problems given as plain strings become title-only entries;
    other non-object entries are dropped.
    """
    similar = data.get("similar_problems")
    hints = data.get("hints")
    outline = data.get("solution_outline")

    if not isinstance(similar, list) or not isinstance(hints, list) or outline is None:
        return Result.fail(ErrorKind.MALFORMED_ANSWER, "mentor answer is missing fields")

    problems: List[Dict[str, Any]] = []
    for entry in similar:
        if isinstance(entry, dict):
            problems.append(entry)
        elif isinstance(entry, str):
            problems.append({"title": entry, "url": PLACEHOLDER_URL})

    return Result.ok({
        "similar_problems": problems,
        "hints": [str(hint) for hint in hints],
        "solution_outline": str(outline),
    })


class ProblemPracticePipeline(BasePlatformPipeline):
    """
    Pipeline for practice-problem platforms.

    Both LeetCode and HackerRank use this pipeline with the same provider.
    They differ in one respect: whether the raw-candidate fallback is
    cached (`cache_fallback`).

    Attributes:
        provider: Practice-problem provider.
        gateway: Generation gateway.
        cache_fallback: Whether fallback results may be cached.
        fallback_limit: Raw candidates returned on fallback.
    """

    def __init__(
        self,
        name: str,
        provider: BaseProvider,
        gateway: GenerationGateway,
        cache_fallback: bool = True,
        fallback_limit: int = 5,
    ):
        super().__init__(name)
        self.provider = provider
        self.gateway = gateway
        self.cache_fallback = cache_fallback
        self.fallback_limit = fallback_limit

    async def run(
        self,
        request: RecommendationRequest,
        context: PipelineContext,
    ) -> PipelineOutcome:
        required = self.require(request, ("topic", "description"))
        if not required.is_ok:
            logger.info(f"{self.name}: {required.message}, returning no recommendations")
            return PipelineOutcome.empty()

        candidates = await self.provider.search(request.topic)

        prompt = build_problem_mentor_prompt(
            title=request.topic,
            difficulty=request.difficulty,
            description=request.description,
            candidates=candidates,
            profile_summary=context.profile_summary,
        )
        text = await self.gateway.generate(prompt)

        return (
            extract_structured(text, AnswerShape.OBJECT)
            .and_then(parse_mentor_answer)
            .map(self._assemble)
            .or_else(lambda failure: self._fallback(failure, candidates))
            .unwrap()
        )

    def _assemble(self, answer: Dict[str, Any]) -> PipelineOutcome:
        recommendations = list(answer["similar_problems"])
        recommendations.append({
            "title": HINTS_TITLE,
            "description": "\n\n".join(answer["hints"]),
            "url": PLACEHOLDER_URL,
        })
        recommendations.append({
            "title": SOLUTION_TITLE,
            "description": answer["solution_outline"],
            "url": PLACEHOLDER_URL,
        })
        return PipelineOutcome(
            result=RecommendationResult(recommendations=recommendations),
            cacheable=True,
            source="ai",
        )

    def _fallback(
        self,
        failure: Result[Any],
        candidates: Sequence[Candidate],
    ) -> Result[PipelineOutcome]:
        logger.warning(
            f"{self.name}: mentor answer unusable ({failure.message}), "
            f"falling back to {min(len(candidates), self.fallback_limit)} raw candidates"
        )
        raw = [c.to_dict() for c in candidates[: self.fallback_limit]]
        return Result.ok(PipelineOutcome(
            result=RecommendationResult(recommendations=raw),
            cacheable=self.cache_fallback,
            source="fallback",
        ))
