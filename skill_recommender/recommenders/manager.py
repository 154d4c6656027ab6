"""
Recommendation manager for orchestrating platform pipelines.

Per request:
1. Decay and reinforce the user's interest profile (always, first).
2. Return the cached result for the request's key if still fresh.
3. Join an in-flight computation for the same key if there is one.
4. Otherwise dispatch to the platform pipeline and cache the result when
   the pipeline allows it.
"""

from __future__ import annotations

import logging
from typing import Optional

from skill_recommender.cache import InFlightRequests, ResponseCache
from skill_recommender.config import Config
from skill_recommender.generation.gateway import GenerationGateway
from skill_recommender.providers import BaseProvider, LeetCodeProvider, YouTubeProvider
from skill_recommender.recommenders.base import (
    PipelineContext,
    RecommendationRequest,
    RecommendationResult,
)
from skill_recommender.recommenders.pipelines import (
    COURSERA_CATALOG,
    UDEMY_CATALOG,
    CourseCatalogPipeline,
    ProblemPracticePipeline,
    VideoPipeline,
)
from skill_recommender.recommenders.registry import PlatformRegistry
from skill_recommender.recommenders.scoring import CourseScorer
from skill_recommender.users import ProfileStore, UserManager

logger = logging.getLogger(__name__)


def build_platform_registry(
    config: Config,
    gateway: GenerationGateway,
    video_provider: BaseProvider,
    problem_provider: BaseProvider,
    scorer: Optional[CourseScorer] = None,
) -> PlatformRegistry:
    """
    Register the pipelines of every supported platform.

    LeetCode caches its raw-candidate fallback, HackerRank does not.

    Args:
        config: Application configuration.
        gateway: Generation gateway shared by the AI-ranked pipelines.
        video_provider: Provider for the YouTube pipeline.
        problem_provider: Provider for the practice-problem pipelines.
        scorer: Course scorer. A default-graph scorer is used if None.

    Returns:
        A populated PlatformRegistry.
    """
    scorer = scorer or CourseScorer()
    top_k = config.recommendation.top_k

    registry = PlatformRegistry()
    registry.register(ProblemPracticePipeline(
        "LeetCode", problem_provider, gateway, cache_fallback=True, fallback_limit=top_k,
    ))
    registry.register(ProblemPracticePipeline(
        "HackerRank", problem_provider, gateway, cache_fallback=False, fallback_limit=top_k,
    ))
    registry.register(CourseCatalogPipeline("Coursera", COURSERA_CATALOG, scorer, top_k=top_k))
    registry.register(CourseCatalogPipeline("Udemy", UDEMY_CATALOG, scorer, top_k=top_k))
    registry.register(VideoPipeline(
        "YouTube", video_provider, gateway,
        fallback_limit=config.recommendation.video_fallback_count,
    ))
    return registry


class RecommendationManager:
    """
    Orchestrator for personalized recommendations.

    Owns the response cache and the in-flight request map; one instance
    is meant to live for the whole process.

    Typical usage:
        >>> manager = RecommendationManager.from_config(config, SQLProfileStore(Session))
        >>> result = await manager.recommend(RecommendationRequest(
        ...     user_id="u1", platform="YouTube", activity_type="watch", topic="graphs",
        ... ))
        >>> result.to_dict()
        {'recommendations': [...]}

    Attributes:
        user_manager: Profile decay/update manager.
        registry: Platform pipelines.
        cache: TTL response cache.
        inflight: In-flight computations by cache key.
    """

    def __init__(
        self,
        user_manager: UserManager,
        registry: PlatformRegistry,
        cache: Optional[ResponseCache] = None,
        inflight: Optional[InFlightRequests] = None,
    ):
        """
        Initialize the recommendation manager.

        Args:
            user_manager: Profile decay/update manager.
            registry: Platform pipelines.
            cache: Response cache. A 30-minute cache is created if None.
            inflight: In-flight request map. A new one is created if None.
        """
        self.user_manager = user_manager
        self.registry = registry
        self.cache = cache if cache is not None else ResponseCache()
        self.inflight = inflight if inflight is not None else InFlightRequests()

        logger.info(
            f"Initialized RecommendationManager with platforms: "
            f"{', '.join(self.registry.list_platforms())}"
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        profile_store: ProfileStore,
        gateway: Optional[GenerationGateway] = None,
        video_provider: Optional[BaseProvider] = None,
        problem_provider: Optional[BaseProvider] = None,
    ) -> "RecommendationManager":
        """
        Build a manager with the default platforms.

        Args:
            config: Application configuration.
            profile_store: Store for user profiles.
            gateway: Generation gateway; built from config if None.
            video_provider: Video provider; YouTube if None.
            problem_provider: Practice-problem provider; LeetCode if None.

        Returns:
            A ready RecommendationManager.
        """
        rec_config = config.recommendation
        registry = build_platform_registry(
            config,
            gateway or GenerationGateway(config.generation),
            video_provider or YouTubeProvider(config.providers),
            problem_provider or LeetCodeProvider(config.providers),
        )
        user_manager = UserManager(
            profile_store,
            decay_factor=rec_config.decay_factor,
            dominant_limit=rec_config.dominant_topics,
        )
        return cls(
            user_manager=user_manager,
            registry=registry,
            cache=ResponseCache(ttl_seconds=rec_config.cache_ttl_seconds),
        )

    async def recommend(self, request: RecommendationRequest) -> RecommendationResult:
        """
        Produce recommendations for a request.

        Args:
            request: The inbound request.

        Returns:
            The recommendation set; possibly served from cache or shared
            with a concurrent identical request.

        Raises:
            Exception: Unexpected failures (profile store, problem provider)
                propagate to the caller.
        """
        profile = await self.user_manager.record_interaction(request.user_id, request.topic)
        context = PipelineContext(
            profile_summary=self.user_manager.summarize(profile),
            dominant_topics=self.user_manager.dominant_topics(profile),
        )

        key = request.cache_key
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit: {key}")
            return cached

        return await self.inflight.run(key, lambda: self._compute(request, context, key))

    async def _compute(
        self,
        request: RecommendationRequest,
        context: PipelineContext,
        key: str,
    ) -> RecommendationResult:
        if not self.registry.is_registered(request.platform):
            logger.warning(f"Unknown platform: {request.platform!r}")
            return RecommendationResult.empty()

        pipeline = self.registry.get(request.platform)
        outcome = await pipeline.run(request, context)

        if outcome.cacheable:
            self.cache.set(key, outcome.result)

        logger.info(
            f"{request.platform}: {len(outcome.result)} recommendations "
            f"(source={outcome.source}, cached={outcome.cacheable})"
        )
        return outcome.result
