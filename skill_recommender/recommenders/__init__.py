"""
Recommendation module for multi-platform learning-resource recommendation.

This module provides the orchestrator, the platform registry and pipelines,
and the heuristic course scorer with its topic graph.
"""

from skill_recommender.recommenders.base import (
    BasePlatformPipeline,
    PipelineContext,
    PipelineOutcome,
    RecommendationRequest,
    RecommendationResult,
    build_cache_key,
)
from skill_recommender.recommenders.manager import (
    RecommendationManager,
    build_platform_registry,
)
from skill_recommender.recommenders.registry import PlatformRegistry
from skill_recommender.recommenders.scoring import CourseScorer
from skill_recommender.recommenders.topic_graph import DEFAULT_TOPIC_GRAPH, TopicGraph

__all__ = [
    "RecommendationManager",
    "build_platform_registry",
    "PlatformRegistry",
    "BasePlatformPipeline",
    "PipelineContext",
    "PipelineOutcome",
    "RecommendationRequest",
    "RecommendationResult",
    "build_cache_key",
    "CourseScorer",
    "TopicGraph",
    "DEFAULT_TOPIC_GRAPH",
]
