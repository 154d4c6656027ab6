"""
Dependency injection for FastAPI backend.

The recommendation manager owns the response cache and in-flight request
map, so it is created once per process and shared by every request.
"""

from functools import lru_cache

from skill_recommender.config import Config
from skill_recommender.database import init_db
from skill_recommender.generation import LearningAnalyzer, LLMClient
from skill_recommender.recommenders import RecommendationManager
from skill_recommender.users import SQLProfileStore


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the application configuration."""
    return Config.from_env()


@lru_cache(maxsize=1)
def get_recommendation_manager() -> RecommendationManager:
    """
    Get the process-wide RecommendationManager.

    Returns:
        RecommendationManager backed by the configured profile database.
    """
    config = get_config()
    session_factory = init_db(config.database.url)
    return RecommendationManager.from_config(config, SQLProfileStore(session_factory))


@lru_cache(maxsize=1)
def get_learning_analyzer() -> LearningAnalyzer:
    """
    Get the LearningAnalyzer used by the analysis endpoint.

    Returns:
        LearningAnalyzer with the configured OpenAI client.
    """
    return LearningAnalyzer(LLMClient(get_config().llm))
