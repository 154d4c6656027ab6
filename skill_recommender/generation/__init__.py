"""
Generation module for model-assisted ranking and analysis.

This module provides the resilient Gemini gateway used for ranking, the
structured-answer extractor, prompt templates, and the OpenAI chat client
used by the analysis endpoint.
"""

from skill_recommender.generation.analysis import LearningAnalyzer
from skill_recommender.generation.extractor import AnswerShape, extract_structured
from skill_recommender.generation.gateway import EMPTY_ANSWER, GenerationGateway
from skill_recommender.generation.llm_client import LLMClient, LLMMessage

__all__ = [
    "GenerationGateway",
    "EMPTY_ANSWER",
    "AnswerShape",
    "extract_structured",
    "LLMClient",
    "LLMMessage",
    "LearningAnalyzer",
]
