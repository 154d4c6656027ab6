"""
Free-form learning analysis.

Forwards an arbitrary context payload to a single chat model and returns
its suggestion. No caching, retry or fallback.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from skill_recommender.generation.llm_client import LLMClient, LLMMessage
from skill_recommender.generation.prompts import build_analysis_prompt

logger = logging.getLogger(__name__)


class LearningAnalyzer:
    """
    Suggests resources for whatever the user is currently studying.

    Typical usage:
        >>> analyzer = LearningAnalyzer(LLMClient())
        >>> await analyzer.analyze({"site": "YouTube", "title": "Graphs 101"})
        {'recommendation': '...'}
    """

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or LLMClient()

    async def analyze(self, context: Dict[str, Any]) -> Dict[str, str]:
        prompt = build_analysis_prompt(context)
        logger.info(f"Analyzing learning context from {context.get('site')}")
        text = await asyncio.to_thread(self.llm_client.chat, [LLMMessage.user(prompt)])
        return {"recommendation": text}
