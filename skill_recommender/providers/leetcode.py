"""
LeetCode practice-problem provider.

Queries LeetCode's GraphQL problem list with the topic as search keywords.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import requests

from skill_recommender.config import ProviderConfig
from skill_recommender.providers.base import BaseProvider, Candidate

logger = logging.getLogger(__name__)

PROBLEM_LIST_QUERY = """
query problemsetQuestionList($categorySlug: String, $limit: Int, $filters: QuestionListFilterInput) {
  problemsetQuestionList: questionList(
    categorySlug: $categorySlug
    limit: $limit
    filters: $filters
  ) {
    questions: data {
      title
      titleSlug
      difficulty
      acRate
    }
  }
}
"""


class LeetCodeProvider(BaseProvider):
    """
    Provider for LeetCode practice problems.

    Transport and HTTP errors are raised to the caller; the problem
    pipeline has no fallback for a missing candidate list.

    Typical usage:
        >>> provider = LeetCodeProvider(ProviderConfig.from_env())
        >>> problems = await provider.search("two pointers")

    Attributes:
        config: Provider configuration (GraphQL endpoint, result limit).
    """

    PROBLEM_URL = "https://leetcode.com/problems/"

    def __init__(self, config: Optional[ProviderConfig] = None):
        """
        Initialize the LeetCode provider.

        Args:
            config: Provider configuration. If None, loads from environment.
        """
        self.config = config or ProviderConfig.from_env()

        self._session = requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "Referer": "https://leetcode.com",
        })

    @property
    def source_name(self) -> str:
        """Return 'leetcode' as the source identifier."""
        return "leetcode"

    async def search(self, topic: str) -> List[Candidate]:
        return await asyncio.to_thread(self._search, topic)

    def _search(self, topic: str) -> List[Candidate]:
        payload = {
            "query": PROBLEM_LIST_QUERY,
            "variables": {
                "categorySlug": "",
                "limit": self.config.leetcode_limit,
                "filters": {"searchKeywords": topic},
            },
        }

        try:
            logger.debug(f"Searching LeetCode for: {topic}")
            response = self._session.post(
                self.config.leetcode_graphql_url,
                json=payload,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            questions = response.json()["data"]["problemsetQuestionList"]["questions"]
        except requests.RequestException as e:
            logger.error(f"LeetCode request failed: {e}")
            raise
        except (KeyError, TypeError) as e:
            logger.error(f"Invalid LeetCode response: {e}")
            raise ValueError(f"Invalid response format: {e}")

        problems = [self._parse_question(q) for q in questions or []]
        logger.info(f"LeetCode returned {len(problems)} problems for: {topic}")
        return problems

    def _parse_question(self, question: dict) -> Candidate:
        difficulty = question.get("difficulty")
        ac_rate = question.get("acRate")
        return Candidate(
            title=question.get("title", ""),
            difficulty=difficulty,
            acceptance_rate=ac_rate,
            description=f"Difficulty: {difficulty}, Acceptance Rate: {ac_rate}",
            url=f"{self.PROBLEM_URL}{question.get('titleSlug', '')}",
        )
