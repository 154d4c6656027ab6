"""
Heuristic relevance scoring for course-style candidates.

The score is a sum of case-insensitive substring matches against the
candidate title:

- +5 when the title contains the requested topic
- +3 for each term related to the topic in the topic graph
- +2 for each of the user's dominant topics
- +1 / +2 / +3 for "beginner" / "intermediate" / "advanced" (cumulative)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from skill_recommender.recommenders.topic_graph import TopicGraph

logger = logging.getLogger(__name__)

TOPIC_MATCH_SCORE = 5
RELATED_TERM_SCORE = 3
DOMINANT_TOPIC_SCORE = 2
LEVEL_SCORES = (
    ("beginner", 1),
    ("intermediate", 2),
    ("advanced", 3),
)


@dataclass
class ScoredTitle:
    """
    A candidate title with its heuristic score.

    Attributes:
        title: Candidate title.
        score: Heuristic relevance score.
    """

    title: str
    score: int


class CourseScorer:
    """
    Deterministic title scorer backed by a topic graph.

    Typical usage:
        >>> scorer = CourseScorer()
        >>> scorer.score("Deep Learning Advanced", "machine learning", [])
        6
        >>> ranked = scorer.rank(titles, "python", ["python", "sql"])

    Attributes:
        topic_graph: Lookup of related terms per topic.
    """

    def __init__(self, topic_graph: Optional[TopicGraph] = None):
        self.topic_graph = topic_graph or TopicGraph()

    def score(
        self,
        title: str,
        topic: str,
        dominant_topics: Sequence[str] = (),
    ) -> int:
        """
        Score a candidate title.

        Args:
            title: Candidate title.
            topic: Requested topic.
            dominant_topics: User's dominant topics.

        Returns:
            Integer relevance score, 0 or more.
        """
        text = title.lower()
        base_topic = topic.lower()
        total = 0

        if base_topic in text:
            total += TOPIC_MATCH_SCORE

        for term in self.topic_graph.related(base_topic):
            if term in text:
                total += RELATED_TERM_SCORE

        for user_topic in dominant_topics:
            if user_topic.lower() in text:
                total += DOMINANT_TOPIC_SCORE

        for level, bonus in LEVEL_SCORES:
            if level in text:
                total += bonus

        return total

    def rank(
        self,
        titles: Sequence[str],
        topic: str,
        dominant_topics: Sequence[str] = (),
        limit: int = 5,
    ) -> List[ScoredTitle]:
        """
        Score titles and keep the best ones.

        Ties keep the order of `titles`.

        Args:
            titles: Candidate titles.
            topic: Requested topic.
            dominant_topics: User's dominant topics.
            limit: Maximum number of titles returned.

        Returns:
            Scored titles, highest score first.
        """
        scored = [ScoredTitle(title, self.score(title, topic, dominant_topics)) for title in titles]
        scored.sort(key=lambda s: s.score, reverse=True)
        logger.debug(f"Ranked {len(scored)} titles for topic {topic!r}")
        return scored[:limit]
