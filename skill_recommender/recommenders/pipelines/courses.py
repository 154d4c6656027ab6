"""
Course-catalog pipeline (Coursera, Udemy).

Course platforms are not queried. The pipeline fills a catalog's title
templates with the topic, scores the titles with the course scorer, and
links each of the best ones to the platform's search page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import quote

from skill_recommender.recommenders.base import (
    BasePlatformPipeline,
    PipelineContext,
    PipelineOutcome,
    RecommendationRequest,
    RecommendationResult,
)
from skill_recommender.recommenders.scoring import CourseScorer

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class CourseCatalog:
    """
    Naming and linking conventions of one course platform.

    Attributes:
        title_templates: Course title templates with a `{topic}` field.
        search_url: Search page URL prefix; the encoded title is appended.
        reason_template: Justification template with a `{topic}` field.
    """

    title_templates: Tuple[str, ...]
    search_url: str
    reason_template: str

    def titles(self, topic: str) -> list:
        return [template.format(topic=topic) for template in self.title_templates]

    def link(self, title: str) -> str:
        return f"{self.search_url}{quote(title, safe=URI_COMPONENT_SAFE)}"


COURSERA_CATALOG = CourseCatalog(
    title_templates=(
        "{topic} Foundations",
        "Advanced {topic}",
        "{topic} for Beginners",
        "{topic} Specialization",
        "Practical {topic} Projects",
        "AI Applications in {topic}",
    ),
    search_url="https://www.coursera.org/search?query=",
    reason_template="Recommended because it aligns with your interest in {topic} and related areas.",
)

UDEMY_CATALOG = CourseCatalog(
    title_templates=(
        "{topic} Bootcamp",
        "Complete {topic} Masterclass",
        "{topic} Zero to Hero",
        "{topic} Interview Preparation",
        "Hands-On {topic} Projects",
        "{topic} for Professionals",
    ),
    search_url="https://www.udemy.com/courses/search/?q=",
    reason_template="Matches your learning pattern and strengthens your {topic} expertise.",
)


class CourseCatalogPipeline(BasePlatformPipeline):
    """
    Pipeline for course-catalog platforms.

    Makes no external call and its results are never cached.

    Attributes:
        catalog: Platform naming and linking conventions.
        scorer: Heuristic title scorer.
        top_k: Number of courses returned.
    """

    def __init__(
        self,
        name: str,
        catalog: CourseCatalog,
        scorer: CourseScorer,
        top_k: int = 5,
    ):
        super().__init__(name)
        self.catalog = catalog
        self.scorer = scorer
        self.top_k = top_k

    async def run(
        self,
        request: RecommendationRequest,
        context: PipelineContext,
    ) -> PipelineOutcome:
        if not self.require(request, ("topic",)).is_ok:
            return PipelineOutcome.empty()

        topic = request.topic
        ranked = self.scorer.rank(
            self.catalog.titles(topic),
            topic,
            context.dominant_topics,
            limit=self.top_k,
        )

        recommendations = [
            {
                "title": course.title,
                "url": self.catalog.link(course.title),
                "reason": self.catalog.reason_template.format(topic=topic),
            }
            for course in ranked
        ]
        logger.info(f"{self.name}: ranked {len(recommendations)} courses for {topic!r}")

        return PipelineOutcome(
            result=RecommendationResult(recommendations=recommendations),
            cacheable=False,
            source="heuristic",
        )
