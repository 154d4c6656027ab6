"""
Platform pipelines.

Each pipeline implements BasePlatformPipeline for a family of platforms.
"""

from skill_recommender.recommenders.pipelines.courses import (
    COURSERA_CATALOG,
    UDEMY_CATALOG,
    CourseCatalog,
    CourseCatalogPipeline,
)
from skill_recommender.recommenders.pipelines.problems import ProblemPracticePipeline
from skill_recommender.recommenders.pipelines.videos import VideoPipeline

__all__ = [
    "CourseCatalog",
    "CourseCatalogPipeline",
    "COURSERA_CATALOG",
    "UDEMY_CATALOG",
    "ProblemPracticePipeline",
    "VideoPipeline",
]
