"""
Providers module for fetching learning resources from multiple platforms.

Each provider implements the BaseProvider interface.
"""

from skill_recommender.providers.base import (
    BaseProvider,
    Candidate,
)
from skill_recommender.providers.leetcode import LeetCodeProvider
from skill_recommender.providers.youtube import YouTubeProvider

__all__ = [
    "BaseProvider",
    "Candidate",
    "LeetCodeProvider",
    "YouTubeProvider",
]
