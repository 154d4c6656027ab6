"""
Base provider interface for learning-resource sources.

This module defines the contract every content provider must satisfy.
The plugin architecture allows new platforms to be added without modifying
the recommendation pipelines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Candidate:
    """
    A learning resource returned by a provider.

    Attributes:
        title: Resource title.
        url: Link to the resource.
        description: Short description, if the source has one.
        difficulty: Difficulty label (practice problems only).
        acceptance_rate: Acceptance rate in percent (practice problems only).
    """

    title: str
    url: str
    description: Optional[str] = None
    difficulty: Optional[str] = None
    acceptance_rate: Optional[float] = None

    def to_dict(self) -> dict:
        """
        Convert candidate to the recommendation entry format.

        Provenance fields are only included when set.

        Returns:
            Dictionary representation of the candidate.
        """
        data = {
            "title": self.title,
            "url": self.url,
            "description": self.description,
        }
        if self.difficulty is not None:
            data["difficulty"] = self.difficulty
        if self.acceptance_rate is not None:
            data["acceptance_rate"] = self.acceptance_rate
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Candidate":
        """
        Create a candidate from a dictionary.

        Args:
            data: Dictionary containing at least title and url.

        Returns:
            A Candidate instance.
        """
        return cls(
            title=data["title"],
            url=data["url"],
            description=data.get("description"),
            difficulty=data.get("difficulty"),
            acceptance_rate=data.get("acceptance_rate"),
        )


class BaseProvider(ABC):
    """
    Abstract base class for content providers.

    Implementations fetch raw candidates for a topic. They do no ranking;
    ranking is done by the platform pipelines.

    Example:
        >>> provider = YouTubeProvider(config.providers)
        >>> videos = await provider.search("dynamic programming")
    """

    @abstractmethod
    async def search(self, topic: str) -> List[Candidate]:
        """
        Fetch candidates matching a topic.

        Args:
            topic: Free-text topic to search for.

        Returns:
            List of candidates, possibly empty.
        """
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """
        Return the name of this provider.

        Returns:
            String identifier for the source (e.g., 'youtube', 'leetcode').
        """
        pass
