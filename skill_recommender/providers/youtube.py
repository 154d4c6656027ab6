"""
YouTube video provider.

Searches the YouTube Data API v3 for videos matching a topic. Uses
requests in a worker thread so the event loop is not blocked.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import requests

from skill_recommender.config import ProviderConfig
from skill_recommender.providers.base import BaseProvider, Candidate

logger = logging.getLogger(__name__)


class YouTubeProvider(BaseProvider):
    """
    Provider for YouTube videos.

    Returns an empty list, never an error, when the API response carries
    no items or the request fails.

    Typical usage:
        >>> provider = YouTubeProvider(ProviderConfig.from_env())
        >>> videos = await provider.search("binary search")

    Attributes:
        config: Provider configuration (API key, endpoint, result count).
    """

    WATCH_URL = "https://www.youtube.com/watch?v="

    def __init__(self, config: Optional[ProviderConfig] = None):
        """
        Initialize the YouTube provider.

        Args:
            config: Provider configuration. If None, loads from environment.
        """
        self.config = config or ProviderConfig.from_env()

        # Session for connection pooling
        self._session = requests.Session()

    @property
    def source_name(self) -> str:
        """Return 'youtube' as the source identifier."""
        return "youtube"

    async def search(self, topic: str) -> List[Candidate]:
        return await asyncio.to_thread(self._search, topic)

    def _search(self, topic: str) -> List[Candidate]:
        params = {
            "part": "snippet",
            "type": "video",
            "maxResults": self.config.youtube_max_results,
            "q": topic,
            "key": self.config.youtube_api_key,
        }

        try:
            logger.debug(f"Searching YouTube for: {topic}")
            response = self._session.get(
                self.config.youtube_search_url,
                params=params,
                timeout=self.config.timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"YouTube search failed for {topic!r}: {e}")
            return []

        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            logger.info(f"YouTube returned no videos for: {topic}")
            return []

        videos = [self._parse_item(item) for item in items]
        logger.info(f"YouTube returned {len(videos)} videos for: {topic}")
        return videos

    def _parse_item(self, item: dict) -> Candidate:
        """
        Convert a search result item into a Candidate.

        Args:
            item: One entry of the API's `items` list.

        Returns:
            Candidate with title, description and watch URL.
        """
        snippet = item.get("snippet", {})
        video_id = item.get("id", {}).get("videoId", "")
        return Candidate(
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            url=f"{self.WATCH_URL}{video_id}",
        )
