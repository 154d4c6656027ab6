"""
User profile management module.

Loads a user's weighted interest profile, applies decay and reinforcement
for the current request, and saves it back.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from skill_recommender.database import UserProfile
from skill_recommender.users.store import ProfileStore
from skill_recommender.users.weighting import (
    DECAY_FACTOR,
    DOMINANT_TOPIC_LIMIT,
    apply_interaction,
    build_profile_summary,
    extract_dominant_topics,
)

logger = logging.getLogger(__name__)


class UserManager:
    """
    Manager for weighted interest profiles.

    Typical usage:
        >>> manager = UserManager(InMemoryProfileStore())
        >>> profile = await manager.record_interaction("user-1", "Python")
        >>> manager.summarize(profile)
        'User dominant interests: python (1.00 interactions)'

    Attributes:
        store: Profile persistence backend.
        decay_factor: Multiplier applied to every weight per request.
        dominant_limit: Number of top topics used in summaries.
    """

    def __init__(
        self,
        store: ProfileStore,
        decay_factor: float = DECAY_FACTOR,
        dominant_limit: int = DOMINANT_TOPIC_LIMIT,
    ):
        """
        Initialize the user manager.

        Args:
            store: Profile store used for load/save.
            decay_factor: Multiplier applied to every weight per request.
            dominant_limit: Number of top topics used in summaries.
        """
        self.store = store
        self.decay_factor = decay_factor
        self.dominant_limit = dominant_limit

        # Per-user locks, dropped once no request holds or waits for them
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}

    async def get_profile(self, user_id: str) -> UserProfile:
        """Get the profile for a user (an empty one if none is stored)."""
        return await self.store.load(user_id)

    async def record_interaction(
        self,
        user_id: str,
        topic: Optional[str] = None,
    ) -> UserProfile:
        """
        Decay the user's interests and reinforce the current topic.

        The profile is saved even when no topic is given so that decay
        accumulates across requests. Load, update and save run under a
        per-user lock, so concurrent requests for one user are applied one
        after the other.

        Args:
            user_id: Opaque user identifier.
            topic: Topic of the current request, may be blank.

        Returns:
            The updated UserProfile.
        """
        async with self._user_lock(user_id):
            profile = await self.store.load(user_id)
            profile.weighted_profile = apply_interaction(
                profile.weighted_profile,
                topic,
                decay_factor=self.decay_factor,
            )
            await self.store.save(profile)

        logger.debug(
            f"Recorded interaction for user {user_id}: "
            f"topic={topic!r}, {len(profile.weighted_profile)} topics tracked"
        )
        return profile

    @asynccontextmanager
    async def _user_lock(self, user_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        self._lock_users[user_id] = self._lock_users.get(user_id, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._lock_users[user_id] -= 1
            if not self._lock_users[user_id]:
                del self._lock_users[user_id]
                del self._locks[user_id]

    def pending_users(self) -> List[str]:
        """Users with a profile update in progress."""
        return list(self._locks.keys())

    def summarize(self, profile: UserProfile) -> str:
        """Human-readable summary of the profile's dominant interests."""
        return build_profile_summary(profile.weighted_profile, self.dominant_limit)

    def dominant_topics(self, profile: UserProfile) -> List[str]:
        """Lowercase names of the profile's heaviest topics."""
        return extract_dominant_topics(profile.weighted_profile, self.dominant_limit)
