"""
Profile stores for persisting weighted interest profiles.

A profile store exposes two coroutines, load() and save(). The SQLAlchemy
implementation runs its blocking session work in a worker thread so the
event loop keeps serving other requests while the database is busy.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict

from sqlalchemy.orm import sessionmaker

from skill_recommender.database import UserProfile

logger = logging.getLogger(__name__)


class ProfileStore(ABC):
    """
    Abstract base class for profile persistence.

    Example:
        >>> store = InMemoryProfileStore()
        >>> profile = await store.load("user-1")
        >>> profile.weighted_profile["python"] = 1.0
        >>> await store.save(profile)
    """

    @abstractmethod
    async def load(self, user_id: str) -> UserProfile:
        """
        Load the profile for a user.

        Returns a new, empty profile when the user has none yet. The new
        profile is not persisted until save() is called.
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Persist a profile, inserting it if the user has none yet."""
        pass


class SQLProfileStore(ProfileStore):
    """
    Profile store backed by SQLAlchemy.

    Every call opens its own session, so concurrent requests never share
    session state across worker threads.

    Attributes:
        session_factory: Factory returned by init_db().
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def load(self, user_id: str) -> UserProfile:
        return await asyncio.to_thread(self._load, user_id)

    async def save(self, profile: UserProfile) -> None:
        await asyncio.to_thread(self._save, profile)

    def _load(self, user_id: str) -> UserProfile:
        with self.session_factory() as session:
            profile = (
                session.query(UserProfile)
                .filter(UserProfile.user_id == user_id)
                .first()
            )

        if profile is None:
            logger.info(f"Creating default profile for user {user_id}")
            profile = UserProfile(user_id=user_id, weighted_profile={})
        return profile

    def _save(self, profile: UserProfile) -> None:
        with self.session_factory() as session:
            stored = (
                session.query(UserProfile)
                .filter(UserProfile.user_id == profile.user_id)
                .first()
            )

            if stored is None:
                stored = UserProfile(user_id=profile.user_id)
                session.add(stored)

            # Assign a fresh dict so the JSON column is flagged as modified
            stored.weighted_profile = dict(profile.weighted_profile or {})
            session.commit()
            profile.id = stored.id

        logger.debug(f"Saved profile for user {profile.user_id}")


class InMemoryProfileStore(ProfileStore):
    """
    Process-local profile store.

    Keeps a copy of each user's weights; loaded profiles are independent
    objects, so callers must save() to make changes visible.
    """

    def __init__(self):
        self._profiles: Dict[str, Dict[str, float]] = {}

    async def load(self, user_id: str) -> UserProfile:
        weights = self._profiles.get(user_id, {})
        return UserProfile(user_id=user_id, weighted_profile=dict(weights))

    async def save(self, profile: UserProfile) -> None:
        self._profiles[profile.user_id] = dict(profile.weighted_profile or {})

    def __contains__(self, user_id: str) -> bool:
        return user_id in self._profiles
