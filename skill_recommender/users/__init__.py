"""
User profile management module.

This module provides UserManager for decaying and reinforcing weighted
interest profiles, plus the profile stores that persist them.
"""

from skill_recommender.users.manager import UserManager
from skill_recommender.users.store import (
    InMemoryProfileStore,
    ProfileStore,
    SQLProfileStore,
)

__all__ = [
    "UserManager",
    "ProfileStore",
    "SQLProfileStore",
    "InMemoryProfileStore",
]
