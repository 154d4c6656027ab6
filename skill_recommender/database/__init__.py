"""
Database module for user profile storage.

This module provides SQLAlchemy models and database utilities for
persisting weighted interest profiles.
"""

from skill_recommender.database.models import (
    Base,
    UserProfile,
    init_db,
    init_engine,
)

__all__ = [
    "Base",
    "UserProfile",
    "init_db",
    "init_engine",
]
