"""
SQLAlchemy models for the Skill Recommender service.

The schema holds one table:
- user_profiles: weighted interest map per user, keyed by an opaque user id
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict

from sqlalchemy import JSON, DateTime, Engine, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UserProfile(Base):
    """
    Model representing a user's weighted interest profile.

    Attributes:
        id: Primary key.
        user_id: Opaque user identifier (unique).
        weighted_profile: Mapping of normalized topic to affinity weight.
        created_at: Profile creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    weighted_profile: Mapped[Dict[str, float]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(), onupdate=lambda: datetime.now()
    )

    def __repr__(self) -> str:
        return f"<UserProfile(user_id={self.user_id}, topics={len(self.weighted_profile or {})})>"

    def to_dict(self) -> dict:
        """
        Convert user profile to dictionary representation.

        Returns:
            Dictionary containing all profile fields.
        """
        return {
            "id": self.id,
            "user_id": self.user_id,
            "weighted_profile": dict(self.weighted_profile or {}),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def init_engine(database_url: str) -> Engine:
    """
    Create an engine and make sure all tables exist.

    In-memory SQLite databases share one connection so that every session
    (and every worker thread) sees the same data.

    Args:
        database_url: SQLAlchemy database URL (e.g., 'sqlite:///data/profiles.db').

    Returns:
        A configured Engine.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)
    Base.metadata.create_all(engine)
    return engine


def init_db(database_url: str) -> sessionmaker:
    """
    Initialize database connection and create tables.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        A session factory bound to the database.

    Examples:
        >>> Session = init_db("sqlite:///:memory:")
        >>> with Session() as session:
        ...     session.add(UserProfile(user_id="u1", weighted_profile={}))
        ...     session.commit()
    """
    engine = init_engine(database_url)
    return sessionmaker(bind=engine, expire_on_commit=False)
