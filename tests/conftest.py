"""
pytest configuration and fixtures for Skill Recommender tests.

This module provides shared fixtures for all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Test environment must be in place before any config is loaded
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="skill_recommender_logs_")
os.environ["LOG_CONSOLE_OUTPUT"] = "false"
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

from skill_recommender.config import Config
from skill_recommender.database import init_db
from skill_recommender.providers import Candidate
from skill_recommender.recommenders import RecommendationManager
from skill_recommender.users import InMemoryProfileStore, SQLProfileStore, UserManager

from tests.stubs import FakeClock, StubGateway, StubProvider


@pytest.fixture(scope="function")
def config():
    """Create a test configuration."""
    return Config.from_env()


@pytest.fixture(scope="function")
def session_factory():
    """Create an in-memory database session factory."""
    return init_db("sqlite:///:memory:")


@pytest.fixture(scope="function")
def sql_store(session_factory):
    """Create a SQLAlchemy-backed profile store."""
    return SQLProfileStore(session_factory)


@pytest.fixture(scope="function")
def profile_store():
    """Create an in-memory profile store."""
    return InMemoryProfileStore()


@pytest.fixture(scope="function")
def user_manager(profile_store):
    """Create a user manager for testing."""
    return UserManager(profile_store)


@pytest.fixture(scope="function")
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture(scope="function")
def problems():
    """Practice-problem candidates as returned by the LeetCode provider."""
    data = [
        ("Two Sum", "two-sum", "Easy", 49.1),
        ("3Sum", "3sum", "Medium", 32.4),
        ("4Sum", "4sum", "Medium", 35.7),
        ("Two Sum II - Input Array Is Sorted", "two-sum-ii-input-array-is-sorted", "Medium", 59.8),
        ("Two Sum IV - Input is a BST", "two-sum-iv-input-is-a-bst", "Easy", 60.1),
        ("3Sum Closest", "3sum-closest", "Medium", 45.9),
        ("Subarray Sum Equals K", "subarray-sum-equals-k", "Medium", 43.6),
    ]
    return [
        Candidate(
            title=title,
            url=f"https://leetcode.com/problems/{slug}",
            description=f"Difficulty: {difficulty}, Acceptance Rate: {rate}",
            difficulty=difficulty,
            acceptance_rate=rate,
        )
        for title, slug, difficulty, rate in data
    ]


@pytest.fixture(scope="function")
def videos():
    """Video candidates as returned by the YouTube provider."""
    return [
        Candidate(
            title=f"Graph Algorithms Part {i}",
            url=f"https://www.youtube.com/watch?v=vid{i}",
            description=f"Lecture {i} on graph algorithms",
        )
        for i in range(1, 6)
    ]


@pytest.fixture(scope="function")
def gateway():
    """Create a stub generation gateway answering with an empty array."""
    return StubGateway("[]")


@pytest.fixture(scope="function")
def video_provider(videos):
    """Create a stub video provider."""
    return StubProvider(videos, name="youtube")


@pytest.fixture(scope="function")
def problem_provider(problems):
    """Create a stub practice-problem provider."""
    return StubProvider(problems, name="leetcode")


@pytest.fixture(scope="function")
def manager(config, profile_store, gateway, video_provider, problem_provider):
    """Create a recommendation manager wired to stub collaborators."""
    return RecommendationManager.from_config(
        config,
        profile_store,
        gateway=gateway,
        video_provider=video_provider,
        problem_provider=problem_provider,
    )
