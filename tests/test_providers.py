"""
Unit tests for content providers.

Tests YouTube and LeetCode providers with mocked HTTP sessions.
"""

import asyncio
from unittest.mock import Mock

import pytest
import requests

from skill_recommender.config import ProviderConfig
from skill_recommender.providers import BaseProvider, Candidate, LeetCodeProvider, YouTubeProvider

from tests.stubs import make_response


@pytest.fixture
def provider_config():
    return ProviderConfig(youtube_api_key="yt-key", youtube_max_results=5, leetcode_limit=12)


class TestCandidate:
    """Tests for Candidate."""

    def test_to_dict_omits_unset_provenance(self):
        """Test that video candidates carry no problem fields."""
        candidate = Candidate(title="Graphs", url="https://www.youtube.com/watch?v=1", description="d")
        assert candidate.to_dict() == {
            "title": "Graphs",
            "url": "https://www.youtube.com/watch?v=1",
            "description": "d",
        }

    def test_round_trip_with_provenance(self):
        """Test that problem fields survive to_dict/from_dict."""
        candidate = Candidate(
            title="Two Sum",
            url="https://leetcode.com/problems/two-sum",
            description="Difficulty: Easy, Acceptance Rate: 49.1",
            difficulty="Easy",
            acceptance_rate=49.1,
        )
        assert Candidate.from_dict(candidate.to_dict()) == candidate


class TestYouTubeProvider:
    """Tests for YouTubeProvider."""

    @pytest.fixture
    def provider(self, provider_config):
        provider = YouTubeProvider(provider_config)
        provider._session = Mock()
        return provider

    def test_source_name(self, provider):
        """Test source identifier."""
        assert provider.source_name == "youtube"
        assert isinstance(provider, BaseProvider)

    def test_search(self, provider):
        """Test parsing of search results."""
        provider._session.get.return_value = make_response(200, {
            "items": [
                {
                    "id": {"videoId": "abc123"},
                    "snippet": {"title": "BFS in 10 minutes", "description": "Breadth-first search"},
                },
                {
                    "id": {"videoId": "def456"},
                    "snippet": {"title": "DFS explained", "description": ""},
                },
            ]
        })

        videos = asyncio.run(provider.search("graph traversal"))

        assert [v.title for v in videos] == ["BFS in 10 minutes", "DFS explained"]
        assert videos[0].url == "https://www.youtube.com/watch?v=abc123"
        assert videos[0].description == "Breadth-first search"

        params = provider._session.get.call_args.kwargs["params"]
        assert params["q"] == "graph traversal"
        assert params["maxResults"] == 5
        assert params["type"] == "video"
        assert params["key"] == "yt-key"

    def test_no_items(self, provider):
        """Test responses without items."""
        provider._session.get.return_value = make_response(200, {"error": {"code": 403}})
        assert asyncio.run(provider.search("python")) == []

    def test_request_failure_returns_empty(self, provider):
        """Test that transport errors become an empty list."""
        provider._session.get.side_effect = requests.ConnectionError("offline")
        assert asyncio.run(provider.search("python")) == []


class TestLeetCodeProvider:
    """Tests for LeetCodeProvider."""

    @pytest.fixture
    def provider(self, provider_config):
        provider = LeetCodeProvider(provider_config)
        provider._session = Mock()
        return provider

    def test_source_name(self, provider):
        """Test source identifier."""
        assert provider.source_name == "leetcode"

    def test_search(self, provider):
        """Test parsing of the GraphQL problem list."""
        provider._session.post.return_value = make_response(200, {
            "data": {
                "problemsetQuestionList": {
                    "questions": [
                        {"title": "Two Sum", "titleSlug": "two-sum", "difficulty": "Easy", "acRate": 49.1},
                        {"title": "3Sum", "titleSlug": "3sum", "difficulty": "Medium", "acRate": 32.4},
                    ]
                }
            }
        })

        problems = asyncio.run(provider.search("array"))

        assert len(problems) == 2
        assert problems[0].url == "https://leetcode.com/problems/two-sum"
        assert problems[0].difficulty == "Easy"
        assert problems[0].acceptance_rate == 49.1
        assert problems[1].description == "Difficulty: Medium, Acceptance Rate: 32.4"

        payload = provider._session.post.call_args.kwargs["json"]
        assert payload["variables"]["limit"] == 12
        assert payload["variables"]["filters"] == {"searchKeywords": "array"}

    def test_empty_question_list(self, provider):
        """Test a search without matches."""
        provider._session.post.return_value = make_response(200, {
            "data": {"problemsetQuestionList": {"questions": []}}
        })
        assert asyncio.run(provider.search("nothing")) == []

    def test_http_error_propagates(self, provider):
        """Test that HTTP errors are raised."""
        provider._session.post.return_value = make_response(502)

        with pytest.raises(requests.HTTPError):
            asyncio.run(provider.search("array"))

    def test_invalid_response(self, provider):
        """Test malformed GraphQL responses."""
        provider._session.post.return_value = make_response(200, {"errors": ["bad query"]})

        with pytest.raises(ValueError, match="Invalid response format"):
            asyncio.run(provider.search("array"))
