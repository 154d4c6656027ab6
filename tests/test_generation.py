"""
Unit tests for the generation layer.

Tests the Gemini gateway's retry/fallback chain, structured-answer
extraction, the Result type and the analysis client.
"""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest
import requests

from skill_recommender.config import GenerationConfig, LLMConfig
from skill_recommender.generation import (
    EMPTY_ANSWER,
    AnswerShape,
    GenerationGateway,
    LearningAnalyzer,
    LLMClient,
    LLMMessage,
    extract_structured,
)
from skill_recommender.results import ErrorKind, Result, ResultError

from tests.stubs import gemini_body, make_response


@pytest.fixture
def generation_config():
    return GenerationConfig(
        api_key="k",
        primary_model="primary-model",
        fallback_model="fallback-model",
        max_retries=3,
        retry_delay=2.0,
    )


def make_gateway(generation_config, responses):
    session = Mock()
    session.post.side_effect = responses
    sleep = AsyncMock()
    gateway = GenerationGateway(generation_config, session=session, sleep=sleep)
    return gateway, session, sleep


def posted_models(session):
    return [c.args[0].split("/models/")[1].split(":")[0] for c in session.post.call_args_list]


class TestGenerationGateway:
    """Tests for GenerationGateway."""

    def test_primary_success(self, generation_config):
        """Test that a successful primary call returns its text."""
        gateway, session, sleep = make_gateway(
            generation_config, [make_response(200, gemini_body('[{"title": "x"}]'))]
        )

        assert asyncio.run(gateway.generate("rank")) == '[{"title": "x"}]'
        assert posted_models(session) == ["primary-model"]
        sleep.assert_not_called()

    def test_payload_shape(self, generation_config):
        """Test the request body and endpoint."""
        gateway, session, _ = make_gateway(generation_config, [make_response(200, gemini_body("ok"))])
        asyncio.run(gateway.generate("hello"))

        args, kwargs = session.post.call_args
        assert args[0] == (
            "https://generativelanguage.googleapis.com/v1/models/primary-model:generateContent?key=k"
        )
        assert kwargs["json"] == {"contents": [{"parts": [{"text": "hello"}]}]}
        assert kwargs["timeout"] == 60

    def test_rate_limit_is_retried(self, generation_config):
        """Test that a 429 is retried on the primary model after the delay."""
        gateway, session, sleep = make_gateway(
            generation_config,
            [make_response(429), make_response(200, gemini_body("second try"))],
        )

        assert asyncio.run(gateway.generate("rank")) == "second try"
        assert posted_models(session) == ["primary-model", "primary-model"]
        sleep.assert_awaited_once_with(2.0)

    def test_exhausted_retries_fall_back_once(self, generation_config):
        """Test four primary attempts then exactly one fallback attempt."""
        gateway, session, sleep = make_gateway(
            generation_config,
            [make_response(429)] * 4 + [make_response(200, gemini_body("from fallback"))],
        )

        assert asyncio.run(gateway.generate("rank")) == "from fallback"
        assert posted_models(session) == ["primary-model"] * 4 + ["fallback-model"]
        assert sleep.await_count == 3

    def test_other_errors_skip_retries(self, generation_config):
        """Test that non-429 failures go straight to the fallback model."""
        gateway, session, sleep = make_gateway(
            generation_config,
            [make_response(500), make_response(200, gemini_body("fallback"))],
        )

        assert asyncio.run(gateway.generate("rank")) == "fallback"
        assert posted_models(session) == ["primary-model", "fallback-model"]
        sleep.assert_not_called()

    def test_transport_error_falls_back(self, generation_config):
        """Test that connection errors also trigger the fallback."""
        gateway, session, _ = make_gateway(
            generation_config,
            [requests.ConnectionError("refused"), make_response(200, gemini_body("fallback"))],
        )

        assert asyncio.run(gateway.generate("rank")) == "fallback"

    def test_fallback_is_not_retried(self, generation_config):
        """Test that a rate-limited fallback gives the empty answer."""
        gateway, session, sleep = make_gateway(
            generation_config, [make_response(500), make_response(429)]
        )

        assert asyncio.run(gateway.generate("rank")) == EMPTY_ANSWER
        assert session.post.call_count == 2
        sleep.assert_not_called()

    def test_both_models_fail(self, generation_config):
        """Test the empty answer when every model fails."""
        gateway, _, _ = make_gateway(
            generation_config, [make_response(503), make_response(503)]
        )

        assert asyncio.run(gateway.generate("rank")) == "[]"

    def test_missing_text_gives_empty_answer(self, generation_config):
        """Test responses without candidate text."""
        gateway, _, _ = make_gateway(generation_config, [make_response(200, {"candidates": []})])
        assert asyncio.run(gateway.generate("rank")) == EMPTY_ANSWER

        gateway, _, _ = make_gateway(generation_config, [make_response(200, gemini_body(""))])
        assert asyncio.run(gateway.generate("rank")) == EMPTY_ANSWER


class TestExtractStructured:
    """Tests for extract_structured."""

    def test_array_inside_prose(self):
        """Test extracting an array wrapped in text and code fences."""
        text = 'Here you go:\n```json\n[{"title": "A", "url": "u"}]\n```'
        result = extract_structured(text, AnswerShape.ARRAY)

        assert result.is_ok
        assert result.unwrap() == [{"title": "A", "url": "u"}]

    def test_object_inside_prose(self):
        """Test extracting an object."""
        text = 'Answer: {"hints": ["a"], "solution_outline": "b", "similar_problems": []} done'
        assert extract_structured(text, AnswerShape.OBJECT).unwrap()["hints"] == ["a"]

    def test_no_span(self):
        """Test text without JSON."""
        result = extract_structured("I cannot help with that.", AnswerShape.ARRAY)
        assert not result.is_ok
        assert result.error is ErrorKind.MALFORMED_ANSWER

    def test_invalid_json(self):
        """Test an unparsable span."""
        result = extract_structured("{not: json}", AnswerShape.OBJECT)
        assert result.error is ErrorKind.MALFORMED_ANSWER

    def test_empty_answer_is_not_an_object(self):
        """Test that the gateway's empty answer has no object span."""
        assert not extract_structured(EMPTY_ANSWER, AnswerShape.OBJECT).is_ok
        assert extract_structured(EMPTY_ANSWER, AnswerShape.ARRAY).unwrap() == []

    def test_none_text(self):
        """Test a missing answer."""
        assert not extract_structured(None, AnswerShape.ARRAY).is_ok


class TestResult:
    """Tests for Result."""

    def test_ok_chain(self):
        """Test map and and_then on success."""
        result = Result.ok(2).map(lambda v: v * 3).and_then(lambda v: Result.ok(v + 1))
        assert result.unwrap() == 7

    def test_failure_short_circuits(self):
        """Test that failures skip map and and_then."""
        mapper = Mock()
        result = Result.fail(ErrorKind.UPSTREAM_UNAVAILABLE, "down").map(mapper).and_then(mapper)

        mapper.assert_not_called()
        assert result.error is ErrorKind.UPSTREAM_UNAVAILABLE
        assert result.message == "down"

    def test_or_else_only_on_failure(self):
        """Test that the fallback receives the failure and is skipped on success."""
        fallback = Mock(return_value=Result.ok("fallback"))

        assert Result.ok("value").or_else(fallback).unwrap() == "value"
        fallback.assert_not_called()

        failed = Result.fail(ErrorKind.MALFORMED_ANSWER)
        assert failed.or_else(fallback).unwrap() == "fallback"
        fallback.assert_called_once_with(failed)

    def test_unwrap_failure_raises(self):
        """Test unwrap on a failure."""
        with pytest.raises(ResultError) as exc_info:
            Result.fail(ErrorKind.RATE_LIMITED, "slow down").unwrap()

        assert exc_info.value.kind is ErrorKind.RATE_LIMITED
        assert Result.fail(ErrorKind.RATE_LIMITED).unwrap_or(0) == 0


class TestLLMClient:
    """Tests for LLMClient."""

    @patch("skill_recommender.generation.llm_client.OpenAI")
    def test_chat(self, mock_openai):
        """Test a chat completion round trip."""
        completion = Mock()
        completion.choices = [Mock(message=Mock(content="Try NeetCode's graph playlist."))]
        completion.usage = Mock(prompt_tokens=10, completion_tokens=5)
        mock_openai.return_value.chat.completions.create.return_value = completion

        client = LLMClient(LLMConfig(api_key="test", model="gpt-4o-mini"))
        answer = client.chat([LLMMessage.system("Be brief."), LLMMessage.user("Graphs?")])

        assert answer == "Try NeetCode's graph playlist."
        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["messages"] == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "Graphs?"},
        ]

    @patch("skill_recommender.generation.llm_client.AzureOpenAI")
    def test_azure_provider(self, mock_azure):
        """Test Azure client construction."""
        client = LLMClient(LLMConfig(provider="azure", api_key="k", api_base="https://x.azure.com"))

        assert client.provider == "azure"
        mock_azure.assert_called_once()

    def test_unsupported_provider(self):
        """Test that unknown providers are rejected."""
        with pytest.raises(ValueError, match="Unsupported LLM provider"):
            LLMClient(LLMConfig(provider="unknown"))


class TestLearningAnalyzer:
    """Tests for LearningAnalyzer."""

    def test_analyze_returns_recommendation(self):
        """Test the analysis result shape and prompt."""
        llm_client = Mock()
        llm_client.chat.return_value = "Practice on Exercism."

        analyzer = LearningAnalyzer(llm_client)
        result = asyncio.run(analyzer.analyze({"site": "LeetCode", "title": "Two Sum"}))

        assert result == {"recommendation": "Practice on Exercism."}
        messages = llm_client.chat.call_args.args[0]
        assert messages[0].role == "user"
        assert "User is learning on LeetCode." in messages[0].content
        assert "Two Sum" in messages[0].content

    def test_analyze_propagates_errors(self):
        """Test that chat failures are not swallowed."""
        llm_client = Mock()
        llm_client.chat.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(RuntimeError):
            asyncio.run(LearningAnalyzer(llm_client).analyze({"site": "YouTube"}))
