"""
Generation gateway for the Gemini generateContent API.

Sends a prompt to the primary model, retrying on rate limiting, then
falls back to a secondary model once. When both fail the gateway returns
an empty JSON array instead of raising, so callers treat the outcome as
"no AI-derived content".
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import requests

from skill_recommender.config import GenerationConfig

logger = logging.getLogger(__name__)

EMPTY_ANSWER = "[]"
RATE_LIMITED_STATUS = 429


class GenerationGateway:
    """
    Resilient client for the text-generation service.

    Failure handling:
    1. Primary model; HTTP 429 is retried up to `max_retries` more times
       with a fixed `retry_delay` between attempts.
    2. Any other primary failure, or exhausted retries: fallback model,
       exactly one attempt.
    3. Fallback failure: EMPTY_ANSWER.

    Typical usage:
        >>> gateway = GenerationGateway(GenerationConfig.from_env())
        >>> text = await gateway.generate("Rank these videos ...")

    Attributes:
        config: Generation service configuration.
    """

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Initialize the gateway.

        Args:
            config: Generation configuration. If None, loads from environment.
            session: HTTP session to use. A new one is created if None.
            sleep: Coroutine function used for the retry delay.
        """
        self.config = config or GenerationConfig.from_env()
        self._session = session or requests.Session()
        self._sleep = sleep

        logger.info(
            f"Initialized generation gateway: primary={self.config.primary_model}, "
            f"fallback={self.config.fallback_model}"
        )

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Free-text prompt.

        Returns:
            The model's raw text, or EMPTY_ANSWER when every model failed
            or the response carried no text.
        """
        payload = self._build_payload(prompt)

        try:
            logger.info(f"Trying primary model {self.config.primary_model}")
            data = await self._call_with_retry(
                self.config.model_url(self.config.primary_model), payload
            )
            return self._extract_text(data)
        except Exception as e:
            logger.warning(f"Primary model failed: {e}")

        try:
            logger.warning(f"Falling back to {self.config.fallback_model}")
            data = await self._post(self.config.model_url(self.config.fallback_model), payload)
            return self._extract_text(data)
        except Exception as e:
            logger.error(f"All generation models failed, returning empty answer: {e}")
            return EMPTY_ANSWER

    async def _call_with_retry(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to the primary model, retrying only on HTTP 429.

        Raises:
            requests.RequestException: On non-429 errors or exhausted retries.
        """
        attempt = 0
        while True:
            try:
                return await self._post(url, payload)
            except requests.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                if status != RATE_LIMITED_STATUS or attempt >= self.config.max_retries:
                    raise
                attempt += 1
                logger.warning(
                    f"Generation rate limited, retrying in {self.config.retry_delay}s "
                    f"({attempt}/{self.config.max_retries})"
                )
                await self._sleep(self.config.retry_delay)

    async def _post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await asyncio.to_thread(self._post_sync, url, payload)

    def _post_sync(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self._session.post(url, json=payload, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _build_payload(prompt: str) -> Dict[str, Any]:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> str:
        """Pull the first candidate's first text part out of a response body."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.warning("Generation response carried no text")
            return EMPTY_ANSWER
        return text or EMPTY_ANSWER
