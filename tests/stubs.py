"""
Test doubles for providers, the generation gateway and the clock.
"""

import asyncio
from typing import List, Optional, Sequence
from unittest.mock import Mock

import requests

from skill_recommender.providers import BaseProvider, Candidate


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubProvider(BaseProvider):
    """
    Provider returning fixed candidates.

    Records every searched topic. When `gate` is set, searches wait for it,
    which keeps a computation in flight until the test releases it.
    """

    def __init__(
        self,
        candidates: Sequence[Candidate] = (),
        name: str = "stub",
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.candidates = list(candidates)
        self.name = name
        self.error = error
        self.gate = gate
        self.calls: List[str] = []

    @property
    def source_name(self) -> str:
        return self.name

    async def search(self, topic: str) -> List[Candidate]:
        self.calls.append(topic)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.candidates)


class StubGateway:
    """Generation gateway returning a fixed answer and recording prompts."""

    def __init__(self, answer: str = "[]"):
        self.answer = answer
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


def make_response(status_code: int = 200, json_data=None) -> Mock:
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data if json_data is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def gemini_body(text: str) -> dict:
    """Build a generateContent response body carrying `text`."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}
