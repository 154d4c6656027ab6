"""
OpenAI chat client for the analysis endpoint.

Supports both OpenAI and Azure OpenAI, with configuration determining
which provider to use. Unlike the generation gateway, this client has no
retry or fallback; errors propagate to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from openai import AzureOpenAI, OpenAI

from skill_recommender.config import LLMConfig

logger = logging.getLogger(__name__)


@dataclass
class LLMMessage:
    """
    A message in an LLM conversation.

    Attributes:
        role: Message role ('system', 'user', or 'assistant').
        content: Message content text.
    """

    role: str
    content: str

    def to_dict(self) -> dict:
        """Convert message to dictionary format for API."""
        return {"role": self.role, "content": self.content}

    @classmethod
    def system(cls, content: str) -> "LLMMessage":
        """Create a system message."""
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "LLMMessage":
        """Create a user message."""
        return cls(role="user", content=content)


class LLMClient:
    """
    Configurable chat client for OpenAI and Azure OpenAI.

    Typical usage:
        >>> client = LLMClient(LLMConfig.from_env())
        >>> client.chat([LLMMessage.user("Suggest Python practice paths.")])

    Attributes:
        config: LLM configuration.
        client: OpenAI or Azure OpenAI client instance.
    """

    def __init__(self, config: Optional[LLMConfig] = None):
        """
        Initialize the LLM client.

        Args:
            config: LLM configuration. If None, loads from environment.

        Raises:
            ValueError: If the provider is unsupported.
        """
        self.config = config or LLMConfig.from_env()

        if self.config.provider == "azure":
            self.client = AzureOpenAI(
                api_key=self.config.api_key,
                azure_endpoint=self.config.api_base,
                api_version=self.config.api_version,
            )
        elif self.config.provider == "openai":
            self.client = OpenAI(
                api_key=self.config.api_key,
                base_url=self.config.api_base,
            )
        else:
            raise ValueError(f"Unsupported LLM provider: {self.config.provider}")

        logger.info(f"Initialized LLM client with provider: {self.config.provider}")

    def chat(
        self,
        messages: List[LLMMessage],
        model: Optional[str] = None,
        **kwargs,
    ) -> str:
        """
        Send a chat completion request.

        Args:
            messages: Conversation messages.
            model: Model name to use. If None, uses configured default.
            **kwargs: Additional parameters passed to the API.

        Returns:
            Generated response text.

        Raises:
            openai.OpenAIError: If the API request fails.
        """
        params = {
            "model": model or self.config.model,
            "messages": [msg.to_dict() for msg in messages],
        }
        params.update(kwargs)

        try:
            logger.debug(f"Sending chat request with {len(messages)} messages")
            response = self.client.chat.completions.create(**params)
        except Exception as e:
            logger.error(f"LLM request failed: {e}")
            raise

        if getattr(response, "usage", None):
            logger.info(
                f"LLM request completed: "
                f"{response.usage.prompt_tokens} prompt tokens, "
                f"{response.usage.completion_tokens} completion tokens"
            )

        return response.choices[0].message.content

    @property
    def provider(self) -> str:
        """Return the LLM provider name."""
        return self.config.provider

    @property
    def model(self) -> str:
        """Return the configured model name."""
        return self.config.model
