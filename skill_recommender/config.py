"""
Configuration management for the Skill Recommender service.

This module provides centralized configuration management using environment
variables and python-dotenv. It covers the generation service (Gemini), the
OpenAI client used by the analysis endpoint, the content providers
(YouTube, LeetCode), the profile database and the recommendation engine.

Environment variables are loaded from .env file or system environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


@dataclass
class GenerationConfig:
    """
    Configuration for the text-generation service used for ranking.

    Two Gemini models are used: the primary model is retried on rate
    limiting, the fallback model is called once if the primary fails.

    Attributes:
        api_key: Gemini API key.
        api_base: Base URL of the generateContent REST API.
        primary_model: Model tried first.
        fallback_model: Model used when the primary model fails.
        max_retries: Extra attempts on HTTP 429 (primary model only).
        retry_delay: Seconds to wait between rate-limited attempts.
        timeout: Request timeout in seconds.
    """

    api_key: str = ""
    api_base: str = "https://generativelanguage.googleapis.com/v1"
    primary_model: str = "gemini-2.5-flash"
    fallback_model: str = "gemini-1.5-pro"
    max_retries: int = 3
    retry_delay: float = 2.0
    timeout: int = 60

    @classmethod
    def from_env(cls) -> "GenerationConfig":
        """
        Create GenerationConfig from environment variables.

        Returns:
            A configured GenerationConfig instance.

        Examples:
            >>> config = GenerationConfig.from_env()
            >>> config.primary_model
            'gemini-2.5-flash'
        """
        return cls(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            api_base=os.getenv(
                "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1"
            ),
            primary_model=os.getenv("GEMINI_PRIMARY_MODEL", "gemini-2.5-flash"),
            fallback_model=os.getenv("GEMINI_FALLBACK_MODEL", "gemini-1.5-pro"),
            max_retries=int(os.getenv("GEMINI_MAX_RETRIES", "3")),
            retry_delay=float(os.getenv("GEMINI_RETRY_DELAY", "2.0")),
            timeout=int(os.getenv("GEMINI_TIMEOUT", "60")),
        )

    def model_url(self, model: str) -> str:
        """
        Build the generateContent endpoint for a model.

        Examples:
            >>> GenerationConfig(api_key="k").model_url("gemini-2.5-flash")
            'https://generativelanguage.googleapis.com/v1/models/gemini-2.5-flash:generateContent?key=k'
        """
        return f"{self.api_base}/models/{model}:generateContent?key={self.api_key}"


@dataclass
class LLMConfig:
    """
    Configuration for the chat LLM used by the analysis endpoint.

    Supports both OpenAI and Azure OpenAI providers with configurable
    API keys, endpoints, and model/deployment settings.

    Attributes:
        provider: The LLM provider to use ('openai' or 'azure').
        api_key: The API key for authentication.
        model: Model name (for OpenAI) or deployment name (for Azure).
        api_base: Base URL for API requests.
        api_version: API version (Azure only).
    """

    provider: str = "openai"
    api_key: str = ""
    model: str = "gpt-4o-mini"
    api_base: str = "https://api.openai.com/v1"
    api_version: str = "2024-02-01"

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """
        Create LLMConfig from environment variables.

        Returns:
            A configured LLMConfig instance.
        """
        provider = os.getenv("LLM_PROVIDER", "openai").lower()

        if provider == "azure":
            return cls(
                provider=provider,
                api_key=os.getenv("AZURE_OPENAI_API_KEY", ""),
                model=os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4o-mini"),
                api_base=os.getenv("AZURE_OPENAI_ENDPOINT", ""),
                api_version=os.getenv("AZURE_OPENAI_API_VERSION", "2024-02-01"),
            )
        else:
            return cls(
                provider=provider,
                api_key=os.getenv("OPENAI_API_KEY", ""),
                model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
                api_base=os.getenv("OPENAI_API_BASE", "https://api.openai.com/v1"),
            )


@dataclass
class ProviderConfig:
    """
    Configuration for the content providers.

    Attributes:
        youtube_api_key: YouTube Data API v3 key.
        youtube_search_url: YouTube search endpoint.
        youtube_max_results: Number of videos requested per search.
        leetcode_graphql_url: LeetCode GraphQL endpoint.
        leetcode_limit: Number of problems requested per search.
        timeout: HTTP request timeout in seconds.
    """

    youtube_api_key: str = ""
    youtube_search_url: str = "https://www.googleapis.com/youtube/v3/search"
    youtube_max_results: int = 5
    leetcode_graphql_url: str = "https://leetcode.com/graphql"
    leetcode_limit: int = 12
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """
        Create ProviderConfig from environment variables.

        Returns:
            A configured ProviderConfig instance.
        """
        return cls(
            youtube_api_key=os.getenv("YOUTUBE_API_KEY", ""),
            youtube_search_url=os.getenv(
                "YOUTUBE_SEARCH_URL", "https://www.googleapis.com/youtube/v3/search"
            ),
            youtube_max_results=int(os.getenv("YOUTUBE_MAX_RESULTS", "5")),
            leetcode_graphql_url=os.getenv(
                "LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql"
            ),
            leetcode_limit=int(os.getenv("LEETCODE_LIMIT", "12")),
            timeout=int(os.getenv("PROVIDER_TIMEOUT", "30")),
        )


@dataclass
class DatabaseConfig:
    """
    Configuration for the profile database connection.

    Attributes:
        url: Database connection URL (SQLAlchemy format).
    """

    url: str = "sqlite:///data/profiles.db"

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """
        Create DatabaseConfig from environment variables.

        Returns:
            A configured DatabaseConfig instance.
        """
        return cls(url=os.getenv("DATABASE_URL", "sqlite:///data/profiles.db"))


@dataclass
class RecommendationConfig:
    """
    Configuration for the recommendation engine.

    Attributes:
        cache_ttl_seconds: Lifetime of a cached recommendation set.
        decay_factor: Multiplier applied to every profile weight per request.
        dominant_topics: Number of top-weighted topics used as ranking signal.
        top_k: Number of recommendations returned by ranked pipelines.
        video_fallback_count: Raw videos returned when AI ranking fails.
    """

    cache_ttl_seconds: float = 30 * 60
    decay_factor: float = 0.98
    dominant_topics: int = 5
    top_k: int = 5
    video_fallback_count: int = 3

    @classmethod
    def from_env(cls) -> "RecommendationConfig":
        """
        Create RecommendationConfig from environment variables.

        Returns:
            A configured RecommendationConfig instance.
        """
        return cls(
            cache_ttl_seconds=float(os.getenv("CACHE_TTL_SECONDS", str(30 * 60))),
            decay_factor=float(os.getenv("PROFILE_DECAY_FACTOR", "0.98")),
            dominant_topics=int(os.getenv("DOMINANT_TOPICS", "5")),
            top_k=int(os.getenv("RECOMMEND_TOP_K", "5")),
            video_fallback_count=int(os.getenv("VIDEO_FALLBACK_COUNT", "3")),
        )


@dataclass
class ServerConfig:
    """
    Configuration for the HTTP server.

    Attributes:
        host: Interface to bind.
        port: Port to listen on.
    """

    host: str = "0.0.0.0"
    port: int = 3001

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create ServerConfig from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
        )


@dataclass
class LogConfig:
    """
    Configuration for application logging.

    Controls logging behavior including log level, output format,
    and file rotation settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for log files.
        log_file: Name of the log file.
        max_bytes: Maximum size of a single log file before rotation.
        backup_count: Number of backup log files to keep.
        format_string: Log message format string.
        date_format: Date format for log timestamps.
        console_output: Whether to also output logs to console.
    """

    level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("data/logs"))
    log_file: str = "skill_recommender.log"
    max_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True

    @classmethod
    def from_env(cls) -> "LogConfig":
        """
        Create LogConfig from environment variables.

        Creates log directory if it doesn't exist.

        Returns:
            A configured LogConfig instance.
        """
        log_dir = Path(os.getenv("LOG_DIR", "data/logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=log_dir,
            log_file=os.getenv("LOG_FILE", "skill_recommender.log"),
            max_bytes=int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            format_string=os.getenv(
                "LOG_FORMAT",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            date_format=os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"),
            console_output=os.getenv("LOG_CONSOLE_OUTPUT", "true").lower() == "true",
        )


@dataclass
class Config:
    """
    Main configuration container for the Skill Recommender service.

    Aggregates all sub-configurations into a single object. It's typically
    created once at application startup using the from_env() class method.

    Attributes:
        generation: Gemini generation service configuration.
        llm: OpenAI chat configuration for the analysis endpoint.
        providers: Content provider configuration.
        database: Profile database configuration.
        recommendation: Recommendation engine configuration.
        server: HTTP server configuration.
        log: Logging configuration.
    """

    generation: GenerationConfig = field(default_factory=GenerationConfig.from_env)
    llm: LLMConfig = field(default_factory=LLMConfig.from_env)
    providers: ProviderConfig = field(default_factory=ProviderConfig.from_env)
    database: DatabaseConfig = field(default_factory=DatabaseConfig.from_env)
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig.from_env)
    server: ServerConfig = field(default_factory=ServerConfig.from_env)
    log: LogConfig = field(default_factory=LogConfig.from_env)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config from environment variables.

        Returns:
            A fully configured Config instance.

        Examples:
            >>> config = Config.from_env()
            >>> config.recommendation.decay_factor
            0.98
        """
        return cls(
            generation=GenerationConfig.from_env(),
            llm=LLMConfig.from_env(),
            providers=ProviderConfig.from_env(),
            database=DatabaseConfig.from_env(),
            recommendation=RecommendationConfig.from_env(),
            server=ServerConfig.from_env(),
            log=LogConfig.from_env(),
        )
