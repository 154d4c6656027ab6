"""
Platform registry for the recommendation pipelines.

Maps platform identifiers to pipeline instances, so new platforms can be
plugged in without modifying the orchestrator.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from skill_recommender.recommenders.base import BasePlatformPipeline

logger = logging.getLogger(__name__)


class PlatformRegistry:
    """
    Registry of platform pipelines.

    Typical usage:
        >>> registry = PlatformRegistry()
        >>> registry.register(VideoPipeline("YouTube", provider, gateway))
        >>> registry.get("YouTube").name
        'YouTube'
    """

    def __init__(self):
        self._pipelines: Dict[str, BasePlatformPipeline] = {}

    def register(self, pipeline: BasePlatformPipeline) -> None:
        """
        Register a pipeline under its name.

        Raises:
            ValueError: If the platform is already registered.
            TypeError: If pipeline doesn't inherit from BasePlatformPipeline.
        """
        if not isinstance(pipeline, BasePlatformPipeline):
            raise TypeError(
                f"Pipeline must inherit from BasePlatformPipeline, "
                f"got {type(pipeline).__name__}"
            )

        if pipeline.name in self._pipelines:
            raise ValueError(f"Platform '{pipeline.name}' is already registered")

        self._pipelines[pipeline.name] = pipeline
        logger.info(f"Registered platform: {pipeline.name} ({type(pipeline).__name__})")

    def get(self, name: str) -> BasePlatformPipeline:
        """
        Look up the pipeline for a platform.

        Raises:
            ValueError: If the platform is not registered.
        """
        if name not in self._pipelines:
            available = ", ".join(self.list_platforms())
            raise ValueError(f"Unknown platform: '{name}'. Available platforms: {available}")
        return self._pipelines[name]

    def list_platforms(self) -> List[str]:
        return list(self._pipelines.keys())

    def is_registered(self, name: str) -> bool:
        return name in self._pipelines

    def unregister(self, name: str) -> None:
        """
        Unregister a platform.

        Raises:
            ValueError: If the platform is not registered.
        """
        if name not in self._pipelines:
            raise ValueError(f"Cannot unregister unknown platform: '{name}'")

        del self._pipelines[name]
        logger.info(f"Unregistered platform: {name}")
