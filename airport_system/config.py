"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- AIRPORT_GRAPH_SPANNING_TREE_POLICY=strict
- AIRPORT_GRAPH_ALLOW_ZERO_WEIGHT=false
- AIRPORT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SpanningTreePolicy = Literal["component", "strict"]


class GraphConfig(BaseSettings):
    """Graph store and algorithm configuration.

    Environment variables prefixed with AIRPORT_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRPORT_GRAPH_")

    # "component" returns the tree of the root's component on a disconnected
    # graph, "strict" raises DisconnectedGraphError.
    spanning_tree_policy: SpanningTreePolicy = "component"
    allow_zero_weight: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with AIRPORT_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRPORT_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.spanning_tree_policy)

    Environment variables prefixed with AIRPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="AIRPORT_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
