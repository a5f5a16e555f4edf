"""Centralised, injectable configuration for Growth Lab recommendations."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import RecommenderConfigFile
from .domain.scoring import DEFAULT_WEIGHTS, RecommenderWeights
from .observability.logging import UnknownLogLevelError, parse_log_level

DEFAULT_CATALOG_PATH = "data/reference/sample_catalog.json"


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class LogLevelEnvVarError(ValueError):
    """Raised when an environment variable is not a standard log level name."""

    def __init__(self, env_name: str, value: str) -> None:
        super().__init__(
            f"{env_name} must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {value!r})."
        )


@dataclass(frozen=True)
class RecommenderConfig:
    """Immutable configuration object for the recommendation commands.

    Load from environment with `RecommenderConfig.from_env()` or construct directly for testing.
    """

    catalog_path: str = DEFAULT_CATALOG_PATH
    limit: int = 5
    fallback_limit: int = 3
    log_level: str = "INFO"
    weights: RecommenderWeights = DEFAULT_WEIGHTS

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.
        """
        load_dotenv(dotenv_path)

        return cls(
            catalog_path=os.getenv("GROWTH_LAB_CATALOG_PATH", DEFAULT_CATALOG_PATH).strip()
            or DEFAULT_CATALOG_PATH,
            limit=_parse_positive_int(
                os.getenv("RECOMMENDATION_LIMIT", "5"), env_name="RECOMMENDATION_LIMIT"
            ),
            fallback_limit=_parse_positive_int(
                os.getenv("RECOMMENDATION_FALLBACK_LIMIT", "3"),
                env_name="RECOMMENDATION_FALLBACK_LIMIT",
            ),
            log_level=_parse_log_level(
                os.getenv("GROWTH_LAB_LOG_LEVEL", "INFO"), env_name="GROWTH_LAB_LOG_LEVEL"
            ),
        )

    def with_overrides(
        self,
        *,
        catalog_path: str | None = None,
        limit: int | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            catalog_path=self.catalog_path if catalog_path is None else catalog_path.strip(),
            limit=self.limit if limit is None else limit,
        )

    def with_file_overrides(self, file_config: RecommenderConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            catalog_path=self.catalog_path
            if file_config.catalog_path is None
            else file_config.catalog_path,
            limit=self.limit if file_config.limit is None else file_config.limit,
            fallback_limit=self.fallback_limit
            if file_config.fallback_limit is None
            else file_config.fallback_limit,
            log_level=self.log_level if file_config.log_level is None else file_config.log_level,
            weights=self.weights if file_config.weights is None else file_config.weights,
        )


def _parse_positive_int(value: str, *, env_name: str) -> int:
    """Parse a positive integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_log_level(value: str, *, env_name: str) -> str:
    """Normalise a log level name from an environment variable."""
    name = value.strip().upper() or "INFO"
    try:
        parse_log_level(name)
    except UnknownLogLevelError as exc:
        raise LogLevelEnvVarError(env_name, value) from exc
    return name
