"""Typed parsing and validation for recommender config files.

Example file::

    schema_version = 1

    [recommender]
    catalog_path = "data/reference/sample_catalog.json"
    limit = 5
    fallback_limit = 3

    [weights]
    interest = 5
    role = 3
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .domain.scoring import DEFAULT_WEIGHTS, RecommenderWeights
from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class RecommenderConfigFile:
    """Validated recommender config values loaded from a TOML file."""

    catalog_path: str | None = None
    limit: int | None = None
    fallback_limit: int | None = None
    log_level: str | None = None
    weights: RecommenderWeights | None = None


class _RecommenderSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    catalog_path: str | None = None
    limit: int | None = None
    fallback_limit: int | None = None
    log_level: str | None = None

    @field_validator("catalog_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("limit", "fallback_limit")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError
        return level


class _WeightsSectionModel(BaseModel):
    """Weight overrides; unspecified signals keep their default weight."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    interest: int = DEFAULT_WEIGHTS.interest
    role: int = DEFAULT_WEIGHTS.role
    seniority: int = DEFAULT_WEIGHTS.seniority
    firm_size: int = DEFAULT_WEIGHTS.firm_size
    firm_type: int = DEFAULT_WEIGHTS.firm_type
    scope: int = DEFAULT_WEIGHTS.scope
    growth_maturity: int = DEFAULT_WEIGHTS.growth_maturity
    data_maturity: int = DEFAULT_WEIGHTS.data_maturity

    @field_validator("*")
    @classmethod
    def _validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_order(self) -> _WeightsSectionModel:
        # Stated interest outranks role, role outranks profile attributes, and
        # attributes outrank the broad range/scope signals.
        attributes = (self.seniority, self.firm_size, self.firm_type)
        broad = (self.growth_maturity, self.data_maturity, self.scope)
        if not self.interest > self.role > max(attributes):
            raise ValueError("weights must keep interest > role > seniority/firm weights")
        if min(attributes) < max(broad):
            raise ValueError("seniority/firm weights must be >= maturity and scope weights")
        return self


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    recommender: _RecommenderSectionModel = _RecommenderSectionModel()
    weights: _WeightsSectionModel | None = None

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_recommender_config_file(*, path: Path, fs: FileSystem) -> RecommenderConfigFile:
    """Load and validate a recommender TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.recommender
    weights = None
    if model.weights is not None:
        weights = RecommenderWeights(**model.weights.model_dump())
    return RecommenderConfigFile(
        catalog_path=section.catalog_path,
        limit=section.limit,
        fallback_limit=section.fallback_limit,
        log_level=section.log_level,
        weights=weights,
    )
