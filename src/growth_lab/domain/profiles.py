"""Domain records for user profiles, topics and scored topics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Seniority = Literal["junior", "mid", "senior", "executive"]
Role = Literal["lawyer", "partner", "associate", "mbd", "operations", "other"]
FirmSize = Literal["small", "medium", "large", "global"]
FirmType = Literal["law_firm", "in_house", "consulting", "government", "academia"]
Scope = Literal["national", "international"]

MIN_MATURITY_LEVEL = 1
MAX_MATURITY_LEVEL = 5


@dataclass(frozen=True)
class UserProfile:
    """Profile attributes a user supplies during onboarding.

    Every attribute is optional. Unset attributes never contribute a match.
    """

    seniority: Seniority | None = None
    role: Role | None = None
    firm_size: FirmSize | None = None
    firm_type: FirmType | None = None
    interest_areas: tuple[str, ...] = ()
    international_scope: bool = False
    growth_maturity_level: int = MIN_MATURITY_LEVEL
    data_maturity_level: int = MIN_MATURITY_LEVEL

    @property
    def scope(self) -> Scope:
        """Geographic scope derived from the international flag."""
        return "international" if self.international_scope else "national"


@dataclass(frozen=True)
class Topic:
    """An admin-authored recommendation topic with its targeting rules."""

    id: str
    name: str
    description: str | None = None
    interest_area_keywords: tuple[str, ...] = ()
    recommended_seniority: frozenset[str] = field(default_factory=frozenset)
    recommended_roles: frozenset[str] = field(default_factory=frozenset)
    recommended_firm_sizes: frozenset[str] = field(default_factory=frozenset)
    recommended_firm_types: frozenset[str] = field(default_factory=frozenset)
    national_or_international: frozenset[str] = field(default_factory=frozenset)
    min_growth_maturity: int = MIN_MATURITY_LEVEL
    max_growth_maturity: int = MAX_MATURITY_LEVEL
    min_data_maturity: int = MIN_MATURITY_LEVEL
    max_data_maturity: int = MAX_MATURITY_LEVEL
    active: bool = True
    category_key: str | None = None


@dataclass(frozen=True)
class ScoredTopic:
    """A topic paired with its relevance score for one profile."""

    topic: Topic
    score: int

    @property
    def id(self) -> str:
        return self.topic.id

    @property
    def name(self) -> str:
        return self.topic.name
