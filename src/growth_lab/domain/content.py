"""Domain records for content linked to topics and the catalogue snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from .profiles import Topic, UserProfile


@dataclass(frozen=True)
class ModelSummary:
    """A strategic model (interactive worksheet) as shown on recommendation cards."""

    id: str
    name: str
    slug: str | None = None
    emoji: str | None = None
    short_description: str | None = None
    active: bool = True


@dataclass(frozen=True)
class ResourceSummary:
    """An insights-hub resource (article, video, guide)."""

    id: str
    title: str
    type: str
    url: str | None = None
    description: str | None = None
    author: str | None = None
    estimated_time: int | None = None
    emoji: str | None = None
    active: bool = True
    topic_category_keys: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class VendorSummary:
    """A martech directory vendor."""

    id: str
    name: str
    website: str | None = None
    description: str | None = None
    active: bool = True


@dataclass(frozen=True)
class ResearchStudySummary:
    """A research study or survey open to contributors."""

    id: str
    title: str
    description: str | None = None
    status: str = "draft"

    @property
    def active(self) -> bool:
        return self.status == "active"


@dataclass(frozen=True)
class TopicLinks:
    """Content attached to a topic by admins. Links play no part in scoring."""

    topic_id: str
    model_ids: tuple[str, ...] = ()
    resource_ids: tuple[str, ...] = ()
    vendor_ids: tuple[str, ...] = ()
    research_study_ids: tuple[str, ...] = ()
    resource_category_names: tuple[str, ...] = ()


def _empty_profiles() -> MappingProxyType[str, UserProfile]:
    return MappingProxyType({})


def _empty_links() -> MappingProxyType[str, TopicLinks]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ContentCatalog:
    """Immutable snapshot of everything the recommendation flow reads."""

    profiles: MappingProxyType[str, UserProfile] = field(default_factory=_empty_profiles)
    topics: tuple[Topic, ...] = ()
    models: tuple[ModelSummary, ...] = ()
    resources: tuple[ResourceSummary, ...] = ()
    vendors: tuple[VendorSummary, ...] = ()
    research_studies: tuple[ResearchStudySummary, ...] = ()
    topic_links: MappingProxyType[str, TopicLinks] = field(default_factory=_empty_links)


def unique_in_order(values: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """De-duplicate while keeping first-seen order."""
    return tuple(dict.fromkeys(values))
