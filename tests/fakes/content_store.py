"""Content store fakes for tests."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing_extensions import override

from growth_lab.domain.content import (
    ModelSummary,
    ResearchStudySummary,
    ResourceSummary,
    TopicLinks,
    VendorSummary,
)
from growth_lab.domain.profiles import Topic, UserProfile
from growth_lab.infrastructure import InMemoryContentStore
from growth_lab.protocols import ContentStore


def _empty_counter() -> Counter[str]:
    return Counter()


@dataclass
class CountingContentStore(ContentStore):
    """Delegating store that counts calls per method."""

    inner: InMemoryContentStore
    calls: Counter[str] = field(default_factory=_empty_counter)

    @override
    def get_profile(self, user_id: str) -> UserProfile | None:
        self.calls["get_profile"] += 1
        return self.inner.get_profile(user_id)

    @override
    def list_topics(self) -> Sequence[Topic]:
        self.calls["list_topics"] += 1
        return self.inner.list_topics()

    @override
    def get_topic_links(self, topic_id: str) -> TopicLinks:
        self.calls["get_topic_links"] += 1
        return self.inner.get_topic_links(topic_id)

    @override
    def get_models(self, model_ids: Sequence[str]) -> Sequence[ModelSummary]:
        self.calls["get_models"] += 1
        return self.inner.get_models(model_ids)

    @override
    def get_resources(self, resource_ids: Sequence[str]) -> Sequence[ResourceSummary]:
        self.calls["get_resources"] += 1
        return self.inner.get_resources(resource_ids)

    @override
    def get_vendors(self, vendor_ids: Sequence[str]) -> Sequence[VendorSummary]:
        self.calls["get_vendors"] += 1
        return self.inner.get_vendors(vendor_ids)

    @override
    def get_research_studies(self, study_ids: Sequence[str]) -> Sequence[ResearchStudySummary]:
        self.calls["get_research_studies"] += 1
        return self.inner.get_research_studies(study_ids)

    @override
    def resources_for_categories(self, category_keys: Sequence[str]) -> Sequence[str]:
        self.calls["resources_for_categories"] += 1
        return self.inner.resources_for_categories(category_keys)

    @override
    def list_active_models(self, limit: int) -> Sequence[ModelSummary]:
        self.calls["list_active_models"] += 1
        return self.inner.list_active_models(limit)

    @override
    def list_active_resources(self, limit: int) -> Sequence[ResourceSummary]:
        self.calls["list_active_resources"] += 1
        return self.inner.list_active_resources(limit)
