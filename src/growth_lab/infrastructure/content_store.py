"""Content store backed by an in-memory catalogue snapshot.

Usage example:
    from pathlib import Path

    from growth_lab.application.catalog import load_content_catalog
    from growth_lab.infrastructure import InMemoryContentStore, LocalFileSystem

    catalog = load_content_catalog(
        path=Path("data/reference/sample_catalog.json"), fs=LocalFileSystem()
    )
    store = InMemoryContentStore(catalog)
    profile = store.get_profile("user-partner")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing_extensions import override

from ..domain.content import (
    ContentCatalog,
    ModelSummary,
    ResearchStudySummary,
    ResourceSummary,
    TopicLinks,
    VendorSummary,
)
from ..domain.profiles import Topic, UserProfile
from ..protocols import ContentStore


class InMemoryContentStore(ContentStore):
    """Serve lookups from a validated :class:`ContentCatalog`."""

    def __init__(self, catalog: ContentCatalog) -> None:
        self._catalog = catalog

    @override
    def get_profile(self, user_id: str) -> UserProfile | None:
        return self._catalog.profiles.get(user_id)

    @override
    def list_topics(self) -> Sequence[Topic]:
        return self._catalog.topics

    @override
    def get_topic_links(self, topic_id: str) -> TopicLinks:
        return self._catalog.topic_links.get(topic_id, TopicLinks(topic_id=topic_id))

    @override
    def get_models(self, model_ids: Sequence[str]) -> Sequence[ModelSummary]:
        wanted = set(model_ids)
        return tuple(m for m in self._catalog.models if m.id in wanted and m.active)

    @override
    def get_resources(self, resource_ids: Sequence[str]) -> Sequence[ResourceSummary]:
        wanted = set(resource_ids)
        return tuple(r for r in self._catalog.resources if r.id in wanted and r.active)

    @override
    def get_vendors(self, vendor_ids: Sequence[str]) -> Sequence[VendorSummary]:
        wanted = set(vendor_ids)
        return tuple(v for v in self._catalog.vendors if v.id in wanted and v.active)

    @override
    def get_research_studies(self, study_ids: Sequence[str]) -> Sequence[ResearchStudySummary]:
        wanted = set(study_ids)
        return tuple(s for s in self._catalog.research_studies if s.id in wanted and s.active)

    @override
    def resources_for_categories(self, category_keys: Sequence[str]) -> Sequence[str]:
        keys = frozenset(category_keys)
        if not keys:
            return ()
        return tuple(r.id for r in self._catalog.resources if r.topic_category_keys & keys)

    @override
    def list_active_models(self, limit: int) -> Sequence[ModelSummary]:
        return tuple(m for m in self._catalog.models if m.active)[: max(limit, 0)]

    @override
    def list_active_resources(self, limit: int) -> Sequence[ResourceSummary]:
        return tuple(r for r in self._catalog.resources if r.active)[: max(limit, 0)]
