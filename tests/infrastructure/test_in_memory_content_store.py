"""Tests for the catalogue-backed content store."""

from __future__ import annotations

from growth_lab.domain.content import TopicLinks
from growth_lab.infrastructure import InMemoryContentStore
from growth_lab.protocols import ContentStore


def test_is_a_content_store(sample_store: InMemoryContentStore) -> None:
    assert isinstance(sample_store, ContentStore)


def test_get_profile(sample_store: InMemoryContentStore) -> None:
    profile = sample_store.get_profile("user-partner")

    assert profile is not None
    assert profile.firm_size == "large"
    assert sample_store.get_profile("user-missing") is None


def test_list_topics_includes_inactive(sample_store: InMemoryContentStore) -> None:
    assert [t.id for t in sample_store.list_topics()][-1] == "topic-archived"


def test_missing_topic_links_are_empty(sample_store: InMemoryContentStore) -> None:
    assert sample_store.get_topic_links("topic-basics") == TopicLinks(topic_id="topic-basics")


def test_getters_keep_catalogue_order_and_skip_inactive(
    sample_store: InMemoryContentStore,
) -> None:
    models = sample_store.get_models(["model-old", "model-data-audit", "model-value-prop"])
    vendors = sample_store.get_vendors(["vendor-old", "vendor-crm"])
    studies = sample_store.get_research_studies(["study-closed", "study-bd"])

    assert [m.id for m in models] == ["model-value-prop", "model-data-audit"]
    assert [v.id for v in vendors] == ["vendor-crm"]
    assert [s.id for s in studies] == ["study-bd"]


def test_unknown_ids_are_ignored(sample_store: InMemoryContentStore) -> None:
    assert sample_store.get_resources(["res-missing"]) == ()


def test_resources_for_categories(sample_store: InMemoryContentStore) -> None:
    assert sample_store.resources_for_categories(["data", "brand"]) == (
        "res-brand-guide",
        "res-crm-guide",
    )
    assert sample_store.resources_for_categories([]) == ()


def test_list_active_content_with_limit(sample_store: InMemoryContentStore) -> None:
    assert [m.id for m in sample_store.list_active_models(10)] == [
        "model-value-prop",
        "model-key-account",
        "model-data-audit",
    ]
    assert [r.id for r in sample_store.list_active_resources(1)] == ["res-brand-guide"]
    assert sample_store.list_active_models(0) == ()
