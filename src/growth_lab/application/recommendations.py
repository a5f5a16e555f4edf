"""Recommendations: rank topics for a user and attach the content linked to them.

Usage example:
    >>> from growth_lab.application.recommendations import recommend_for_user
    >>> from growth_lab.domain.scoring import TopicRecommender
    >>> store = ...  # Injected ContentStore from the CLI/composition root
    >>> result = recommend_for_user("user-123", store=store, recommender=TopicRecommender())
    >>> [scored.name for scored in result.topics]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..domain.content import (
    ModelSummary,
    ResearchStudySummary,
    ResourceSummary,
    VendorSummary,
    unique_in_order,
)
from ..domain.profiles import ScoredTopic
from ..domain.scoring import TopicRecommender
from ..exceptions import DependencyMissingError, UserProfileNotFoundError
from ..observability import get_logger
from ..protocols import ContentStore

DEFAULT_TOPIC_LIMIT = 5
DEFAULT_FALLBACK_LIMIT = 3


@dataclass(frozen=True)
class Recommendations:
    """Ranked topics plus the content to surface alongside them."""

    topics: tuple[ScoredTopic, ...]
    models: tuple[ModelSummary, ...]
    resources: tuple[ResourceSummary, ...]
    vendors: tuple[VendorSummary, ...] = ()
    research_studies: tuple[ResearchStudySummary, ...] = ()
    used_fallback: bool = False

    def as_dict(self) -> dict[str, object]:
        """JSON-ready representation for API responses and CLI output."""
        return {
            "topics": [
                {
                    "id": scored.id,
                    "name": scored.name,
                    "description": scored.topic.description,
                    "score": scored.score,
                }
                for scored in self.topics
            ],
            "models": [
                {
                    "id": m.id,
                    "name": m.name,
                    "slug": m.slug,
                    "emoji": m.emoji,
                    "short_description": m.short_description,
                }
                for m in self.models
            ],
            "resources": [
                {
                    "id": r.id,
                    "title": r.title,
                    "type": r.type,
                    "url": r.url,
                    "description": r.description,
                    "author": r.author,
                    "estimated_time": r.estimated_time,
                    "emoji": r.emoji,
                }
                for r in self.resources
            ],
            "vendors": [
                {"id": v.id, "name": v.name, "website": v.website} for v in self.vendors
            ],
            "research_studies": [
                {"id": s.id, "title": s.title, "description": s.description}
                for s in self.research_studies
            ],
            "used_fallback": self.used_fallback,
        }


@dataclass(frozen=True)
class _LinkedIds:
    model_ids: tuple[str, ...]
    resource_ids: tuple[str, ...]
    vendor_ids: tuple[str, ...]
    research_study_ids: tuple[str, ...]


def _collect_linked_ids(topics: Sequence[ScoredTopic], store: ContentStore) -> _LinkedIds:
    model_ids: list[str] = []
    resource_ids: list[str] = []
    vendor_ids: list[str] = []
    study_ids: list[str] = []
    for scored in topics:
        links = store.get_topic_links(scored.id)
        model_ids.extend(links.model_ids)
        resource_ids.extend(links.resource_ids)
        vendor_ids.extend(links.vendor_ids)
        study_ids.extend(links.research_study_ids)

    category_keys = unique_in_order(
        [scored.topic.category_key for scored in topics if scored.topic.category_key]
    )
    resource_ids.extend(store.resources_for_categories(category_keys))

    return _LinkedIds(
        model_ids=unique_in_order(model_ids),
        resource_ids=unique_in_order(resource_ids),
        vendor_ids=unique_in_order(vendor_ids),
        research_study_ids=unique_in_order(study_ids),
    )


def recommend_for_user(
    user_id: str,
    *,
    store: ContentStore | None = None,
    recommender: TopicRecommender | None = None,
    limit: int = DEFAULT_TOPIC_LIMIT,
    fallback_limit: int = DEFAULT_FALLBACK_LIMIT,
) -> Recommendations:
    """Rank topics for a user and resolve the content linked to the top topics.

    Args:
        user_id: Profile owner.
        store: Content store (required; inject at entry point).
        recommender: Topic scorer; a default-weighted one is used when omitted.
        limit: Maximum number of topics to keep.
        fallback_limit: Number of generic models/resources to show when the top
            topics link to no models and no resources.

    Returns:
        Ranked topics and the active content linked to them.
    """
    if store is None:
        raise DependencyMissingError("ContentStore", reason="Inject it at the entry point.")
    recommender = recommender or TopicRecommender()
    logger = get_logger("growth_lab.recommendations")

    profile = store.get_profile(user_id)
    if profile is None:
        raise UserProfileNotFoundError(user_id)

    topics = recommender.rank(profile, store.list_topics(), limit=limit)
    linked = _collect_linked_ids(topics, store)

    models = tuple(store.get_models(linked.model_ids))
    resources = tuple(store.get_resources(linked.resource_ids))
    vendors = tuple(store.get_vendors(linked.vendor_ids))
    studies = tuple(store.get_research_studies(linked.research_study_ids))

    used_fallback = not models and not resources
    if used_fallback:
        models = tuple(store.list_active_models(fallback_limit))
        resources = tuple(store.list_active_resources(fallback_limit))
        logger.info("No linked content for %s; using %s fallback items", user_id, fallback_limit)

    logger.info(
        "Recommendations for %s: %s topics, %s models, %s resources, %s vendors, %s studies",
        user_id,
        len(topics),
        len(models),
        len(resources),
        len(vendors),
        len(studies),
    )
    return Recommendations(
        topics=topics,
        models=models,
        resources=resources,
        vendors=vendors,
        research_studies=studies,
        used_fallback=used_fallback,
    )
