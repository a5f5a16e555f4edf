"""Topic matching for the admin user-detail view.

Admins see every active topic ranked for one user together with the signals
that produced each score.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.profiles import Topic
from ..domain.scoring import TopicRecommender, TopicScoreBreakdown
from ..exceptions import DependencyMissingError, TopicNotFoundError, UserProfileNotFoundError
from ..protocols import ContentStore


@dataclass(frozen=True)
class TopicMatch:
    """One topic, its score and the breakdown behind it."""

    topic: Topic
    breakdown: TopicScoreBreakdown

    @property
    def score(self) -> int:
        return self.breakdown.total

    @property
    def matched_signals(self) -> tuple[str, ...]:
        return tuple(name for name, points in self.breakdown.as_dict().items() if points > 0)


def _require_store(store: ContentStore | None) -> ContentStore:
    if store is None:
        raise DependencyMissingError("ContentStore", reason="Inject it at the entry point.")
    return store


def match_topics_for_user(
    user_id: str,
    *,
    store: ContentStore | None = None,
    recommender: TopicRecommender | None = None,
    limit: int | None = None,
) -> tuple[TopicMatch, ...]:
    """Rank active topics for a user, each with its score breakdown."""
    store = _require_store(store)
    recommender = recommender or TopicRecommender()
    profile = store.get_profile(user_id)
    if profile is None:
        raise UserProfileNotFoundError(user_id)

    ranked = recommender.rank(profile, store.list_topics(), limit=limit)
    return tuple(
        TopicMatch(topic=scored.topic, breakdown=recommender.explain(profile, scored.topic))
        for scored in ranked
    )


def explain_topic_for_user(
    user_id: str,
    topic_id: str,
    *,
    store: ContentStore | None = None,
    recommender: TopicRecommender | None = None,
) -> TopicMatch:
    """Explain one topic's score for a user, whether or not the topic is active."""
    store = _require_store(store)
    recommender = recommender or TopicRecommender()
    profile = store.get_profile(user_id)
    if profile is None:
        raise UserProfileNotFoundError(user_id)

    for topic in store.list_topics():
        if topic.id == topic_id:
            return TopicMatch(topic=topic, breakdown=recommender.explain(profile, topic))
    raise TopicNotFoundError(topic_id)
