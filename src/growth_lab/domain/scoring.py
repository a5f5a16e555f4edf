"""Domain scoring rules for ranking topics against a user profile.

Usage example:
    from growth_lab.domain.profiles import Topic, UserProfile
    from growth_lab.domain.scoring import TopicRecommender

    profile = UserProfile(role="partner", interest_areas=("marketing",))
    topics = [Topic(id="t1", name="Brand building", interest_area_keywords=("marketing",))]

    ranked = TopicRecommender().rank(profile, topics, limit=5)
    assert ranked[0].score >= 4
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .profiles import ScoredTopic, Topic, UserProfile

DEFAULT_INTEREST_WEIGHT = 4  # per matching interest, uncapped
DEFAULT_ROLE_WEIGHT = 3
DEFAULT_SENIORITY_WEIGHT = 2
DEFAULT_FIRM_SIZE_WEIGHT = 2
DEFAULT_FIRM_TYPE_WEIGHT = 2
DEFAULT_SCOPE_WEIGHT = 1
DEFAULT_GROWTH_MATURITY_WEIGHT = 2
DEFAULT_DATA_MATURITY_WEIGHT = 1


@dataclass(frozen=True)
class RecommenderWeights:
    """Points awarded per matching signal."""

    interest: int = DEFAULT_INTEREST_WEIGHT
    role: int = DEFAULT_ROLE_WEIGHT
    seniority: int = DEFAULT_SENIORITY_WEIGHT
    firm_size: int = DEFAULT_FIRM_SIZE_WEIGHT
    firm_type: int = DEFAULT_FIRM_TYPE_WEIGHT
    scope: int = DEFAULT_SCOPE_WEIGHT
    growth_maturity: int = DEFAULT_GROWTH_MATURITY_WEIGHT
    data_maturity: int = DEFAULT_DATA_MATURITY_WEIGHT


DEFAULT_WEIGHTS = RecommenderWeights()


@dataclass(frozen=True)
class TopicScoreBreakdown:
    """Per-signal contributions for one profile/topic pair."""

    interest_score: int
    matched_interests: tuple[str, ...]
    role_score: int
    seniority_score: int
    firm_size_score: int
    firm_type_score: int
    scope_score: int
    growth_maturity_score: int
    data_maturity_score: int

    @property
    def total(self) -> int:
        return (
            self.interest_score
            + self.role_score
            + self.seniority_score
            + self.firm_size_score
            + self.firm_type_score
            + self.scope_score
            + self.growth_maturity_score
            + self.data_maturity_score
        )

    def as_dict(self) -> dict[str, int]:
        """Signal name to contribution, in weight order."""
        return {
            "interest": self.interest_score,
            "role": self.role_score,
            "seniority": self.seniority_score,
            "firm_size": self.firm_size_score,
            "firm_type": self.firm_type_score,
            "growth_maturity": self.growth_maturity_score,
            "data_maturity": self.data_maturity_score,
            "scope": self.scope_score,
        }


def matching_interests(interests: Iterable[str], keywords: Iterable[str]) -> tuple[str, ...]:
    """Return the interests that overlap any keyword (substring either way, any case)."""
    lowered_keywords = [k.strip().lower() for k in keywords if k.strip()]
    matched: list[str] = []
    for interest in interests:
        needle = interest.strip().lower()
        if not needle:
            continue
        if any(needle in keyword or keyword in needle for keyword in lowered_keywords):
            matched.append(interest)
    return tuple(matched)


def score_membership(value: str | None, recommended: frozenset[str], weight: int) -> int:
    """Award ``weight`` when a set value is one of the recommended values."""
    if value is None:
        return 0
    return weight if value in recommended else 0


def score_range(level: int, minimum: int, maximum: int, weight: int) -> int:
    """Award ``weight`` when ``level`` falls in the inclusive range.

    An inverted range (``minimum > maximum``) never matches.
    """
    return weight if minimum <= level <= maximum else 0


def calculate_breakdown(
    profile: UserProfile,
    topic: Topic,
    weights: RecommenderWeights = DEFAULT_WEIGHTS,
) -> TopicScoreBreakdown:
    """Calculate every signal contribution for a profile/topic pair."""
    matched = matching_interests(profile.interest_areas, topic.interest_area_keywords)
    return TopicScoreBreakdown(
        interest_score=len(matched) * weights.interest,
        matched_interests=matched,
        role_score=score_membership(profile.role, topic.recommended_roles, weights.role),
        seniority_score=score_membership(
            profile.seniority, topic.recommended_seniority, weights.seniority
        ),
        firm_size_score=score_membership(
            profile.firm_size, topic.recommended_firm_sizes, weights.firm_size
        ),
        firm_type_score=score_membership(
            profile.firm_type, topic.recommended_firm_types, weights.firm_type
        ),
        scope_score=score_membership(
            profile.scope, topic.national_or_international, weights.scope
        ),
        growth_maturity_score=score_range(
            profile.growth_maturity_level,
            topic.min_growth_maturity,
            topic.max_growth_maturity,
            weights.growth_maturity,
        ),
        data_maturity_score=score_range(
            profile.data_maturity_level,
            topic.min_data_maturity,
            topic.max_data_maturity,
            weights.data_maturity,
        ),
    )


class TopicRecommender:
    """Stateless scorer and ranker for recommendation topics.

    Holds only its weights, so one instance can serve concurrent requests.
    """

    def __init__(self, weights: RecommenderWeights = DEFAULT_WEIGHTS) -> None:
        self.weights = weights

    def score(self, profile: UserProfile, topic: Topic) -> int:
        """Additive relevance score for one topic."""
        return calculate_breakdown(profile, topic, self.weights).total

    def explain(self, profile: UserProfile, topic: Topic) -> TopicScoreBreakdown:
        """Per-signal breakdown behind :meth:`score`."""
        return calculate_breakdown(profile, topic, self.weights)

    def rank(
        self,
        profile: UserProfile,
        topics: Sequence[Topic],
        limit: int | None = None,
    ) -> tuple[ScoredTopic, ...]:
        """Rank active topics by score, highest first.

        Ties keep their input order. ``limit`` truncates the result when given.
        """
        scored = [
            ScoredTopic(topic=topic, score=self.score(profile, topic))
            for topic in topics
            if topic.active
        ]
        # sorted() is stable, including with reverse=True
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        if limit is not None:
            ranked = ranked[: max(limit, 0)]
        return tuple(ranked)
