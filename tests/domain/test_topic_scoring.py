"""Tests for topic scoring and ranking."""

from __future__ import annotations

from dataclasses import asdict

import pytest

from growth_lab.domain.profiles import Topic, UserProfile
from growth_lab.domain.scoring import (
    RecommenderWeights,
    TopicRecommender,
    calculate_breakdown,
    matching_interests,
    score_membership,
    score_range,
)
from tests.support.catalog import make_topic

PARTNER = UserProfile(
    role="partner",
    seniority="senior",
    interest_areas=("marketing",),
    growth_maturity_level=3,
    data_maturity_level=2,
    international_scope=False,
)

TOPIC_A = make_topic(
    "topic-a",
    interest_area_keywords=["marketing", "branding"],
    recommended_roles=["partner"],
    recommended_seniority=["senior"],
    national_or_international=["national"],
)
TOPIC_B = make_topic(
    "topic-b",
    interest_area_keywords=["litigation"],
    recommended_roles=["associate"],
    national_or_international=["international"],
)


@pytest.fixture
def recommender() -> TopicRecommender:
    return TopicRecommender()


class TestMatchingInterests:
    """Tests for interest/keyword overlap."""

    def test_exact_match_any_case(self) -> None:
        assert matching_interests(["Marketing"], ["MARKETING"]) == ("Marketing",)

    def test_interest_contained_in_keyword(self) -> None:
        assert matching_interests(["brand"], ["branding"]) == ("brand",)

    def test_keyword_contained_in_interest(self) -> None:
        assert matching_interests(["client development"], ["client"]) == ("client development",)

    def test_each_interest_counts_once(self) -> None:
        # "market" overlaps both keywords but is still one matching interest
        assert matching_interests(["market"], ["marketing", "market research"]) == ("market",)

    def test_blank_values_never_match(self) -> None:
        assert matching_interests(["", "  "], ["marketing"]) == ()
        assert matching_interests(["marketing"], ["", " "]) == ()

    def test_no_overlap(self) -> None:
        assert matching_interests(["tax"], ["litigation"]) == ()


class TestSignalHelpers:
    """Tests for membership and range signals."""

    def test_membership_requires_value(self) -> None:
        assert score_membership(None, frozenset({"partner"}), 3) == 0

    def test_membership_match(self) -> None:
        assert score_membership("partner", frozenset({"partner"}), 3) == 3

    def test_range_is_inclusive(self) -> None:
        assert score_range(1, 1, 2, 2) == 2
        assert score_range(2, 1, 2, 2) == 2
        assert score_range(3, 1, 2, 2) == 0

    def test_inverted_range_never_matches(self) -> None:
        assert score_range(3, 4, 2, 2) == 0
        assert score_range(4, 4, 2, 2) == 0


class TestScore:
    """Tests for the additive topic score."""

    def test_fully_matching_topic(self, recommender: TopicRecommender) -> None:
        # interest 4 + role 3 + seniority 2 + growth 2 + data 1 + scope 1
        assert recommender.score(PARTNER, TOPIC_A) == 13

    def test_only_maturity_ranges_match(self, recommender: TopicRecommender) -> None:
        assert recommender.score(PARTNER, TOPIC_B) == 3

    def test_cold_profile_scores_scope_and_ranges(self, recommender: TopicRecommender) -> None:
        topic = make_topic(
            "cold",
            min_growth_maturity=1,
            max_growth_maturity=2,
            min_data_maturity=1,
            max_data_maturity=2,
            national_or_international=["national"],
        )
        assert recommender.score(UserProfile(), topic) == 4

    def test_interest_weight_is_per_matching_interest(
        self, recommender: TopicRecommender
    ) -> None:
        profile = UserProfile(interest_areas=("marketing", "brand", "pricing"))
        topic = make_topic(
            "multi",
            interest_area_keywords=["marketing", "branding", "pricing strategy"],
            max_growth_maturity=0,
            max_data_maturity=0,
        )
        assert recommender.score(profile, topic) == 12

    def test_firm_attributes(self, recommender: TopicRecommender) -> None:
        profile = UserProfile(firm_size="large", firm_type="in_house")
        topic = make_topic(
            "firm",
            recommended_firm_sizes=["large"],
            recommended_firm_types=["in_house"],
        )
        assert recommender.score(profile, topic) == 2 + 2 + 3

    def test_international_scope(self, recommender: TopicRecommender) -> None:
        profile = UserProfile(international_scope=True)
        national = make_topic("n", national_or_international=["national"])
        international = make_topic("i", national_or_international=["international"])
        assert recommender.score(profile, international) - recommender.score(profile, national) == 1

    def test_score_does_not_mutate_inputs(self, recommender: TopicRecommender) -> None:
        profile_before = asdict(PARTNER)
        topic_before = asdict(TOPIC_A)

        recommender.score(PARTNER, TOPIC_A)

        assert asdict(PARTNER) == profile_before
        assert asdict(TOPIC_A) == topic_before

    def test_rank_leaves_topic_list_in_place(self, recommender: TopicRecommender) -> None:
        topics = [TOPIC_B, TOPIC_A]

        recommender.rank(PARTNER, topics)

        assert topics == [TOPIC_B, TOPIC_A]

    def test_custom_weights(self) -> None:
        weights = RecommenderWeights(interest=10, role=5, seniority=3)
        assert TopicRecommender(weights).score(PARTNER, TOPIC_A) == 10 + 5 + 3 + 2 + 1 + 1


class TestBreakdown:
    """Tests for per-signal explanations."""

    def test_breakdown_total_matches_score(self, recommender: TopicRecommender) -> None:
        breakdown = recommender.explain(PARTNER, TOPIC_A)
        assert breakdown.total == recommender.score(PARTNER, TOPIC_A)
        assert breakdown.matched_interests == ("marketing",)
        assert breakdown.as_dict() == {
            "interest": 4,
            "role": 3,
            "seniority": 2,
            "firm_size": 0,
            "firm_type": 0,
            "growth_maturity": 2,
            "data_maturity": 1,
            "scope": 1,
        }

    def test_breakdown_is_never_negative(self) -> None:
        breakdown = calculate_breakdown(UserProfile(), make_topic("x", max_growth_maturity=0))
        assert all(points >= 0 for points in breakdown.as_dict().values())


class TestRank:
    """Tests for ranking."""

    def test_orders_by_score(self, recommender: TopicRecommender) -> None:
        ranked = recommender.rank(PARTNER, [TOPIC_B, TOPIC_A])
        assert [(s.id, s.score) for s in ranked] == [("topic-a", 13), ("topic-b", 3)]

    def test_excludes_inactive_topics(self, recommender: TopicRecommender) -> None:
        topic_c = make_topic(
            "topic-c",
            active=False,
            interest_area_keywords=["marketing", "branding"],
            recommended_roles=["partner"],
            recommended_seniority=["senior"],
            national_or_international=["national"],
        )
        ranked = recommender.rank(PARTNER, [TOPIC_A, topic_c])
        assert [s.id for s in ranked] == ["topic-a"]

    def test_inactive_topic_excluded_even_when_alone(self, recommender: TopicRecommender) -> None:
        assert recommender.rank(PARTNER, [make_topic("off", active=False)]) == ()

    def test_ties_keep_input_order(self, recommender: TopicRecommender) -> None:
        profile = UserProfile(role="partner")
        x = make_topic("x", recommended_roles=["partner"], max_data_maturity=0)
        y = make_topic("y", recommended_roles=["partner"], max_data_maturity=0)
        ranked = recommender.rank(profile, [x, y])
        assert [(s.id, s.score) for s in ranked] == [("x", 5), ("y", 5)]
        reversed_ranked = recommender.rank(profile, [y, x])
        assert [s.id for s in reversed_ranked] == ["y", "x"]

    def test_ties_behind_higher_scores_keep_input_order(
        self, recommender: TopicRecommender
    ) -> None:
        topics = [make_topic(name) for name in ("t1", "t2", "t3")]
        topics.insert(1, TOPIC_A)
        ranked = recommender.rank(PARTNER, topics)
        assert [s.id for s in ranked] == ["topic-a", "t1", "t2", "t3"]

    def test_limit_truncates(self, recommender: TopicRecommender) -> None:
        topics = [make_topic(f"t{i}") for i in range(8)]
        assert len(recommender.rank(PARTNER, topics, limit=5)) == 5
        assert [s.id for s in recommender.rank(PARTNER, topics, limit=2)] == ["t0", "t1"]

    def test_limit_larger_than_catalogue(self, recommender: TopicRecommender) -> None:
        assert len(recommender.rank(PARTNER, [TOPIC_A, TOPIC_B], limit=10)) == 2

    def test_zero_limit_returns_nothing(self, recommender: TopicRecommender) -> None:
        assert recommender.rank(PARTNER, [TOPIC_A], limit=0) == ()

    def test_empty_catalogue(self, recommender: TopicRecommender) -> None:
        assert recommender.rank(PARTNER, []) == ()

    def test_rank_is_deterministic(self, recommender: TopicRecommender) -> None:
        topics = [TOPIC_B, TOPIC_A, make_topic("t1"), make_topic("t2")]
        assert recommender.rank(PARTNER, topics) == recommender.rank(PARTNER, topics)

    def test_cold_profile_ranks_without_errors(self, recommender: TopicRecommender) -> None:
        low = make_topic(
            "low",
            max_growth_maturity=2,
            max_data_maturity=2,
            national_or_international=["national"],
        )
        high = make_topic("high", min_growth_maturity=4, min_data_maturity=4)
        ranked = recommender.rank(UserProfile(), [high, low])
        assert [(s.id, s.score) for s in ranked] == [("low", 4), ("high", 0)]


@pytest.mark.parametrize(
    "keywords",
    [
        ["litigation"],
        ["litigation", "marketing"],
        ["litigation", "marketing", "brand"],
    ],
)
def test_adding_keywords_never_lowers_score(keywords: list[str]) -> None:
    profile = UserProfile(interest_areas=("marketing", "brand"))
    recommender = TopicRecommender()
    base = recommender.score(profile, make_topic("k", interest_area_keywords=keywords))
    extended = recommender.score(
        profile, make_topic("k", interest_area_keywords=[*keywords, "branding"])
    )
    assert extended >= base


def test_topic_defaults_cover_full_maturity_range() -> None:
    topic = Topic(id="t", name="T")
    assert (topic.min_growth_maturity, topic.max_growth_maturity) == (1, 5)
    assert (topic.min_data_maturity, topic.max_data_maturity) == (1, 5)
    assert topic.active is True
