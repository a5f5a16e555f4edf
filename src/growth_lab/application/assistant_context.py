"""Recommendation context for the navigator chat assistant.

The assistant's system prompt gets a short description of who the user is and
which topics (with their linked models and resource categories) suit them best.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.profiles import UserProfile
from ..domain.scoring import TopicRecommender
from ..exceptions import DependencyMissingError
from ..observability import get_logger
from ..protocols import ContentStore
from .recommendations import DEFAULT_TOPIC_LIMIT


@dataclass(frozen=True)
class TopicContext:
    name: str
    description: str | None
    score: int
    linked_models: tuple[str, ...]
    resource_categories: tuple[str, ...]


@dataclass(frozen=True)
class AssistantContext:
    profile: UserProfile
    top_topics: tuple[TopicContext, ...]


def build_assistant_context(
    user_id: str,
    *,
    store: ContentStore | None = None,
    recommender: TopicRecommender | None = None,
    limit: int = DEFAULT_TOPIC_LIMIT,
) -> AssistantContext | None:
    """Collect the profile and top topics for a user.

    Returns None when the user has no profile, so the assistant can answer
    without personalisation.
    """
    if store is None:
        raise DependencyMissingError("ContentStore", reason="Inject it at the entry point.")
    recommender = recommender or TopicRecommender()

    profile = store.get_profile(user_id)
    if profile is None:
        get_logger("growth_lab.assistant_context").info(
            "No profile for %s; assistant context skipped", user_id
        )
        return None

    top_topics: list[TopicContext] = []
    for scored in recommender.rank(profile, store.list_topics(), limit=limit):
        links = store.get_topic_links(scored.id)
        models = store.get_models(links.model_ids)
        top_topics.append(
            TopicContext(
                name=scored.name,
                description=scored.topic.description,
                score=scored.score,
                linked_models=tuple(model.name for model in models),
                resource_categories=links.resource_category_names,
            )
        )
    return AssistantContext(profile=profile, top_topics=tuple(top_topics))


def _label(value: str) -> str:
    return value.replace("_", " ")


def _profile_lines(profile: UserProfile) -> list[str]:
    lines: list[str] = []
    if profile.role:
        lines.append(f"- Role: {_label(profile.role)}")
    if profile.seniority:
        lines.append(f"- Seniority: {_label(profile.seniority)}")
    if profile.firm_type:
        lines.append(f"- Firm type: {_label(profile.firm_type)}")
    if profile.firm_size:
        lines.append(f"- Firm size: {_label(profile.firm_size)}")
    if profile.interest_areas:
        lines.append(f"- Interests: {', '.join(profile.interest_areas)}")
    lines.append(f"- Scope: {profile.scope}")
    lines.append(f"- Growth maturity: {profile.growth_maturity_level}/5")
    lines.append(f"- Data maturity: {profile.data_maturity_level}/5")
    return lines


def render_assistant_context(context: AssistantContext) -> str:
    """Render the context as a plain-text block for the assistant's system prompt."""
    lines = ["USER PROFILE:", *_profile_lines(context.profile), ""]
    if not context.top_topics:
        lines.append("RECOMMENDED TOPICS: none")
        return "\n".join(lines)

    lines.append("RECOMMENDED TOPICS (most relevant first):")
    for position, topic in enumerate(context.top_topics, start=1):
        heading = f"{position}. {topic.name}"
        if topic.description:
            heading = f"{heading}: {topic.description}"
        lines.append(heading)
        if topic.linked_models:
            lines.append(f"   Models: {', '.join(topic.linked_models)}")
        if topic.resource_categories:
            lines.append(f"   Resource categories: {', '.join(topic.resource_categories)}")
    return "\n".join(lines)
