"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces the recommendation flow depends on,
enabling isolated unit testing with in-memory implementations.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from .domain.content import (
    ModelSummary,
    ResearchStudySummary,
    ResourceSummary,
    TopicLinks,
    VendorSummary,
)
from .domain.profiles import Topic, UserProfile


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading catalogues and writing outputs."""

    def exists(self, path: Path) -> bool:
        """Return True when the path exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        """Write a JSON object, creating parent directories."""
        ...


@runtime_checkable
class ContentStore(Protocol):
    """Read-only source of profiles, topics and the content linked to topics.

    Content lookups return active items only, in catalogue order.
    """

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user, or None when the user has none."""
        ...

    def list_topics(self) -> Sequence[Topic]:
        """Return every topic in admin-defined order."""
        ...

    def get_topic_links(self, topic_id: str) -> TopicLinks:
        """Return the content linked to a topic (empty links when none)."""
        ...

    def get_models(self, model_ids: Sequence[str]) -> Sequence[ModelSummary]:
        """Resolve model ids to active models."""
        ...

    def get_resources(self, resource_ids: Sequence[str]) -> Sequence[ResourceSummary]:
        """Resolve resource ids to active resources."""
        ...

    def get_vendors(self, vendor_ids: Sequence[str]) -> Sequence[VendorSummary]:
        """Resolve vendor ids to active vendors."""
        ...

    def get_research_studies(self, study_ids: Sequence[str]) -> Sequence[ResearchStudySummary]:
        """Resolve study ids to studies that are currently open."""
        ...

    def resources_for_categories(self, category_keys: Sequence[str]) -> Sequence[str]:
        """Return ids of resources tagged with any of the topic category keys."""
        ...

    def list_active_models(self, limit: int) -> Sequence[ModelSummary]:
        """Return up to ``limit`` active models."""
        ...

    def list_active_resources(self, limit: int) -> Sequence[ResourceSummary]:
        """Return up to ``limit`` active resources."""
        ...
