"""Loading and strict validation for content catalogue snapshots.

The catalogue mirrors the hosted database tables the web client reads
(``profiles``, ``topics``, ``models``, ``resources``, ``vendors``,
``research_studies`` and the topic link tables). Records are validated once
here and handed to the rest of the package as frozen domain objects.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..domain.content import (
    ContentCatalog,
    ModelSummary,
    ResearchStudySummary,
    ResourceSummary,
    TopicLinks,
    VendorSummary,
    unique_in_order,
)
from ..domain.profiles import (
    MAX_MATURITY_LEVEL,
    MIN_MATURITY_LEVEL,
    FirmSize,
    FirmType,
    Role,
    Scope,
    Seniority,
    Topic,
    UserProfile,
)
from ..exceptions import CatalogFileNotFoundError, CatalogValidationError
from ..observability import get_logger
from ..protocols import FileSystem

_SCHEMA_VERSION = 1


def _clean_tags(values: tuple[str, ...] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    return unique_in_order([v.strip() for v in values if v.strip()])


def _validate_level(value: int | None) -> int | None:
    if value is None:
        return None
    if value < MIN_MATURITY_LEVEL or value > MAX_MATURITY_LEVEL:
        raise ValueError
    return value


class _ProfileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_id: str
    seniority: Seniority | None = None
    role: Role | None = Field(default=None, alias="role_title")
    firm_size: FirmSize | None = None
    firm_type: FirmType | None = None
    interest_areas: tuple[str, ...] | None = None
    international_scope: bool | None = None
    growth_maturity_level: int | None = None
    data_maturity_level: int | None = None

    @field_validator("user_id")
    @classmethod
    def _validate_user_id(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("growth_maturity_level", "data_maturity_level")
    @classmethod
    def _validate_maturity(cls, value: int | None) -> int | None:
        return _validate_level(value)


class _TopicModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str | None = None
    interest_area_keywords: tuple[str, ...] | None = None
    recommended_seniority: tuple[Seniority, ...] | None = None
    recommended_roles: tuple[Role, ...] | None = None
    recommended_firm_sizes: tuple[FirmSize, ...] | None = None
    recommended_firm_types: tuple[FirmType, ...] | None = None
    national_or_international: tuple[Scope, ...] | None = None
    min_growth_maturity: int | None = None
    max_growth_maturity: int | None = None
    min_data_maturity: int | None = None
    max_data_maturity: int | None = None
    active: bool | None = None
    category_key: str | None = None

    @field_validator("id", "name")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator(
        "min_growth_maturity",
        "max_growth_maturity",
        "min_data_maturity",
        "max_data_maturity",
    )
    @classmethod
    def _validate_maturity(cls, value: int | None) -> int | None:
        return _validate_level(value)

    @field_validator("category_key")
    @classmethod
    def _validate_category_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class _ModelSummaryModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    slug: str | None = None
    emoji: str | None = None
    short_description: str | None = None
    status: str = "active"


class _ResourceModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    type: str
    url: str | None = None
    description: str | None = None
    author: str | None = None
    estimated_time: int | None = None
    emoji: str | None = None
    status: str = "active"
    topic_category_keys: tuple[str, ...] | None = None

    @field_validator("estimated_time")
    @classmethod
    def _validate_estimated_time(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError
        return value


class _VendorModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    website: str | None = None
    description: str | None = None
    status: str = "active"


class _ResearchStudyModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    title: str
    description: str | None = None
    status: str = "draft"


class _TopicLinksModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    topic_id: str
    model_ids: tuple[str, ...] = ()
    resource_ids: tuple[str, ...] = ()
    vendor_ids: tuple[str, ...] = ()
    research_study_ids: tuple[str, ...] = ()
    resource_category_names: tuple[str, ...] = ()


def _duplicates(values: Iterable[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def _unknown(references: Iterable[str], known: set[str]) -> list[str]:
    return sorted(set(references) - known)


class _ContentCatalogModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    profiles: tuple[_ProfileModel, ...] = ()
    topics: tuple[_TopicModel, ...] = ()
    models: tuple[_ModelSummaryModel, ...] = ()
    resources: tuple[_ResourceModel, ...] = ()
    vendors: tuple[_VendorModel, ...] = ()
    research_studies: tuple[_ResearchStudyModel, ...] = ()
    topic_links: tuple[_TopicLinksModel, ...] = ()

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_identifiers(self) -> _ContentCatalogModel:
        id_groups = {
            "profiles.user_id": [p.user_id for p in self.profiles],
            "topics.id": [t.id for t in self.topics],
            "models.id": [m.id for m in self.models],
            "resources.id": [r.id for r in self.resources],
            "vendors.id": [v.id for v in self.vendors],
            "research_studies.id": [s.id for s in self.research_studies],
            "topic_links.topic_id": [link.topic_id for link in self.topic_links],
        }
        for label, values in id_groups.items():
            duplicates = _duplicates(values)
            if duplicates:
                raise ValueError(f"duplicate {label}: {', '.join(duplicates)}")

        references = {
            "topics": (
                [link.topic_id for link in self.topic_links],
                set(id_groups["topics.id"]),
            ),
            "models": (
                [i for link in self.topic_links for i in link.model_ids],
                set(id_groups["models.id"]),
            ),
            "resources": (
                [i for link in self.topic_links for i in link.resource_ids],
                set(id_groups["resources.id"]),
            ),
            "vendors": (
                [i for link in self.topic_links for i in link.vendor_ids],
                set(id_groups["vendors.id"]),
            ),
            "research_studies": (
                [i for link in self.topic_links for i in link.research_study_ids],
                set(id_groups["research_studies.id"]),
            ),
        }
        for label, (referenced, known) in references.items():
            unknown = _unknown(referenced, known)
            if unknown:
                raise ValueError(f"topic_links reference unknown {label}: {', '.join(unknown)}")
        return self


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _to_domain_profile(model: _ProfileModel) -> UserProfile:
    return UserProfile(
        seniority=model.seniority,
        role=model.role,
        firm_size=model.firm_size,
        firm_type=model.firm_type,
        interest_areas=_clean_tags(model.interest_areas),
        international_scope=bool(model.international_scope),
        growth_maturity_level=model.growth_maturity_level or MIN_MATURITY_LEVEL,
        data_maturity_level=model.data_maturity_level or MIN_MATURITY_LEVEL,
    )


def _to_domain_topic(model: _TopicModel) -> Topic:
    return Topic(
        id=model.id,
        name=model.name,
        description=model.description,
        interest_area_keywords=_clean_tags(model.interest_area_keywords),
        recommended_seniority=frozenset(model.recommended_seniority or ()),
        recommended_roles=frozenset(model.recommended_roles or ()),
        recommended_firm_sizes=frozenset(model.recommended_firm_sizes or ()),
        recommended_firm_types=frozenset(model.recommended_firm_types or ()),
        national_or_international=frozenset(model.national_or_international or ()),
        min_growth_maturity=model.min_growth_maturity or MIN_MATURITY_LEVEL,
        max_growth_maturity=model.max_growth_maturity or MAX_MATURITY_LEVEL,
        min_data_maturity=model.min_data_maturity or MIN_MATURITY_LEVEL,
        max_data_maturity=model.max_data_maturity or MAX_MATURITY_LEVEL,
        active=True if model.active is None else model.active,
        category_key=model.category_key,
    )


def _to_domain_links(model: _TopicLinksModel) -> TopicLinks:
    return TopicLinks(
        topic_id=model.topic_id,
        model_ids=unique_in_order(model.model_ids),
        resource_ids=unique_in_order(model.resource_ids),
        vendor_ids=unique_in_order(model.vendor_ids),
        research_study_ids=unique_in_order(model.research_study_ids),
        resource_category_names=_clean_tags(model.resource_category_names),
    )


def _to_domain_catalog(model: _ContentCatalogModel) -> ContentCatalog:
    return ContentCatalog(
        profiles=MappingProxyType({p.user_id: _to_domain_profile(p) for p in model.profiles}),
        topics=tuple(_to_domain_topic(t) for t in model.topics),
        models=tuple(
            ModelSummary(
                id=m.id,
                name=m.name,
                slug=m.slug,
                emoji=m.emoji,
                short_description=m.short_description,
                active=m.status == "active",
            )
            for m in model.models
        ),
        resources=tuple(
            ResourceSummary(
                id=r.id,
                title=r.title,
                type=r.type,
                url=r.url,
                description=r.description,
                author=r.author,
                estimated_time=r.estimated_time,
                emoji=r.emoji,
                active=r.status == "active",
                topic_category_keys=frozenset(_clean_tags(r.topic_category_keys)),
            )
            for r in model.resources
        ),
        vendors=tuple(
            VendorSummary(
                id=v.id,
                name=v.name,
                website=v.website,
                description=v.description,
                active=v.status == "active",
            )
            for v in model.vendors
        ),
        research_studies=tuple(
            ResearchStudySummary(
                id=s.id,
                title=s.title,
                description=s.description,
                status=s.status,
            )
            for s in model.research_studies
        ),
        topic_links=MappingProxyType(
            {link.topic_id: _to_domain_links(link) for link in model.topic_links}
        ),
    )


def load_content_catalog(*, path: Path, fs: FileSystem) -> ContentCatalog:
    """Load and validate a content catalogue snapshot from JSON."""
    if not fs.exists(path):
        raise CatalogFileNotFoundError(str(path))

    payload = fs.read_text(path)
    try:
        model = _ContentCatalogModel.model_validate_json(payload)
    except ValidationError as exc:
        raise CatalogValidationError(str(path), _format_validation_error(exc)) from exc

    catalog = _to_domain_catalog(model)
    get_logger("growth_lab.catalog").info(
        "Loaded catalogue %s: %s profiles, %s topics (%s active)",
        path,
        len(catalog.profiles),
        len(catalog.topics),
        sum(1 for topic in catalog.topics if topic.active),
    )
    return catalog
