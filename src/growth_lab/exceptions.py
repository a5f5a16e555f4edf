"""Custom exceptions for Growth Lab recommendations.

These exceptions provide clear error handling and enable testing of error paths.
"""

from __future__ import annotations


class GrowthLabError(Exception):
    """Base exception for all Growth Lab errors."""

    pass


class CatalogFileNotFoundError(GrowthLabError):
    """Raised when the content catalogue file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Content catalogue not found: {path}\n"
            "Set GROWTH_LAB_CATALOG_PATH or pass --catalog with a valid JSON file."
        )


class CatalogValidationError(GrowthLabError):
    """Raised when the content catalogue fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid content catalogue {path}: {detail}")


class ConfigFileNotFoundError(GrowthLabError):
    """Raised when a TOML config file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(GrowthLabError):
    """Raised when a TOML config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(GrowthLabError):
    """Raised when a TOML config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config file {path}: {detail}")


class UserProfileNotFoundError(GrowthLabError):
    """Raised when no profile exists for a user id."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"No profile found for user {user_id!r}.")


class TopicNotFoundError(GrowthLabError):
    """Raised when a topic id is not in the catalogue."""

    def __init__(self, topic_id: str) -> None:
        self.topic_id = topic_id
        super().__init__(f"No topic found with id {topic_id!r}.")


class DependencyMissingError(GrowthLabError):
    """Raised when a required collaborator was not injected."""

    def __init__(self, dependency: str, *, reason: str = "") -> None:
        message = f"{dependency} is required."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
