"""Concrete infrastructure implementations."""

from .content_store import InMemoryContentStore
from .filesystem import LocalFileSystem

__all__ = ["InMemoryContentStore", "LocalFileSystem"]
