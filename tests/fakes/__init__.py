"""Exports for test fakes."""

from .content_store import CountingContentStore
from .filesystem import InMemoryFileSystem

__all__ = ["CountingContentStore", "InMemoryFileSystem"]
