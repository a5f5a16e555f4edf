"""Pytest fixtures shared across the suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from pathlib import Path

import pytest

from growth_lab.domain.content import ContentCatalog
from growth_lab.infrastructure import InMemoryContentStore
from tests.fakes import InMemoryFileSystem
from tests.support.catalog import build_sample_catalog
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> None:
    """Block all network access in tests.

    The recommender never needs the network; any connection attempt is a bug.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()


@pytest.fixture
def sample_catalog() -> ContentCatalog:
    """A small catalogue with profiles, topics and linked content."""
    return build_sample_catalog()


@pytest.fixture
def sample_store(sample_catalog: ContentCatalog) -> InMemoryContentStore:
    """Content store over the sample catalogue."""
    return InMemoryContentStore(sample_catalog)


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parent.parent
