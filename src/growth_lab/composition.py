"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from pathlib import Path

from .application.catalog import load_content_catalog
from .cli import CliDependencies, create_app
from .config import RecommenderConfig
from .infrastructure import InMemoryContentStore, LocalFileSystem
from .protocols import ContentStore


def build_cli_dependencies(*, config: RecommenderConfig, build_store: bool) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Recommender configuration (used for the catalogue path).
        build_store: Whether to load the catalogue and construct the content store.
    """
    fs = LocalFileSystem()
    store: ContentStore | None = None
    if build_store:
        catalog = load_content_catalog(path=Path(config.catalog_path), fs=fs)
        store = InMemoryContentStore(catalog)
    return CliDependencies(fs=fs, store=store)


app = create_app(build_cli_dependencies)
