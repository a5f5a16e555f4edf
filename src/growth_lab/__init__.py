"""Growth Lab topic recommendations: rank topics for a profile and resolve linked content."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("growth-lab-recommender")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = ["__version__"]
