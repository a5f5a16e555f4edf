"""Filesystem implementation for infrastructure.

Usage example:
    from pathlib import Path

    from growth_lab.infrastructure.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    fs.write_json({"topics": []}, Path("data/out/recommendations.json"))
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing_extensions import override

from ..protocols import FileSystem


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(dict(data), ensure_ascii=False, indent=2), encoding="utf-8")
