from __future__ import annotations

import json
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .errors import ConfigError

ASSET_ROOT = "/assets/"


class AssetManifest(ABC):
    """Maps a logical asset name (``main.css``, ``icons.svg``) to a servable URL."""

    @abstractmethod
    def resolve(self, name: str) -> str:
        raise NotImplementedError


class IdentityManifest(AssetManifest):
    def resolve(self, name: str) -> str:
        return f"{ASSET_ROOT}{name}"


class FileManifest(AssetManifest):
    """Manifest backed by a JSON object of ``name -> url`` written by the asset build.

    Names missing from the file fall back to the identity rule so a stale
    manifest degrades to unhashed URLs instead of breaking the build.
    """

    def __init__(self, entries: dict[str, str], source: Optional[Path] = None) -> None:
        self.entries = dict(entries)
        self.source = source
        self._warned: set[str] = set()

    @classmethod
    def from_path(cls, path: Path) -> "FileManifest":
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read asset manifest {path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in asset manifest {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Asset manifest must be a JSON object: {path}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigError(f"Asset manifest entry {key!r} must map to a string URL: {path}")
        return cls(data, source=path)

    def resolve(self, name: str) -> str:
        url = self.entries.get(name)
        if url is not None:
            return url
        if name not in self._warned:
            self._warned.add(name)
            print(f"Asset not found in manifest: {name}", file=sys.stderr)
        return f"{ASSET_ROOT}{name}"


def load_manifest(path: Optional[Path]) -> AssetManifest:
    if path is None:
        return IdentityManifest()
    return FileManifest.from_path(path)
