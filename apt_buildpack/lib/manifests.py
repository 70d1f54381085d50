from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

import yaml

logger = logging.getLogger(__name__)

MANIFEST_FIELDS = ("keys", "repos", "packages")


class ManifestError(ValueError):
    pass


@dataclass
class Manifest:
    keys: List[str] = field(default_factory=list)
    repos: List[str] = field(default_factory=list)
    packages: List[str] = field(default_factory=list)


def _string_list(name: str, value: Any, path: Path) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ManifestError(f"{path}: '{name}' must be a list, got {type(value).__name__}")
    out: List[str] = []
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise ManifestError(f"{path}: '{name}' entries must be strings, got {item!r}")
        out.append(str(item))
    return out


def load_manifest(path: str) -> Manifest:
    """Load an apt.yml manifest.

    A missing file or an empty document yields an empty manifest; every
    field is optional.
    """
    p = Path(path)
    if not p.exists():
        logger.info("No manifest at %s", str(p))
        return Manifest()

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ManifestError(f"{p}: invalid YAML") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a mapping/dict: {p}")

    return Manifest(**{name: _string_list(name, data.get(name), p) for name in MANIFEST_FIELDS})
