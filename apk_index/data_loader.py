"""Filesystem helpers for the download page build.

This module lists candidate APK files in the download directory, reads
the JSON site config and reads/writes the page template.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from apk_index.config import ConfigError, SiteConfig
from apk_index.release import APK_EXTENSION

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "apk-index.json"
DOWNLOAD_DIRNAME = "download"
INDEX_FILENAME = "index.html"


# ---------------------------------------------------------------------------
# JSON config
# ---------------------------------------------------------------------------


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(path: Path | None) -> SiteConfig:
    """Read a config file, falling back to defaults when ``path`` is None."""
    if path is None:
        return SiteConfig()
    return SiteConfig.from_dict(_load_json(path))


def find_config(root: Path) -> Path | None:
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


def discover_apk_files(download_dir: Path) -> list[str]:
    """Return the names of ``*.apk`` entries in ``download_dir``, sorted."""
    names = sorted(
        entry.name
        for entry in download_dir.iterdir()
        if entry.name.endswith(APK_EXTENSION)
    )
    logger.debug("Found %d APK file(s) in %s", len(names), download_dir)
    return names


# ---------------------------------------------------------------------------
# Page template
# ---------------------------------------------------------------------------


def read_index(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_index(path: Path, html: str) -> None:
    path.write_text(html, encoding="utf-8")


__all__ = [
    "CONFIG_FILENAME",
    "DOWNLOAD_DIRNAME",
    "INDEX_FILENAME",
    "discover_apk_files",
    "find_config",
    "load_config",
    "read_index",
    "write_index",
]
