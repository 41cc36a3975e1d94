"""Defaults and user-facing strings from config.yml."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml

_BUNDLED_CONFIG = Path(__file__).parent / "config.yml"


def config_path() -> Path:
    """DOMAIN_COMPLETION_CONFIG_PATH if set, else the file shipped with the package."""
    return Path(os.environ.get("DOMAIN_COMPLETION_CONFIG_PATH", _BUNDLED_CONFIG))


@lru_cache(maxsize=1)
def _load(path: Path) -> dict:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    try:
        return _load(config_path()).get("defaults", {})
    except OSError:
        return {}


def get_strings() -> dict[str, str]:
    return _load(config_path())["strings"]
