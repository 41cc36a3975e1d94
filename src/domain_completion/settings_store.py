"""Persistent settings backing the toggles and the custom domain list."""

from __future__ import annotations

import json
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from .config import settings
from .models import Toggle

log = structlog.get_logger()

CUSTOM_DOMAINS_KEY = "custom_domains"


class SettingsStore(ABC):
    """Backend-agnostic interface for reading and writing user settings.

    Implementations:
        - SQLiteSettingsStore: a single key/value table on local disk
    """

    @abstractmethod
    def get_toggle(self, flag: Toggle) -> bool:
        """Whether the given feature flag is switched on."""

    @abstractmethod
    def get_custom_domains(self) -> list[str]:
        """The user's custom domains, in display order."""

    @abstractmethod
    def set_custom_domains(self, domains: list[str]) -> None:
        """Replace the stored custom domain list."""


def _toggle_default(flag: Toggle) -> bool:
    match flag:
        case Toggle.ENABLE_DOMAIN_AUTOCOMPLETE:
            return settings.default_domain_autocomplete
        case Toggle.ENABLE_CUSTOM_DOMAIN_AUTOCOMPLETE:
            return settings.default_custom_domain_autocomplete


class SQLiteSettingsStore(SettingsStore):
    def __init__(self, db_path: str | Path | None = None) -> None:
        self._db = Path(db_path or settings.settings_db).expanduser()
        self._ensure_db()

    def _conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_db(self) -> None:
        """Create the settings table if it doesn't exist."""
        self._db.parent.mkdir(parents=True, exist_ok=True)
        conn = self._conn()
        conn.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()
        conn.close()

    def _get(self, key: str):
        conn = self._conn()
        try:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error:
            log.exception("settings_read_failed", key=key)
            raise
        finally:
            conn.close()
        return None if row is None else json.loads(row["value"])

    def _set(self, key: str, value) -> None:
        conn = self._conn()
        try:
            conn.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, json.dumps(value)),
            )
            conn.commit()
        except sqlite3.Error:
            log.exception("settings_write_failed", key=key)
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_toggle(self, flag: Toggle) -> bool:
        value = self._get(flag.value)
        if value is None:
            return _toggle_default(flag)
        return bool(value)

    def set_toggle(self, flag: Toggle, value: bool) -> None:
        self._set(flag.value, value)
        log.info("toggle_set", flag=flag.value, value=value)

    def get_custom_domains(self) -> list[str]:
        return list(self._get(CUSTOM_DOMAINS_KEY) or [])

    def set_custom_domains(self, domains: list[str]) -> None:
        self._set(CUSTOM_DOMAINS_KEY, list(domains))
