"""Shared fixtures for domain completion tests."""

from __future__ import annotations

import pytest
import structlog

from domain_completion.custom_source import CustomCompletionSource
from domain_completion.models import AutocompleteSuggestions, Toggle
from domain_completion.settings_store import SettingsStore, SQLiteSettingsStore
from domain_completion.sources import AutocompleteSource


class InMemorySettingsStore(SettingsStore):
    """Settings kept in a dict, with a write counter for assertions."""

    def __init__(self, domains: list[str] | None = None, **toggles: bool) -> None:
        self.domains = list(domains or [])
        self.toggles = {flag: toggles.get(flag.value, True) for flag in Toggle}
        self.writes = 0

    def get_toggle(self, flag: Toggle) -> bool:
        return self.toggles[flag]

    def get_custom_domains(self) -> list[str]:
        return list(self.domains)

    def set_custom_domains(self, domains: list[str]) -> None:
        self.domains = list(domains)
        self.writes += 1


class StaticSource(AutocompleteSource):
    """Fixed suggestions; counts how often it was queried."""

    def __init__(self, domains: list[str], enabled: bool = True) -> None:
        self._domains = domains
        self._enabled = enabled
        self.calls = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get_suggestions(self) -> AutocompleteSuggestions:
        self.calls += 1
        return list(self._domains)


@pytest.fixture(autouse=True, scope="session")
def _quiet_logs():
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()


@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def custom(store: InMemorySettingsStore) -> CustomCompletionSource:
    return CustomCompletionSource(store)


@pytest.fixture
def sqlite_store(tmp_path) -> SQLiteSettingsStore:
    return SQLiteSettingsStore(tmp_path / "settings.db")
