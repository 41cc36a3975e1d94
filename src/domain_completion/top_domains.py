"""Well-known domains bundled with the package."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

import structlog

from .config import settings
from .models import AutocompleteSuggestions, Toggle
from .settings_store import SettingsStore
from .sources import AutocompleteSource

log = structlog.get_logger()


class BundledResourceError(RuntimeError):
    """A resource that ships with the package could not be read."""


@lru_cache(maxsize=1)
def load_top_domains(resource: str) -> tuple[str, ...]:
    try:
        text = resources.files(__package__).joinpath(resource).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.critical("top_domains_load_failed", resource=resource)
        raise BundledResourceError(f"bundled resource {resource!r} is unreadable") from exc

    domains = tuple(line.strip() for line in text.splitlines() if line.strip())
    log.info("top_domains_loaded", resource=resource, count=len(domains))
    return domains


class TopDomainsCompletionSource(AutocompleteSource):
    def __init__(self, store: SettingsStore, resource: str | None = None) -> None:
        self._store = store
        self._resource = resource or settings.top_domains_resource

    @property
    def enabled(self) -> bool:
        return self._store.get_toggle(Toggle.ENABLE_DOMAIN_AUTOCOMPLETE)

    def get_suggestions(self) -> AutocompleteSuggestions:
        return list(load_top_domains(self._resource))
