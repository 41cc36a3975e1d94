"""User-managed list of custom domains."""

from __future__ import annotations

import re
import threading

import structlog

from .models import AutocompleteSuggestions, CompletionSourceError, CustomCompletionResult, Toggle
from .settings_store import SettingsStore
from .sources import AutocompleteSource

log = structlog.get_logger()

_PREFIX_RE = re.compile(r"^(\s+)?(?:https?://)?(?:www\.)?", re.IGNORECASE)


def sanitize(suggestion: str) -> str:
    """Strip leading whitespace, scheme, ``www.`` and one trailing slash."""
    sanitized = _PREFIX_RE.sub("", suggestion, count=1)
    # URLs added from a page action otherwise end up with two slashes
    if sanitized.endswith("/"):
        sanitized = sanitized[:-1]
    return sanitized


class CustomCompletionSource(AutocompleteSource):
    def __init__(self, store: SettingsStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._store.get_toggle(Toggle.ENABLE_CUSTOM_DOMAIN_AUTOCOMPLETE)

    def get_suggestions(self) -> AutocompleteSuggestions:
        return self._store.get_custom_domains()

    def _validate(self, suggestion: str, domains: list[str]) -> CompletionSourceError | None:
        sanitized = sanitize(suggestion)
        if not sanitized or "." not in sanitized:
            return CompletionSourceError.INVALID_URL
        key = sanitized.casefold()
        if any(sanitize(domain).casefold() == key for domain in domains):
            return CompletionSourceError.DUPLICATE_DOMAIN
        return None

    def _reject(self, error: CompletionSourceError, **context) -> CustomCompletionResult:
        log.info("custom_domain_rejected", reason=error.value, **context)
        return CustomCompletionResult.failure(error)

    def add(self, suggestion: str) -> CustomCompletionResult:
        """Append a domain, storing it exactly as the user typed it."""
        with self._lock:
            domains = self.get_suggestions()
            if error := self._validate(suggestion, domains):
                return self._reject(error, suggestion=suggestion)

            domains.append(suggestion)
            self._store.set_custom_domains(domains)

        log.info("custom_domain_added", suggestion=suggestion, count=len(domains))
        return CustomCompletionResult.success()

    def insert(self, suggestion: str, index: int) -> CustomCompletionResult:
        """Insert a domain at ``index``; ``len(list)`` appends."""
        with self._lock:
            domains = self.get_suggestions()
            if error := self._validate(suggestion, domains):
                return self._reject(error, suggestion=suggestion, index=index)
            if not 0 <= index <= len(domains):
                return self._reject(
                    CompletionSourceError.INDEX_OUT_OF_RANGE, suggestion=suggestion, index=index
                )

            domains.insert(index, suggestion)
            self._store.set_custom_domains(domains)

        log.info("custom_domain_inserted", suggestion=suggestion, index=index, count=len(domains))
        return CustomCompletionResult.success()

    def remove(self, index: int) -> CustomCompletionResult:
        with self._lock:
            domains = self.get_suggestions()
            if not 0 <= index < len(domains):
                return self._reject(CompletionSourceError.INDEX_OUT_OF_RANGE, index=index)

            removed = domains.pop(index)
            self._store.set_custom_domains(domains)

        log.info("custom_domain_removed", domain=removed, index=index, count=len(domains))
        return CustomCompletionResult.success()

    def move(self, from_index: int, to_index: int) -> CustomCompletionResult:
        """Reorder one entry, keeping the relative order of the others."""
        with self._lock:
            domains = self.get_suggestions()
            if not (0 <= from_index < len(domains) and 0 <= to_index < len(domains)):
                return self._reject(
                    CompletionSourceError.INDEX_OUT_OF_RANGE,
                    from_index=from_index,
                    to_index=to_index,
                )

            domain = domains.pop(from_index)
            domains.insert(to_index, domain)
            self._store.set_custom_domains(domains)

        log.info("custom_domain_moved", domain=domain, from_index=from_index, to_index=to_index)
        return CustomCompletionResult.success()
