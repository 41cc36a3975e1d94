from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

import structlog

from .matcher import completion_for_domain
from .sources import AutocompleteSource

log = structlog.get_logger()


class DomainCompletion:
    """First-match completion over a prioritized list of sources."""

    def __init__(self, completion_sources: list[AutocompleteSource]) -> None:
        self._completion_sources = completion_sources

    def domains(self) -> Iterator[str]:
        """Lazily flatten the suggestions of enabled sources, in source order."""
        enabled = (source for source in self._completion_sources if source.enabled)
        return chain.from_iterable(source.get_suggestions() for source in enabled)

    def complete(self, text: str) -> str | None:
        if not text:
            return None

        for domain in self.domains():
            if completion := completion_for_domain(domain, text):
                log.debug("completion_found", text=text, domain=domain, completion=completion)
                return completion

        log.debug("no_completion", text=text)
        return None
