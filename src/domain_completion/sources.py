"""Abstract suggestion source for domain autocomplete."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import AutocompleteSuggestions


class AutocompleteSource(ABC):
    """A provider of domains participating in autocomplete.

    Implementations:
        - TopDomainsCompletionSource: well-known domains bundled with the package
        - CustomCompletionSource: domains the user added themselves
    """

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether this source currently takes part in completion."""

    @abstractmethod
    def get_suggestions(self) -> AutocompleteSuggestions:
        """Domains in priority order."""
