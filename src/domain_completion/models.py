from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from .yaml_config import get_strings

AutocompleteSuggestions = list[str]


class Toggle(StrEnum):
    ENABLE_DOMAIN_AUTOCOMPLETE = "enable_domain_autocomplete"
    ENABLE_CUSTOM_DOMAIN_AUTOCOMPLETE = "enable_custom_domain_autocomplete"


class CompletionSourceError(StrEnum):
    INVALID_URL = "invalid_url"
    DUPLICATE_DOMAIN = "duplicate_domain"
    INDEX_OUT_OF_RANGE = "index_out_of_range"

    @property
    def message(self) -> str:
        """User-facing text. Only an invalid URL carries one."""
        if self is not CompletionSourceError.INVALID_URL:
            return ""
        return get_strings()["autocomplete_add_custom_url_error"]


class CustomCompletionResult(BaseModel):
    """Outcome of a custom domain list mutation."""

    error: CompletionSourceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> CustomCompletionResult:
        return cls()

    @classmethod
    def failure(cls, error: CompletionSourceError) -> CustomCompletionResult:
        return cls(error=error)
