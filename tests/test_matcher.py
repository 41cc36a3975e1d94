"""Tests for matching typed text against a single domain."""

import pytest

from domain_completion.matcher import completion_for_domain


class TestCompletionForDomain:
    """Where in the domain the typed text may start."""

    def test_match_from_start(self):
        assert completion_for_domain("mozilla.org", "moz") == "mozilla.org/"

    def test_match_after_www(self):
        assert completion_for_domain("mozilla.org", "www.moz") == "www.mozilla.org/"

    def test_match_inner_label(self):
        assert completion_for_domain("developer.mozilla.org", "moz") == "mozilla.org/"

    def test_match_does_not_start_mid_label(self):
        assert completion_for_domain("mozilla.org", "zilla") is None

    def test_case_insensitive(self):
        assert completion_for_domain("mozilla.org", "MOZ") == "mozilla.org/"

    def test_keeps_domain_casing(self):
        assert completion_for_domain("Mozilla.org", "moz") == "Mozilla.org/"

    def test_full_domain_typed(self):
        assert completion_for_domain("mozilla.org", "mozilla.org") == "mozilla.org/"

    def test_no_match(self):
        assert completion_for_domain("mozilla.org", "goo") is None


class TestTopLevelDomain:
    """A bare TLD is never offered."""

    @pytest.mark.parametrize("text", ["com", "co", "c"])
    def test_bare_tld_rejected(self, text):
        assert completion_for_domain("example.com", text) is None

    def test_tld_only_domain(self):
        assert completion_for_domain("com", "com") is None

    def test_multi_label_suffix_allowed(self):
        assert completion_for_domain("bbc.co.uk", "co") == "co.uk/"


class TestPaths:
    """Trailing slash handling."""

    def test_path_returned_as_is(self):
        assert completion_for_domain("example.com/docs", "exa") == "example.com/docs"

    def test_trailing_slash_not_doubled(self):
        assert completion_for_domain("example.com/", "exa") == "example.com/"

    def test_regex_characters_are_literal(self):
        assert completion_for_domain("example.com", "ex.*") is None
        assert completion_for_domain("a+b.com", "a+") == "a+b.com/"
