"""Tests for URL construction."""

import pytest

from dictlookup.services.dictionary.urls import build_conjugation_url, build_url

BASE = "https://dictionary.cambridge.org"


class TestBuildUrl:
    """Tests for build_url."""

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            ("en", f"{BASE}/us/dictionary/english/class"),
            ("uk", f"{BASE}/uk/dictionary/english/class"),
            ("en-tw", f"{BASE}/us/dictionary/english-chinese-traditional/class"),
            ("en-cn", f"{BASE}/us/dictionary/english-chinese-simplified/class"),
        ],
    )
    def test_language_mapping(self, language, expected):
        """Should map each language to its dictionary and region."""
        assert build_url("class", language, BASE).url == expected

    def test_unknown_language_falls_back_to_english(self):
        target = build_url("class", "fr", BASE)
        assert target.url == f"{BASE}/us/dictionary/english/class"
        assert (target.slug, target.region) == ("english", "us")

    def test_word_is_encoded(self):
        """Should percent-encode the word as one path segment."""
        assert build_url("ice cream/x", "en", BASE).url.endswith("/english/ice%20cream%2Fx")

    def test_trailing_slash_in_base(self):
        assert build_url("class", "en", BASE + "/").url == f"{BASE}/us/dictionary/english/class"

    def test_default_base_from_settings(self):
        from dictlookup.config import settings

        assert build_url("class", "en").url.startswith(settings.cambridge_base_url)


class TestBuildConjugationUrl:
    """Tests for build_conjugation_url."""

    def test_url(self):
        assert (
            build_conjugation_url("class", "https://simple.wiktionary.org")
            == "https://simple.wiktionary.org/wiki/class"
        )

    def test_language_independent(self):
        """Should depend only on the word."""
        assert build_conjugation_url("run") == build_conjugation_url("run")
