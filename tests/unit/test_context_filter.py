"""
Unit tests for context word filtering, extraction and source URLs.
"""

import logging
from unittest.mock import patch

from bs4 import ParserRejectedMarkup

from ctf_wordlist.context.extractor import STOPWORDS, extract_text_fragments
from ctf_wordlist.context.filter import filter_context_words
from ctf_wordlist.context.sources import (
    DEFAULT_SOURCES,
    build_google_search_url,
    build_wikipedia_search_url,
)


class TestContextFilter:
    """Context word set construction."""

    def test_filters_and_deduplicates(self):
        """Test pattern, length and first-seen deduplication rules."""
        fragments = [
            "Hello", "hello", "HELLO", "ab", "abc", "foo bar",
            "foo-bar", "naïve", "123", "X1y2", " abc", "abc ",
        ]

        assert filter_context_words(fragments) == ["hello", "abc", "123", "x1y2"]

    def test_output_invariants(self):
        words = filter_context_words(["Machine", "PWN", "box", "Box", "ok", "two words"])

        assert words == ["machine", "pwn", "box"]
        for word in words:
            assert word == word.lower()
            assert word.isalnum()
            assert len(word) > 2

    def test_empty_input(self):
        assert filter_context_words([]) == []

    def test_accepts_generators(self):
        assert filter_context_words(w for w in ["Alpha", "beta"]) == ["alpha", "beta"]


class TestTextExtraction:
    """HTML text node extraction."""

    def test_extracts_text_nodes_in_document_order(self):
        """Test stoplist, length bounds and non-text nodes."""
        markup = (
            "<!DOCTYPE html><html><head><title>Hackthebox</title>"
            "<script>var x=1;</script></head><body>"
            "<p>The</p><p>ab</p><p>  Machines  </p>"
            "<!-- secret comment -->"
            f"<p>{'a' * 50}</p><p>{'b' * 49}</p>"
            "<span>under</span><div>Pwn<b>Box</b></div>"
            "</body></html>"
        )

        assert extract_text_fragments(markup) == [
            "Hackthebox", "var x=1;", "Machines", "b" * 49, "Pwn", "Box",
        ]

    def test_duplicates_are_kept(self):
        assert extract_text_fragments("<p>flag</p><p>flag</p>") == ["flag", "flag"]

    def test_stopwords_case_insensitive(self):
        assert extract_text_fragments("<p>THE</p><p>Between</p><p>Crypto</p>") == ["Crypto"]

    def test_missing_document(self):
        assert extract_text_fragments(None) == []
        assert extract_text_fragments("") == []

    def test_rejected_markup_yields_nothing(self, caplog):
        """Test markup the parser rejects is logged and contributes no fragments."""
        with patch(
            "ctf_wordlist.context.extractor.BeautifulSoup",
            side_effect=ParserRejectedMarkup("unparseable")
        ):
            with caplog.at_level(logging.WARNING, logger="ctf_wordlist.context.extractor"):
                assert extract_text_fragments("<p>x</p>") == []

        assert any(
            record.levelno == logging.WARNING and "Error parsing HTML" in record.getMessage()
            for record in caplog.records
        )

    def test_stoplist_contents(self):
        assert "the" in STOPWORDS
        assert "without" in STOPWORDS
        assert "flag" not in STOPWORDS


class TestContextSources:
    """Reference page URLs."""

    def test_wikipedia_url(self):
        assert build_wikipedia_search_url("Hack The Box") == \
            "https://en.wikipedia.org/w/index.php?search=hack+the+box"

    def test_google_url(self):
        assert build_google_search_url("hack the box") == \
            "https://www.google.com/search?q=hack+the+box+CTF+challenge"

    def test_google_url_escapes_query(self):
        assert build_google_search_url("a&b") == \
            "https://www.google.com/search?q=a%26b+CTF+challenge"

    def test_default_source_order(self):
        assert [source.name for source in DEFAULT_SOURCES] == ["Wikipedia", "Google"]
        assert DEFAULT_SOURCES[0].url_for("box") == build_wikipedia_search_url("box")
