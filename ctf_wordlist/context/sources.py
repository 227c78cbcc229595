"""
Reference pages used as context sources.
"""

from dataclasses import dataclass
from typing import Callable, Tuple
from urllib.parse import quote_plus


WIKIPEDIA_SEARCH_URL = "https://en.wikipedia.org/w/index.php?search="
GOOGLE_SEARCH_URL = "https://www.google.com/search?q="


def build_wikipedia_search_url(base: str) -> str:
    """Build the encyclopedia search URL for a base word."""
    query = base.lower().replace(" ", "+")
    return WIKIPEDIA_SEARCH_URL + query


def build_google_search_url(base: str) -> str:
    """Build the search engine URL for a base word."""
    return GOOGLE_SEARCH_URL + quote_plus(base + " CTF challenge")


@dataclass(frozen=True)
class ContextSource:
    """A named page that contributes context words."""
    name: str
    url_builder: Callable[[str], str]

    def url_for(self, base: str) -> str:
        return self.url_builder(base)


DEFAULT_SOURCES: Tuple[ContextSource, ...] = (
    ContextSource(name="Wikipedia", url_builder=build_wikipedia_search_url),
    ContextSource(name="Google", url_builder=build_google_search_url),
)
