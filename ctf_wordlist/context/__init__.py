"""
Context word gathering for the CTF wordlist generator.

This module provides:
- Reference page URLs for a base word
- HTML text node extraction
- Context word filtering
- Concurrent gathering of all sources
"""

from .extractor import extract_text_fragments
from .filter import filter_context_words
from .gatherer import ContextGatherer, ContextResult
from .sources import (
    DEFAULT_SOURCES,
    ContextSource,
    build_google_search_url,
    build_wikipedia_search_url,
)

__all__ = [
    'ContextGatherer',
    'ContextResult',
    'ContextSource',
    'DEFAULT_SOURCES',
    'build_google_search_url',
    'build_wikipedia_search_url',
    'extract_text_fragments',
    'filter_context_words',
]
