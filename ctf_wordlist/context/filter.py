"""
Context word filtering.
"""

import re
from typing import Iterable, List

VALID_WORD_PATTERN = re.compile(r'^[a-zA-Z0-9]+$')
MIN_WORD_LENGTH = 3


def filter_context_words(fragments: Iterable[str]) -> List[str]:
    """
    Turn raw text fragments into the context word set.

    Fragments containing anything other than ASCII letters and digits are
    dropped, the rest are lowercased, and words shorter than three
    characters or already seen are skipped. First-seen order is kept.

    Args:
        fragments: Raw fragments in document order

    Returns:
        Lowercase, unique, alphanumeric words
    """
    seen = set()
    words = []
    for fragment in fragments:
        if not VALID_WORD_PATTERN.fullmatch(fragment):
            continue
        word = fragment.lower()
        if len(word) < MIN_WORD_LENGTH or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words
