"""
Text node extraction from fetched HTML pages.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction

from ctf_wordlist.core.logger import get_component_logger

logger = get_component_logger("context.extractor")

# Common words that never make useful context
STOPWORDS = frozenset([
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before",
    "after", "above", "below", "between", "among", "within", "without",
    "under", "over",
])

# Exclusive bounds on the stripped length of a text node
MIN_FRAGMENT_LENGTH = 2
MAX_FRAGMENT_LENGTH = 50

# Strings in the tree that are not document text
_NON_TEXT_NODES = (Comment, Doctype, Declaration, CData, ProcessingInstruction)


def extract_text_fragments(markup: Optional[str]) -> List[str]:
    """
    Collect candidate text fragments from an HTML document.

    Every text node is stripped and kept when its length lies strictly
    between 2 and 50 characters and it is not a stopword.

    Args:
        markup: HTML source, or None when the page could not be fetched

    Returns:
        Fragments in document order, duplicates included
    """
    if not markup:
        return []

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning(f"Error parsing HTML: {e}")
        return []

    fragments = []
    for node in soup.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, _NON_TEXT_NODES):
            continue
        text = node.strip()
        if not MIN_FRAGMENT_LENGTH < len(text) < MAX_FRAGMENT_LENGTH:
            continue
        if text.lower() in STOPWORDS:
            continue
        fragments.append(text)

    return fragments
