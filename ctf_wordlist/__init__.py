"""
CTF Wordlist Generator - context-aware password candidate lists

Expands a base word into a deduplicated wordlist using fixed transformation
rules and context words scraped from reference pages.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from ctf_wordlist.core.config import Config
from ctf_wordlist.core.logger import get_logger
from ctf_wordlist.generation.engine import CombinationEngine, generate

__all__ = [
    "CombinationEngine",
    "Config",
    "generate",
    "get_logger",
    "__version__",
]
