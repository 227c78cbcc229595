"""
Candidate generation for the CTF wordlist generator.

This package provides:
- The fixed rule catalog
- String normalization and variant transforms
- The combination engine
"""

from .engine import CombinationEngine, deduplicate, generate
from .normalizer import (
    leetspeak_variant,
    normalize_base,
    reverse_variant,
    to_lower_variant,
    to_title_variant,
    to_upper_variant,
)

__all__ = [
    'CombinationEngine',
    'deduplicate',
    'generate',
    'leetspeak_variant',
    'normalize_base',
    'reverse_variant',
    'to_lower_variant',
    'to_title_variant',
    'to_upper_variant',
]
