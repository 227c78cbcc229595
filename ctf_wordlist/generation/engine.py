"""
Combination engine for wordlist generation.

This module expands a base word and a set of context words into the
candidate list using a fixed rule grammar:
- Base word variants (case, reversal, leetspeak)
- Morphological suffixes
- CTF terms, years, keyboard patterns and prefixes
- Numeric suffixes
- Context word combinations with CTF suffixes and years
"""

from typing import Iterable, List, Sequence

from ctf_wordlist.core.logger import get_component_logger
from ctf_wordlist.generation import rules
from ctf_wordlist.generation.normalizer import (
    leetspeak_variant,
    normalize_base,
    reverse_variant,
    to_lower_variant,
    to_title_variant,
    to_upper_variant,
)

logger = get_component_logger("engine")


class CombinationEngine:
    """Generate deduplicated wordlist candidates from a base word."""

    def generate(self, base: str, context: Sequence[str] = ()) -> List[str]:
        """
        Generate the candidate list.

        Args:
            base: Base word; lowercased and stripped of spaces before use
            context: Context words, already filtered

        Returns:
            Candidates in rule order, without duplicates or empty strings
        """
        base = normalize_base(base)

        results: List[str] = []
        results.extend(self._base_variants(base))
        results.extend(self._suffix_variants(base))
        results.extend(self._ctf_term_variants(base))
        results.extend(self._year_variants(base))
        results.extend(self._keyboard_variants(base))
        results.extend(self._numeric_variants(base))
        results.extend(self._prefix_variants(base))

        skipped = 0
        for word in context:
            if not self.accepts_context_word(word):
                skipped += 1
                continue
            results.extend(self._context_variants(base, word))

        if skipped:
            logger.debug(f"Skipped {skipped} context words outside the length bounds")

        unique = deduplicate(results)
        logger.debug(f"Generated {len(unique)} unique candidates from {len(results)} raw entries")
        return unique

    @staticmethod
    def accepts_context_word(word: str) -> bool:
        """Check whether a context word takes part in combinations."""
        return rules.CONTEXT_WORD_MIN_LENGTH <= len(word) <= rules.CONTEXT_WORD_MAX_LENGTH

    def _base_variants(self, base: str) -> List[str]:
        return [
            base,
            to_upper_variant(base),
            to_title_variant(base),
            reverse_variant(base),
            leetspeak_variant(base),
        ]

    def _suffix_variants(self, base: str) -> List[str]:
        return [base + suffix for suffix in rules.WORD_SUFFIXES]

    def _ctf_term_variants(self, base: str) -> List[str]:
        variants = []
        for term in rules.CTF_TERMS:
            variants.extend([base + term, term + base, base + "_" + term, term + "_" + base])
        return variants

    def _year_variants(self, base: str) -> List[str]:
        variants = []
        for year in rules.YEARS:
            variants.extend([base + year, year + base])
        return variants

    def _keyboard_variants(self, base: str) -> List[str]:
        variants = []
        for pattern in rules.KEYBOARD_PATTERNS:
            variants.extend([base + pattern, pattern + base])
        return variants

    def _numeric_variants(self, base: str) -> List[str]:
        variants = []
        for i in rules.NUMERIC_SUFFIX_RANGE:
            # Single digits also get a zero-padded form
            if i < 10:
                variants.append(f"{base}0{i}")
            variants.append(f"{base}{i}")
        return variants

    def _prefix_variants(self, base: str) -> List[str]:
        variants = []
        for prefix in rules.PREFIXES:
            variants.extend([prefix + base, prefix + "_" + base, prefix + "-" + base])
        return variants

    def _context_combos(self, base: str, word: str) -> List[str]:
        return [
            word,
            to_lower_variant(word),
            to_upper_variant(word),
            to_title_variant(word),
            reverse_variant(word),
            leetspeak_variant(word),
            base + word,
            word + base,
            base + "_" + word,
            word + "_" + base,
            base + "-" + word,
            word + "-" + base,
            base + "." + word,
            word + "." + base,
        ]

    def _context_variants(self, base: str, word: str) -> List[str]:
        variants = []
        for combo in self._context_combos(base, word):
            variants.append(combo)
            variants.extend(combo + suffix for suffix in rules.CTF_SUFFIXES)
            variants.extend(combo + year for year in rules.YEARS)
        return variants


def deduplicate(candidates: Iterable[str]) -> List[str]:
    """Drop duplicates and empty strings, keeping first-seen order."""
    return [candidate for candidate in dict.fromkeys(candidates) if candidate]


_default_engine = CombinationEngine()


def generate(base: str, context: Sequence[str] = ()) -> List[str]:
    """Generate candidates with the default engine."""
    return _default_engine.generate(base, context)
