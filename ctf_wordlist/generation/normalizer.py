"""
String transforms shared by the combination engine.

All functions are pure and operate on whole characters.
"""

from ctf_wordlist.generation.rules import LEETSPEAK_TABLE

_LEETSPEAK_TRANSLATION = str.maketrans(dict(LEETSPEAK_TABLE))


def normalize_base(s: str) -> str:
    """Lowercase a base word and remove its spaces."""
    return s.lower().replace(" ", "")


def to_lower_variant(s: str) -> str:
    return s.lower()


def to_upper_variant(s: str) -> str:
    return s.upper()


def to_title_variant(s: str) -> str:
    """
    Upper-case the first letter of every word.

    A word starts at the beginning of the string or after any character
    that is not a letter, digit or underscore. The other letters keep
    their case, so ``"root123abc"`` becomes ``"Root123abc"`` where
    ``str.title`` would give ``"Root123Abc"``.
    """
    chars = []
    previous_is_separator = True
    for ch in s:
        if previous_is_separator:
            chars.append(ch.upper())
        else:
            chars.append(ch)
        previous_is_separator = not (ch.isalnum() or ch == "_")
    return "".join(chars)


def reverse_variant(s: str) -> str:
    return s[::-1]


def leetspeak_variant(s: str) -> str:
    """Replace letters with their leetspeak symbol, e.g. ``Secret`` -> ``$3cr37``."""
    return s.translate(_LEETSPEAK_TRANSLATION)
