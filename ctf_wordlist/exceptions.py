"""
Exceptions raised by the CTF wordlist generator.
"""

from pathlib import Path


class WordlistError(Exception):
    """Base class for wordlist generator errors."""


class WordlistWriteError(WordlistError):
    """The wordlist file could not be written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write wordlist to {path}: {cause}")
