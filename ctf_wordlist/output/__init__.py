"""
Wordlist output for the CTF wordlist generator.
"""

from .writer import WordlistWriter, output_filename

__all__ = [
    'WordlistWriter',
    'output_filename',
]
