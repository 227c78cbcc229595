"""
Wordlist output.
"""

from pathlib import Path
from typing import Iterable, Union

from ctf_wordlist.core.logger import get_component_logger
from ctf_wordlist.exceptions import WordlistWriteError
from ctf_wordlist.generation.normalizer import normalize_base

logger = get_component_logger("output")

FILENAME_SUFFIX = "_wordlist.txt"


def output_filename(base: str) -> str:
    """Name of the wordlist file for a base word."""
    return normalize_base(base) + FILENAME_SUFFIX


class WordlistWriter:
    """Write candidate lists to disk, one entry per line."""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def path_for(self, base: str) -> Path:
        return self.output_dir / output_filename(base)

    def write(self, base: str, candidates: Iterable[str]) -> Path:
        """
        Write the candidates for a base word.

        Args:
            base: Base word the list was generated for
            candidates: Candidate list

        Returns:
            Path of the written file

        Raises:
            WordlistWriteError: If the file cannot be created or written
        """
        path = self.path_for(base)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for candidate in candidates:
                    f.write(candidate + "\n")
        except OSError as e:
            raise WordlistWriteError(path, e) from e

        logger.debug(f"Wrote wordlist to {path}")
        return path
