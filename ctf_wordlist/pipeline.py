"""
End-to-end wordlist generation: gather context, generate, write.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ctf_wordlist.context.gatherer import ContextGatherer, ContextResult
from ctf_wordlist.core.config import Config, get_config
from ctf_wordlist.core.logger import get_component_logger
from ctf_wordlist.generation.engine import CombinationEngine
from ctf_wordlist.generation.normalizer import normalize_base
from ctf_wordlist.output.writer import WordlistWriter

logger = get_component_logger("pipeline")


@dataclass
class WordlistResult:
    """Outcome of one wordlist run."""
    base: str
    context: ContextResult
    candidates: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None


async def build_wordlist(
        base: str,
        config: Optional[Config] = None,
        gather_context: bool = True,
        writer: Optional[WordlistWriter] = None,
        gatherer: Optional[ContextGatherer] = None,
        engine: Optional[CombinationEngine] = None
) -> WordlistResult:
    """
    Build and write the wordlist for a base word.

    Args:
        base: Base word as supplied by the user
        config: Configuration, the global one when omitted
        gather_context: Fetch context pages; when False no context words are used
        writer: Output writer, built from the configuration when omitted
        gatherer: Context gatherer, built from the configuration when omitted
        engine: Combination engine

    Returns:
        WordlistResult with the candidates and the written path

    Raises:
        WordlistWriteError: If the wordlist cannot be written
    """
    config = config or get_config()
    writer = writer or WordlistWriter(config.output.output_directory)
    engine = engine or CombinationEngine()

    if gather_context:
        gatherer = gatherer or ContextGatherer(config.fetch)
        context = await gatherer.gather(base)
    else:
        logger.info("Context gathering disabled")
        context = ContextResult()

    normalized = normalize_base(base)
    candidates = engine.generate(normalized, context.words)
    logger.info(f"Generated {len(candidates)} candidates for '{normalized}'")

    output_path = writer.write(normalized, candidates)

    return WordlistResult(
        base=normalized,
        context=context,
        candidates=candidates,
        output_path=output_path
    )
