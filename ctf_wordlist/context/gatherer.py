"""
Context gathering: fetch reference pages and turn them into context words.
"""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import httpx

from ctf_wordlist.context.extractor import extract_text_fragments
from ctf_wordlist.context.filter import filter_context_words
from ctf_wordlist.context.sources import DEFAULT_SOURCES, ContextSource
from ctf_wordlist.core.config import FetchConfig
from ctf_wordlist.core.http_client import AsyncHTTPClient
from ctf_wordlist.core.logger import get_component_logger

logger = get_component_logger("context.gatherer")


@dataclass
class ContextResult:
    """Context words collected for one run"""
    words: List[str] = field(default_factory=list)
    raw_count: int = 0
    sources_fetched: int = 0
    sources_total: int = 0


class ContextGatherer:
    """Fetch every context source and build the context word set.

    Sources are fetched concurrently; their fragments are combined in
    source order. A source that cannot be fetched contributes nothing.
    """

    def __init__(
            self,
            fetch_config: Optional[FetchConfig] = None,
            sources: Sequence[ContextSource] = DEFAULT_SOURCES,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.fetch_config = fetch_config or FetchConfig()
        self.sources = list(sources)
        self.transport = transport

    async def gather(self, base: str) -> ContextResult:
        """
        Gather context words for a base word.

        Args:
            base: Base word as supplied by the user

        Returns:
            ContextResult with the filtered words and counters
        """
        result = ContextResult(sources_total=len(self.sources))
        if not self.sources:
            return result

        async with AsyncHTTPClient.from_config(self.fetch_config, transport=self.transport) as client:
            documents = await asyncio.gather(
                *(self._fetch_source(client, source, base) for source in self.sources),
                return_exceptions=True
            )

        raw: List[str] = []
        for source, document in zip(self.sources, documents):
            if isinstance(document, BaseException):
                if not isinstance(document, Exception):
                    raise document
                logger.warning(f"Error gathering context from {source.name}: {document!r}")
                continue
            if document is None:
                continue
            result.sources_fetched += 1
            raw.extend(extract_text_fragments(document))

        result.raw_count = len(raw)
        result.words = filter_context_words(raw)

        logger.info(
            f"Collected {len(result.words)} context words from "
            f"{result.sources_fetched}/{result.sources_total} sources"
        )
        return result

    async def _fetch_source(
            self,
            client: AsyncHTTPClient,
            source: ContextSource,
            base: str
    ) -> Optional[str]:
        url = source.url_for(base)
        logger.info(f"Fetching context from {source.name}...")
        return await client.fetch_text(url)
