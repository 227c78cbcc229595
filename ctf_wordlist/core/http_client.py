"""
Async HTTP client used to fetch context pages, with rate limiting and
failure absorption.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from ctf_wordlist.core.config import FetchConfig
from ctf_wordlist.core.logger import get_component_logger

logger = get_component_logger("http_client")


@dataclass
class RequestConfig:
    """Configuration for HTTP requests."""
    timeout: float = 10.0
    verify_ssl: bool = True
    allow_redirects: bool = True
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36"
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_fetch_config(cls, fetch_config: FetchConfig) -> "RequestConfig":
        return cls(
            timeout=fetch_config.timeout,
            verify_ssl=fetch_config.verify_ssl,
            allow_redirects=fetch_config.follow_redirects,
            user_agent=fetch_config.user_agent,
        )


@dataclass
class RateLimitConfig:
    """Rate limiting configuration."""
    requests_per_second: float = 1.0
    burst_size: int = 1


class TokenBucket:
    """Token bucket implementation for rate limiting."""

    def __init__(self, rate: float, burst: int):
        self.rate = rate
        self.burst = burst
        self.tokens = burst
        self.last_update = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Acquire a token, waiting if necessary."""
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self.last_update
            self.tokens = min(self.burst, self.tokens + elapsed * self.rate)
            self.last_update = now

            if self.tokens >= 1:
                self.tokens -= 1
                return

            # Wait for next token
            wait_time = (1 - self.tokens) / self.rate
            await asyncio.sleep(wait_time)
            self.tokens = 0
            self.last_update = time.monotonic()


class AsyncHTTPClient:
    """Asynchronous page fetcher.

    Every failure (transport error, timeout, non-200 status) is logged and
    reported as ``None`` so callers can treat context gathering as
    best-effort.
    """

    def __init__(
            self,
            request_config: RequestConfig = None,
            rate_limit_config: RateLimitConfig = None,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.request_config = request_config or RequestConfig()
        self.rate_limit_config = rate_limit_config or RateLimitConfig()

        self.rate_limiter = TokenBucket(
            self.rate_limit_config.requests_per_second,
            self.rate_limit_config.burst_size
        )

        headers = {"User-Agent": self.request_config.user_agent}
        headers.update(self.request_config.headers)

        self.client_config = {
            "timeout": httpx.Timeout(self.request_config.timeout),
            "verify": self.request_config.verify_ssl,
            "follow_redirects": self.request_config.allow_redirects,
            "headers": headers,
        }
        if transport is not None:
            self.client_config["transport"] = transport

        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(
            cls,
            fetch_config: FetchConfig,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "AsyncHTTPClient":
        """Build a client from the ``fetch`` section of the configuration."""
        return cls(
            request_config=RequestConfig.from_fetch_config(fetch_config),
            rate_limit_config=RateLimitConfig(requests_per_second=fetch_config.requests_per_second),
            transport=transport
        )

    async def __aenter__(self):
        """Async context manager entry."""
        self._client = httpx.AsyncClient(**self.client_config)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_text(self, url: str) -> Optional[str]:
        """
        Fetch a page and return its body text.

        Args:
            url: Absolute URL of the page

        Returns:
            The decoded body on HTTP 200, otherwise None
        """
        if self._client is None:
            raise RuntimeError("AsyncHTTPClient must be used as an async context manager")

        await self.rate_limiter.acquire()

        try:
            logger.debug(f"GET {url}")
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Error fetching {url}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Non-200 status code for {url}: {response.status_code}")
            return None

        return response.text
