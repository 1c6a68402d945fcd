"""
HTTP content fetcher for the Dark Web Leak Monitor
"""

import asyncio
import random
from typing import Any, Dict, Optional

import aiohttp

from config.config import (
    MAX_CONCURRENT_REQUESTS, REQUEST_TIMEOUT, MAX_RETRIES, BACKOFF_FACTOR, USER_AGENTS
)
from utils.errors import FetchError
from utils.logger import get_logger


def _retry_after_seconds(value: Optional[str], default: float = 5.0) -> float:
    try:
        return float(value) if value else default
    except ValueError:
        return default


class ContentFetcher:
    """
    Time-bounded HTTP client with concurrent request control and retry logic.

    Every failure surfaces as ``FetchError`` so callers have a single
    transport-error signal to recover from.
    """

    def __init__(
        self,
        max_concurrent: int = MAX_CONCURRENT_REQUESTS,
        timeout: float = REQUEST_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        backoff_factor: float = BACKOFF_FACTOR
    ):
        self.logger = get_logger()
        self.semaphore = asyncio.Semaphore(max_concurrent)
        self.max_concurrent = max_concurrent
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.session: Optional[aiohttp.ClientSession] = None
        self.request_count = 0

    @staticmethod
    def default_headers() -> Dict[str, str]:
        """Browser-like headers with a rotated user agent"""
        return {
            'User-Agent': random.choice(USER_AGENTS),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the shared aiohttp session"""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                connector=aiohttp.TCPConnector(limit=self.max_concurrent)
            )
        return self.session

    async def fetch(
        self,
        url: str,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> str:
        """
        GET a URL and return its body as text

        Args:
            url: URL to request
            timeout: Total timeout in seconds for this request
            headers: Extra headers merged over the browser defaults

        Returns:
            Response body

        Raises:
            FetchError: on timeout, connection failure or non-2xx status
        """
        request_headers = self.default_headers()
        if headers:
            request_headers.update(headers)
        client_timeout = aiohttp.ClientTimeout(total=timeout or self.timeout)

        async with self.semaphore:
            session = await self.get_session()

            for attempt in range(self.max_retries + 1):
                try:
                    async with session.get(url, headers=request_headers, timeout=client_timeout) as response:
                        self.request_count += 1

                        if response.status == 429 and attempt < self.max_retries:
                            retry_after = _retry_after_seconds(response.headers.get('Retry-After'))
                            await asyncio.sleep(retry_after * (self.backoff_factor ** attempt))
                            continue

                        if not 200 <= response.status < 300:
                            raise FetchError(url, f"HTTP {response.status}", status=response.status)

                        return await response.text(errors='replace')

                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    if attempt == self.max_retries:
                        raise FetchError(url, str(e) or e.__class__.__name__) from e

                    wait_time = (self.backoff_factor ** attempt) + random.uniform(0, 1)
                    self.logger.debug(f"Retrying {url} in {wait_time:.1f}s: {e!r}")
                    await asyncio.sleep(wait_time)

        raise FetchError(url, "retries exhausted")

    async def post_json(self, url: str, payload: Dict[str, Any]) -> int:
        """
        POST a JSON payload and return the response status

        Raises:
            FetchError: on timeout or connection failure
        """
        async with self.semaphore:
            session = await self.get_session()
            try:
                async with session.post(url, json=payload, headers={"Content-Type": "application/json"}) as response:
                    self.request_count += 1
                    return response.status
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise FetchError(url, str(e) or e.__class__.__name__) from e

    async def close(self):
        """Close the aiohttp session"""
        if self.session and not self.session.closed:
            await self.session.close()


# Global fetcher instance
_global_fetcher = None


def get_fetcher() -> ContentFetcher:
    """Get the global fetcher instance"""
    global _global_fetcher
    if _global_fetcher is None:
        _global_fetcher = ContentFetcher()
    return _global_fetcher
