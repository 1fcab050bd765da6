"""
Async remote resolver for LinguaBridge.
Uses aiohttp with a shared session; one provider call per resolve().
"""

import asyncio
from typing import Optional
import aiohttp
from yarl import URL
from logger import get_logger, translation_context
from metrics import get_metrics, Timer
from remote import (
    Provider,
    MyMemoryProvider,
    RemoteUnavailable,
    decode_json,
    DEFAULT_TIMEOUT
)
from security import check_rate_limit, MAX_RESPONSE_SIZE, RATE_LIMIT_REQUESTS, USER_AGENT


class AsyncRemoteResolver:
    """Async HTTP resolver with connection pooling."""

    def __init__(
        self,
        provider: Optional[Provider] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limit: int = RATE_LIMIT_REQUESTS,
        user_agent: str = USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async resolver.

        Args:
            provider: Translation provider (MyMemory by default)
            timeout: Total timeout per call in seconds
            rate_limit: Calls allowed per host per minute
            user_agent: User-Agent header value
            session: Existing session to use instead of opening one
        """
        self.provider = provider or MyMemoryProvider()
        self.timeout = timeout
        self.rate_limit = rate_limit
        self.user_agent = user_agent
        self.session = session
        self._owns_session = False
        self.logger = get_logger("async_remote")
        self.metrics = get_metrics()

    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            connector=aiohttp.TCPConnector(limit=100, limit_per_host=10),
            headers={"User-Agent": self.user_agent}
        )

    async def __aenter__(self):
        """Async context manager entry."""
        if self.session is None:
            self.session = self._new_session()
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None
            self._owns_session = False

    async def resolve(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate text with one provider call.

        Returns:
            Translated text exactly as returned by the provider

        Raises:
            RemoteUnavailable: On network, timeout, status, or payload failure
        """
        tags = {"provider": self.provider.name}
        try:
            if self.session is None:
                # Per-call session; concurrent calls must not share or close it
                async with self._new_session() as session:
                    result = await self._call(session, text, source_lang, target_lang)
            else:
                result = await self._call(self.session, text, source_lang, target_lang)
        except RemoteUnavailable as e:
            self.metrics.increment("remote_errors", tags=tags)
            e.provider = self.provider.name
            self.logger.debug(
                f"{self.provider.name} failed: {e.reason}",
                extra=translation_context(
                    provider=self.provider.name, source_lang=source_lang, target_lang=target_lang, reason=e.reason
                )
            )
            raise

        self.metrics.increment("remote_success", tags=tags)
        return result

    async def _call(
        self,
        session: aiohttp.ClientSession,
        text: str,
        source_lang: str,
        target_lang: str
    ) -> str:
        req = self.provider.build_request(text, source_lang, target_lang)

        if not check_rate_limit(req.url, max_requests=self.rate_limit):
            raise RemoteUnavailable("Rate limit exceeded")

        try:
            async with Timer("remote_translate", tags={"provider": self.provider.name}):
                async with session.request(
                    req.method,
                    URL(req.url, encoded=True),
                    data=req.body,
                    headers=req.headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    status = resp.status
                    body = b""
                    async for chunk in resp.content.iter_chunked(8192):
                        body += chunk
                        if len(body) > MAX_RESPONSE_SIZE:
                            raise RemoteUnavailable("Response too large")
        except RemoteUnavailable:
            raise
        except asyncio.TimeoutError as e:
            raise RemoteUnavailable("Timeout") from e
        except aiohttp.ClientError as e:
            raise RemoteUnavailable(f"Network error: {e}") from e
        except Exception as e:
            raise RemoteUnavailable(f"Unexpected error: {e}") from e

        return self.provider.parse_response(status, decode_json(body))
