# /jsonfetch/adapters/http/aiohttp_fetcher.py
from __future__ import annotations

import asyncio
import logging

import aiohttp

from jsonfetch.config import settings

LOG = logging.getLogger("adapter.http_fetcher")


class AiohttpFetcher:
    """
    Loop-aware aiohttp fetcher.
    The session is created lazily and rebuilt when the running loop changes, so
    callers that use asyncio.run more than once never hit a session bound to a
    closed loop. One GET per call, no retries.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float | None = None,
        verify_tls: bool | None = None,
    ) -> None:
        total = settings.TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        self._timeout = aiohttp.ClientTimeout(total=total)
        self._verify_tls = settings.VERIFY_TLS if verify_tls is None else verify_tls
        self._session: aiohttp.ClientSession | None = None
        self._loop: asyncio.AbstractEventLoop | None = None  # track owning loop

    async def _ensure_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()
        loop_changed = self._loop is not None and self._loop is not loop

        if loop_changed:
            # old session belonged to a different (likely closed) loop -> close & reset
            try:
                if self._session and not self._session.closed:
                    await self._session.close()
            finally:
                self._session = None
                self._loop = None

        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                raise_for_status=False,
            )
            self._loop = loop

        return self._session

    async def fetch(self, url: str) -> tuple[int, bytes, str]:
        """
        Returns (status, body, final_url). Transport errors (aiohttp.ClientError,
        TimeoutError) propagate to the caller unchanged.
        """
        sess = await self._ensure_session()
        LOG.info("fetching", extra={"extra": {"url": url, "verify_tls": self._verify_tls}})
        async with sess.get(url, ssl=self._verify_tls, allow_redirects=True) as resp:
            body = await resp.read()
            LOG.info(
                "fetched",
                extra={"extra": {"url": url, "status": resp.status, "bytes": len(body)}},
            )
            return resp.status, body, str(resp.url)

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._loop = None
