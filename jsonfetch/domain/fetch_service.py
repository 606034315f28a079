# /jsonfetch/domain/fetch_service.py
from __future__ import annotations

import asyncio
import enum
import inspect
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from jsonfetch.config import settings
from jsonfetch.ports.http_fetcher import HTTPFetcherPort

LOG = logging.getLogger("fetch_service")

Continuation = Callable[[Any], Any]  # may return an awaitable

# ==== DTOs ====


class FetchErrorKind(str, enum.Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    CONTINUATION = "continuation"


@dataclass(slots=True)
class FetchResultDTO:
    url: str
    ok: bool
    status: int | None = None
    payload: Any = None
    error_kind: FetchErrorKind | None = None
    error: str | None = None


# ==== Service ====


class FetchService:
    """
    Fetch one JSON document and hand it to a continuation.

    The continuation runs at most once per call and only after a successful
    request and decode. Every failure ends up as a single ``Error:`` log line;
    nothing is raised to the caller and nothing is retried.
    """

    def __init__(
        self,
        fetcher: HTTPFetcherPort,
        *,
        url: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.url = settings.FETCH_URL if url is None else url
        self.log = logger or LOG

    @staticmethod
    def _describe(exc: BaseException) -> str:
        detail = str(exc)
        return f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__

    def _failure(
        self, kind: FetchErrorKind, exc: BaseException, status: int | None = None
    ) -> FetchResultDTO:
        return FetchResultDTO(
            url=self.url,
            ok=False,
            status=status,
            error_kind=kind,
            error=self._describe(exc),
        )

    def _report(self, result: FetchResultDTO) -> None:
        self.log.error(
            "Error: %s",
            result.error,
            extra={
                "extra": {
                    "url": result.url,
                    "kind": result.error_kind.value if result.error_kind else None,
                    "status": result.status,
                }
            },
        )

    async def fetch_json(self) -> FetchResultDTO:
        """One GET + JSON decode. Never raises; the outcome is in the DTO."""
        try:
            status, body, _final_url = await self.fetcher.fetch(self.url)
        except Exception as e:
            return self._failure(FetchErrorKind.TRANSPORT, e)

        # status is not inspected: any body that decodes is a payload
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as e:
            return self._failure(FetchErrorKind.DECODE, e, status)

        return FetchResultDTO(url=self.url, ok=True, status=status, payload=payload)

    async def fetch(self, continuation: Continuation) -> None:
        result = await self.fetch_json()
        if not result.ok:
            self._report(result)
            return

        try:
            ret = continuation(result.payload)
            if inspect.isawaitable(ret):
                await ret
        except Exception as e:
            self._report(self._failure(FetchErrorKind.CONTINUATION, e, result.status))

    def start(self, continuation: Continuation) -> asyncio.Task[None]:
        """Schedule fetch() on the running loop and return without waiting."""
        return asyncio.get_running_loop().create_task(self.fetch(continuation))
