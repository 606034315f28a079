# tests/fakes.py
from __future__ import annotations

import asyncio
from typing import Any


class FakeFetcher:
    """Replays one canned outcome per call: a (status, body) pair or an exception."""

    def __init__(self, status: int = 200, body: bytes = b"{}", exc: Exception | None = None):
        self.status = status
        self.body = body
        self.exc = exc
        self.calls: list[str] = []

    async def fetch(self, url: str) -> tuple[int, bytes, str]:
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.status, self.body, url


class GatedFetcher(FakeFetcher):
    """Blocks inside fetch() until release() is called."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    async def fetch(self, url: str) -> tuple[int, bytes, str]:
        await self._gate.wait()
        return await super().fetch(url)


class Recorder:
    def __init__(self) -> None:
        self.received: list[Any] = []

    def __call__(self, data: Any) -> None:
        self.received.append(data)
