# /jsonfetch/ports/http_fetcher.py
from __future__ import annotations

from typing import Protocol


class HTTPFetcherPort(Protocol):
    async def fetch(self, url: str) -> tuple[int, bytes, str]:
        """Issue one GET; return (status, body, final_url)."""
