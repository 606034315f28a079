# /jsonfetch/__main__.py
from __future__ import annotations

import asyncio
import logging

from jsonfetch.adapters.http.aiohttp_fetcher import AiohttpFetcher
from jsonfetch.adapters.system.logging_cfg import configure_logger
from jsonfetch.config import settings
from jsonfetch.domain.fetch_service import FetchService
from jsonfetch.handlers import handle

LOG = logging.getLogger("jsonfetch")


async def run() -> None:
    fetcher = AiohttpFetcher()
    try:
        await FetchService(fetcher, url=settings.FETCH_URL).fetch(handle)
    finally:
        await fetcher.close()


def main() -> int:
    configure_logger(settings.LOG_LEVEL, settings.LOG_FORMAT)
    asyncio.run(run())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
