# /jsonfetch/handlers.py
from __future__ import annotations

import json
import logging
from typing import Any

LOG = logging.getLogger("handler")


def render(data: Any) -> str:
    return json.dumps(data, default=str, ensure_ascii=False)


def handle(data: Any) -> None:
    """Sample continuation: log the fetched payload."""
    LOG.info("Fetched Data: %s", render(data), extra={"extra": {"payload": data}})
