# /jsonfetch/adapters/system/logging_cfg.py
from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO


class JSONHandler(logging.StreamHandler):
    def emit(self, record: logging.LogRecord) -> None:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        self.stream.write(json.dumps(payload, default=str) + "\n")
        self.flush()


def configure_logger(
    level: int | str = logging.INFO,
    fmt: str = "json",
    stream: TextIO | None = None,
) -> None:
    stream = stream or sys.stdout
    if fmt == "text":
        handler: logging.Handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
    elif fmt == "json":
        handler = JSONHandler(stream=stream)
    else:
        raise ValueError(f"unknown log format: {fmt!r}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
