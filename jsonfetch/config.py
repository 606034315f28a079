# /jsonfetch/config.py
from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    # env-derived defaults go through validation too
    model_config = ConfigDict(validate_default=True)

    FETCH_URL: str = os.getenv("FETCH_URL", "https://jsonplaceholder.typicode.com/todos/1")
    VERIFY_TLS: bool = os.getenv("VERIFY_TLS", "true").lower() == "true"

    # aiohttp's own default total timeout
    TIMEOUT_SECONDS: float = float(os.getenv("TIMEOUT_SECONDS", "300.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: Literal["json", "text"] = os.getenv("LOG_FORMAT", "json").lower()


settings = Settings()
