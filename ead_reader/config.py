from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the scripts (env vars or .env)."""

    source_id: str = "ead"
    log_level: int = logging.WARNING
    fetch_timeout_s: int = 30

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        source_id = os.environ.get("EAD_READER_SOURCE_ID", "").strip() or cls.source_id

        level_name = os.environ.get("EAD_READER_LOG_LEVEL", "").strip().upper() or "WARNING"
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"EAD_READER_LOG_LEVEL: unknown log level {level_name!r}")

        timeout_raw = os.environ.get("EAD_READER_FETCH_TIMEOUT_S", "").strip()
        try:
            timeout_s = int(timeout_raw) if timeout_raw else cls.fetch_timeout_s
        except ValueError:
            raise ValueError(f"EAD_READER_FETCH_TIMEOUT_S: not an integer: {timeout_raw!r}") from None

        return cls(source_id=source_id, log_level=level, fetch_timeout_s=timeout_s)
