from __future__ import annotations

import os

_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def log_level() -> str:
    v = (os.getenv("MAPPRINT_LOG_LEVEL") or "INFO").strip().upper()
    return v if v in _LEVELS else "INFO"


def log_enabled() -> bool:
    v = (os.getenv("MAPPRINT_LOG") or "1").strip().lower()
    return v not in {"0", "false", "no", "off"}
