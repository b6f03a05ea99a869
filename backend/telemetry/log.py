from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

from telemetry.config import log_enabled, log_level

if TYPE_CHECKING:
    from loguru import Logger


def setup_logging(level: str | None = None) -> "Logger":
    """Configure the operator log stream (stderr) with loguru."""
    logger.remove()
    if not log_enabled():
        return logger
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level or log_level(),
    )
    return logger
