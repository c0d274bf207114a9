"""Loguru configuration for the billing API — console or JSON lines."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from omegaconf import DictConfig

# Supabase SDK internals and HTTP transports log every request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest", "gotrue", "supabase", "urllib3")

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (uvicorn, SDKs) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(cfg: DictConfig) -> None:
    """Configure loguru from the ``logging`` section of the Hydra config.

    Parameters
    ----------
    cfg:
        Keys ``level``, ``colored``, ``format`` (``"pretty"`` or
        ``"structured"``) and optional ``file`` (path of an extra rotating
        log file).
    """
    logger.remove()

    level: str = str(getattr(cfg, "level", "INFO")).upper()
    structured: bool = getattr(cfg, "format", "pretty") == "structured"
    colorize: bool = bool(getattr(cfg, "colored", True))
    log_file = getattr(cfg, "file", None)

    if structured:
        logger.add(sys.stderr, level=level, serialize=True, colorize=False)
    else:
        logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=colorize)

    if log_file:
        logger.add(log_file, level=level, serialize=structured, rotation="10 MB", retention=5)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info("Logging configured (level={level}, structured={s})", level=level, s=structured)
