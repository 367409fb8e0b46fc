"""Centralised logging configuration built on loguru."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:  # pragma: no cover
    from ..config.settings import Settings

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[run_id]}</cyan> | "
    "<magenta>{extra[step]}</magenta> | "
    "{message}"
)

logger.configure(extra={"run_id": "-", "step": "-"})


def configure_logging(settings: "Settings | None" = None, level: str | None = None) -> None:
    """Initialise loguru sinks according to the active settings."""

    if settings is None:
        from ..config.settings import get_settings

        settings = get_settings()
    resolved_level = level or settings.log_level

    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved_level,
        backtrace=False,
        diagnose=False,
        format=_LOG_FORMAT,
    )
    if settings.create_dirs:
        log_path = settings.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="14 days",
            format=_LOG_FORMAT,
            level=resolved_level,
        )
    logger.configure(extra={"run_id": "-", "step": "-"})


def get_logger(**context: Any):
    """Return a contextualised logger instance."""

    return logger.bind(**context)


@contextmanager
def logging_context(**context: Any):
    """Context manager that temporarily binds structured context fields."""

    with logger.contextualize(**context):
        yield logger


__all__ = ["configure_logging", "get_logger", "logging_context"]
