"""Shared utilities for the authorship package."""

from .logging import configure_logging, get_logger, logging_context

__all__ = ["configure_logging", "get_logger", "logging_context"]
