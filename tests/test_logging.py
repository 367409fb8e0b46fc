"""Tests for the loguru logging helpers."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from authorship.config import Settings
from authorship.utils.logging import configure_logging, get_logger, logging_context


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    settings = Settings(config_dir=tmp_path, paths={"logs_dir": tmp_path / "logs"})
    configure_logging(settings, level="DEBUG")
    get_logger(module=__name__).info("policy loaded")
    logger.complete()
    assert "policy loaded" in settings.log_file.read_text(encoding="utf-8")


def test_logging_context_binds_fields() -> None:
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    try:
        with logging_context(run_id="run-1", step="resolve"):
            get_logger(module=__name__).info("inside")
        get_logger(module=__name__).info("outside")
    finally:
        logger.remove(handler_id)
    assert records[0]["extra"]["run_id"] == "run-1"
    assert records[0]["extra"]["step"] == "resolve"
    assert records[1]["extra"]["run_id"] == "-"
