"""Loguru helpers for the --debug switch."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dcrctl.utils.helpers import app_data_dir, ensure_dir

DEBUG_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <level>{message}</level>"

_SINK_IDS: dict[str, int] = {}


def log_dir() -> Path:
    return app_data_dir("dcrctl") / "logs"


def ensure_rotating_log_file(name: str, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given name."""
    log_path = log_dir() / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    ensure_dir(log_path.parent)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path


def configure_logging(debug: bool) -> None:
    """Keep dcrctl silent unless --debug is given."""
    if not debug:
        logger.disable("dcrctl")
        return
    logger.remove()
    _SINK_IDS.clear()
    logger.add(sys.stderr, level="DEBUG", format=DEBUG_FORMAT)
    logger.enable("dcrctl")
    try:
        ensure_rotating_log_file("dcrctl", level="DEBUG")
    except OSError as e:
        logger.warning("Log file unavailable: {}", e)
