"""Logging helpers shared by the engine, the console runner and benchmarks."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

PROJECT_LOGGER = "strassen_multiplication"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = PROJECT_LOGGER) -> logging.Logger:
    """Return a logger that reports through the project handler.

    Module loggers (``strassen_multiplication.*``) propagate to the project
    logger, which owns the single stream handler. Loggers outside the
    project namespace get a handler of their own.

    Parameters
    ----------
    name:
        Logger name; usually ``__name__`` of the calling module.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """

    root = logging.getLogger(PROJECT_LOGGER)
    _ensure_handler(root)
    if name == PROJECT_LOGGER or name.startswith(PROJECT_LOGGER + "."):
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    _ensure_handler(logger)
    return logger


def _ensure_handler(logger: logging.Logger) -> None:
    if logger.handlers:
        return
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)


def set_verbosity(verbose: bool = False, level: Optional[int] = None) -> None:
    """Switch the project logger between INFO and DEBUG (or an explicit level)."""

    if level is None:
        level = logging.DEBUG if verbose else logging.INFO
    get_logger().setLevel(level)


def append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """Append a timestamped JSON record to a JSONL file.

    Parameters
    ----------
    path:
        Destination file path; parent directories are created.
    record:
        Mapping to be serialized on a single line. A ``logged_at`` UTC
        timestamp is added unless the record already carries one.
    """

    payload = dict(record)
    payload.setdefault("logged_at", datetime.now(timezone.utc).isoformat())
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        json.dump(payload, f)
        f.write("\n")
