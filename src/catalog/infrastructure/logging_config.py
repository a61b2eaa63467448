"""Logging configuration for the catalog.

Console output for people, plus an optional JSONL file for machines.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "catalog"


class JSONLFileHandler(logging.Handler):
    """Writes one JSON object per record to ``<log_dir>/catalog_YYYYMMDD.jsonl``."""

    def __init__(self, log_dir: Path) -> None:
        super().__init__()
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_file = self.log_dir / f"{LOGGER_NAME}_{datetime.now():%Y%m%d}.jsonl"
            entry = {
                "timestamp": datetime.now().isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except Exception:
            self.handleError(record)


def setup_logging(level: int | str = logging.WARNING, log_dir: Path | None = None) -> logging.Logger:
    """Configure the ``catalog`` logger and return it.

    Safe to call more than once; earlier handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(console_handler)

    if log_dir is not None:
        file_handler = JSONLFileHandler(log_dir)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
