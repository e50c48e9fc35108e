"""
logger.py: Console and file logging for the game.

Every module logs through get_logger(); the CLI calls setup_logging() once.
"""

from __future__ import annotations

import json
import logging
import sys

ROOT_LOGGER = "flappy_arcade"
CONSOLE_FORMAT = "%(asctime)s %(levelname).1s %(short_name)s: %(message)s%(data_suffix)s"


class _Tagged(logging.Filter):
    """Adds short_name and data_suffix so CONSOLE_FORMAT can stay declarative."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.short_name = record.name.rpartition(".")[2]
        data = getattr(record, "data", None)
        record.data_suffix = f" {json.dumps(data, default=str)}" if data else ""
        return True


class JsonLinesFormatter(logging.Formatter):
    """Game log file format: one JSON record per line, snapshot data inline."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "t": round(record.created, 3),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }
        if getattr(record, "data", None):
            entry["data"] = record.data
        return json.dumps(entry, default=str)


def setup_logging(level: str = "info", log_file: str | None = None) -> logging.Logger:
    """Attach a stderr handler (and a JSON-lines file handler if asked) to the game's root logger."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.addFilter(_Tagged())
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JsonLinesFormatter())
        root.addHandler(file_handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
