# src/tasktrack/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasktrack.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by setup_logging carry these names so a second call
# replaces them without touching anyone else's handlers.
CONSOLE_HANDLER = "tasktrack.console"
FILE_HANDLER = "tasktrack.file"


class _OwnRecordsFilter(logging.Filter):
    """Console shows tasktrack records at its level; everything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasktrack" or record.name.startswith("tasktrack."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CONSOLE_HANDLER)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_OwnRecordsFilter())
    return handler


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.set_name(FILE_HANDLER)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasktrack",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Attach a filtered stderr handler and a full DEBUG log file to the root logger.

    The stderr handler stays quiet at the default WARNING level so it does not
    interleave with the menu. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.addHandler(_console_handler(console_level, fmt))
    root.addHandler(_file_handler(log_file, file_level, fmt))
    return log_file


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
