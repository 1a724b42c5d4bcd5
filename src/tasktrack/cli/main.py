# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, makes sure the task database exists,
then runs a single menu session.
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..render.theme import color_enabled
from ..tasks.task_store import StorageError, TaskStore
from .shell import ReadLine, run_shell

logger = logging.getLogger(__name__)


def main(*, settings: Settings | None = None, read_line: ReadLine = input) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))
    logger.info("Starting %s (db=%s)", settings.app_name, settings.db_path)

    store = TaskStore(settings.db_path)
    try:
        if store.ensure_initialized():
            print("Initializing database")
        return run_shell(
            store,
            read_line=read_line,
            clear=settings.clear_screen,
            use_color=color_enabled(sys.stdout, settings.color),
        )
    except StorageError as e:
        logger.exception("Storage failure")
        print(f"error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
