# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.config import Settings
from tasktrack.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test temp dir (no env / .env involved)."""
    return Settings(
        app_name="tasktrack-test",
        log_level="WARNING",
        data_dir=tmp_path,
        db_path=tmp_path / "tasks.db",
        log_dir=tmp_path / "logs",
        clear_screen=False,
        color=False,
    )


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    """Real SQLite store, already initialized."""
    s = TaskStore(settings.db_path)
    s.ensure_initialized()
    return s


@pytest.fixture()
def restore_logging():
    """Remove handlers added by setup_logging() and restore the root logger."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
