# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE tasks (
    id INTEGER PRIMARY KEY,
    summary TEXT NOT NULL,
    assignee TEXT NOT NULL,
    status INTEGER NOT NULL,
    created TEXT NOT NULL
)
"""


class StorageError(Exception):
    """Base class for every failure raised by TaskStore."""


class StorageOpenError(StorageError):
    pass


class SchemaError(StorageError):
    pass


class InsertError(StorageError):
    pass


class CorruptTaskError(StorageError):
    """A stored row cannot be decoded into a Task (e.g. unknown status code)."""


class TaskStore:
    """
    SQLite task store.

    The file's absence is the signal to create the schema; an existing file
    is trusted as already initialized.

    Each method opens its own SQLite connection and closes it before
    returning, so nothing is held open while the user is typing.
    """

    def __init__(self, db_path: str | Path = "tasks.db") -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path))
        except sqlite3.Error as e:
            raise StorageOpenError(f"cannot open database {self._db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        try:
            status = TaskStatus.from_db(row["status"])
        except ValueError as e:
            raise CorruptTaskError(f"task id={row['id']}: {e}") from e
        return Task(
            id=int(row["id"]),
            summary=str(row["summary"]),
            assignee=str(row["assignee"]),
            status=status,
            created=str(row["created"]),
        )

    # ---- public API ----

    def ensure_initialized(self) -> bool:
        """
        Create the database file and schema if the file does not exist yet.

        Returns True if the schema was created, False if the file was already
        there (no schema action is taken in that case).
        """
        if self._db_path.exists():
            logger.debug("TaskStore db=%s already present", self._db_path)
            return False

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageOpenError(f"cannot create directory for {self._db_path}: {e}") from e

        conn = self._get_conn()
        try:
            conn.execute(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            # Leave no half-initialized file behind; next run will retry.
            with contextlib.suppress(OSError):
                self._db_path.unlink()
            raise SchemaError(f"cannot create schema in {self._db_path}: {e}") from e
        conn.close()

        logger.info("TaskStore initialized db=%s", self._db_path)
        return True

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        except sqlite3.Error as e:
            raise StorageError(f"cannot count tasks: {e}") from e
        finally:
            conn.close()

    def add_task(self, task: Task) -> int:
        if task.id is not None:
            raise ValueError("task id is assigned by the store")
        if not task.summary or not task.summary.strip():
            raise ValueError("summary is required")

        conn = self._get_conn()
        try:
            cur = conn.execute(
                "INSERT INTO tasks (summary, assignee, status, created) VALUES (?, ?, ?, ?)",
                (task.summary, task.assignee, int(task.status), task.created),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise InsertError(f"cannot insert task: {e}") from e
        finally:
            conn.close()

        rowid = cur.lastrowid
        if rowid is None:
            raise InsertError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s status=%s", task_id, task.status.label)
        return task_id

    def list_tasks(self) -> list[Task]:
        """Return all tasks in insertion (id) order."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT id, summary, assignee, status, created FROM tasks ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"cannot read tasks: {e}") from e
        finally:
            conn.close()
        return [self._row_to_task(r) for r in rows]
