# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import IntEnum

CREATED_FORMAT = "%Y-%m-%d %H:%M:%S.%f UTC"


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Stored as a small integer code (0..3). Unknown codes are corruption and
    are never mapped to a default.
    """

    TODO = 0
    DOING = 1
    CANCELLED = 2
    COMPLETED = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_db(cls, raw: object) -> TaskStatus:
        # bool is an int subclass; a stored True/False is not a status code.
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise ValueError(f"invalid task status code: {raw!r}")
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"unknown task status code: {raw!r}") from None


def format_created(dt: datetime) -> str:
    return dt.astimezone(UTC).strftime(CREATED_FORMAT)


def parse_created(text: str) -> datetime:
    """Parse a `created` value back into an aware UTC datetime."""
    return datetime.strptime(text, CREATED_FORMAT).replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Task:
    summary: str
    assignee: str
    status: TaskStatus
    created: str
    id: int | None = None

    @classmethod
    def new(cls, summary: str, assignee: str, *, now: datetime | None = None) -> Task:
        if now is None:
            now = datetime.now(UTC)
        return cls(
            summary=summary,
            assignee=assignee,
            status=TaskStatus.TODO,
            created=format_created(now),
        )
