# src/tasktrack/render/table.py

"""Bordered, center-justified console table for a list of tasks."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from ..tasks.task_models import Task
from .theme import BOLD, HEADER_COLOR, STATUS_COLOR, color, visible_len

HEADERS: tuple[str, ...] = ("ID", "Summary", "Assignee", "Status")
SEP = "|"
CORNER = "+"
PAD = 1

CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def _flat(text: str) -> str:
    # One cell is one line; tabs and newlines would break the borders.
    return CONTROL_RE.sub(" ", text)


def _cells(task: Task, use_color: bool) -> list[str]:
    status = task.status.label
    if use_color:
        status = color(status, STATUS_COLOR.get(task.status, ""))
    return [
        "" if task.id is None else str(task.id),
        _flat(task.summary),
        _flat(task.assignee),
        status,
    ]


def _center(cell: str, width: int) -> str:
    # str.center() would count escape codes as characters.
    gap = width - visible_len(cell)
    if gap <= 0:
        return cell
    left = gap // 2
    return " " * left + cell + " " * (gap - left)


def _row_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    pad = " " * PAD
    parts = [pad + _center(c, w) + pad for c, w in zip(cells, widths, strict=True)]
    return SEP + SEP.join(parts) + SEP


def _rule(widths: Sequence[int]) -> str:
    return CORNER + CORNER.join("-" * (w + 2 * PAD) for w in widths) + CORNER


def render_table(tasks: Sequence[Task], *, use_color: bool = False) -> str:
    """
    Render tasks as a table with columns ID, Summary, Assignee, Status.

    Every cell is centered in its column; the header row is bold and colored
    when use_color is set. An empty list yields the header row only.
    """
    rows = [_cells(t, use_color) for t in tasks]

    widths = [len(h) for h in HEADERS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], visible_len(cell))

    header = list(HEADERS)
    if use_color:
        header = [color(h, BOLD, HEADER_COLOR) for h in header]

    rule = _rule(widths)
    lines = [rule, _row_line(header, widths), rule]
    for row in rows:
        lines.append(_row_line(row, widths))
        lines.append(rule)
    return "\n".join(lines)


def print_tasks(tasks: Sequence[Task], *, use_color: bool = False, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(render_table(tasks, use_color=use_color) + "\n")
    out.flush()
