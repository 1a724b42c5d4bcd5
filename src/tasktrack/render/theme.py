# src/tasktrack/render/theme.py

"""ANSI color & style helpers.

Color is decided per output stream:
- NO_COLOR (any value) disables it,
- FORCE_COLOR=1 enables it even when not a TTY,
- otherwise it is on only for a TTY.
"""

from __future__ import annotations

import os
import re
import unicodedata
from typing import TextIO

from ..tasks.task_models import TaskStatus

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

RESET = "\033[0m"
BOLD = "\033[1m"

PRIMARY = "\033[38;5;67m"

STATUS_COLOR: dict[TaskStatus, str] = {
    TaskStatus.TODO: "\033[38;5;73m",
    TaskStatus.DOING: "\033[38;5;228m",
    TaskStatus.CANCELLED: "\033[38;5;245m",
    TaskStatus.COMPLETED: "\033[38;5;150m",
}

HEADER_COLOR = PRIMARY


def color_enabled(stream: TextIO, override: bool | None = None) -> bool:
    if override is not None:
        return override
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").strip().lower() in {"1", "true", "yes", "on"}:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def color(text: str, *styles: str) -> str:
    """Wrap text in the given ANSI styles."""
    if not styles:
        return text
    return "".join(styles) + text + RESET


def visible_len(s: str) -> int:
    """Terminal columns taken by s: escape codes count 0, wide/fullwidth chars count 2."""
    width = 0
    for ch in ANSI_RE.sub("", s):
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width
