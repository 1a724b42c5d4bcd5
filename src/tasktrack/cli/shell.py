# src/tasktrack/cli/shell.py

"""
Interactive menu.

One run performs exactly one action: show all tasks, or add one task.
The menu only decides *which* action; collecting task fields is a separate
step taken after the choice is made.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from enum import IntEnum

from ..render.table import print_tasks
from ..tasks.task_models import Task
from ..tasks.task_store import InsertError, TaskStore

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]

CLEAR_SEQUENCE = "\x1b[2J\x1b[1;1H"


class MenuChoice(IntEnum):
    SHOW_TASKS = 1
    ADD_TASK = 2


MENU_TEXT = "Choose one of the items:\n  1) Show all tasks\n  2) Add new task"


def clear_screen() -> None:
    sys.stdout.write(CLEAR_SEQUENCE)
    sys.stdout.flush()


def choose_menu_item(read_line: ReadLine = input) -> MenuChoice:
    """Show the menu and re-prompt until the user picks a valid item."""
    print(MENU_TEXT)
    while True:
        raw = read_line("> ").strip()
        try:
            number = int(raw)
        except ValueError:
            print(f"Not a number: {raw!r}. Enter 1 or 2.")
            continue
        try:
            return MenuChoice(number)
        except ValueError:
            print("Invalid choice, try again.")


def prompt_new_task(read_line: ReadLine = input, *, now: datetime | None = None) -> Task:
    summary = read_line("Enter the task summary: ").strip()
    assignee = read_line("Enter the task assignee: ").strip()
    return Task.new(summary, assignee, now=now)


def _show_tasks(store: TaskStore, *, use_color: bool) -> None:
    tasks = store.list_tasks()
    logger.debug("Showing %d tasks", len(tasks))
    print_tasks(tasks, use_color=use_color)


def _add_task(store: TaskStore, read_line: ReadLine) -> None:
    task = prompt_new_task(read_line)
    try:
        task_id = store.add_task(task)
    except (InsertError, ValueError):
        logger.exception("Failed to add task")
        print("Failed to add the task.")
        return
    print(f"The task added successfully (id={task_id}).")


def run_shell(
    store: TaskStore,
    *,
    read_line: ReadLine = input,
    clear: bool = True,
    use_color: bool = False,
) -> int:
    """
    Run one menu session and return the exit code.

    Storage errors while listing are not caught here; they are fatal and
    handled by the entry point.
    """
    if clear:
        clear_screen()

    try:
        choice = choose_menu_item(read_line)
        if clear:
            clear_screen()
        if choice is MenuChoice.SHOW_TASKS:
            _show_tasks(store, use_color=use_color)
        else:
            _add_task(store, read_line)
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, exiting without changes.")
        print()
    return 0
