# tests/test_shell.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tasktrack.cli.shell import CLEAR_SEQUENCE, MenuChoice, choose_menu_item, prompt_new_task, run_shell
from tasktrack.tasks.task_models import Task, TaskStatus, parse_created
from tasktrack.tasks.task_store import CorruptTaskError, TaskStore

from .fakes import FailingTaskStore, FakeTaskStore, ScriptedInput


@pytest.mark.parametrize(
    "lines",
    [
        ["abc", "1"],
        ["", "  ", "1"],
        ["0", "3", "-1", "1"],
        ["1.5", "two", "99999999999999999999", " 1 "],
    ],
)
def test_menu_reprompts_until_valid(lines: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    read = ScriptedInput(lines)
    assert choose_menu_item(read) is MenuChoice.SHOW_TASKS
    assert read.remaining == 0
    assert len(read.prompts) == len(lines)
    assert "Show all tasks" in capsys.readouterr().out


def test_menu_reports_out_of_range_choice(capsys: pytest.CaptureFixture[str]) -> None:
    assert choose_menu_item(ScriptedInput(["7", "2"])) is MenuChoice.ADD_TASK
    assert "Invalid choice, try again." in capsys.readouterr().out


def test_prompt_new_task_trims_and_stamps() -> None:
    now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    task = prompt_new_task(ScriptedInput(["  Write spec \n", "\tAlice  "]), now=now)
    assert task == Task(
        summary="Write spec",
        assignee="Alice",
        status=TaskStatus.TODO,
        created="2024-01-02 03:04:05.000000 UTC",
    )


def test_show_tasks_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeTaskStore([Task(id=1, summary="Write spec", assignee="Alice", status=TaskStatus.DOING, created="c")])
    code = run_shell(fake, read_line=ScriptedInput(["1"]), clear=False)  # type: ignore[arg-type]
    out = capsys.readouterr().out
    assert code == 0
    assert fake.list_calls == 1
    assert "Write spec" in out and "Doing" in out


def test_add_task_flow_persists_one_todo(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeTaskStore()
    read = ScriptedInput(["2", "Write spec", "Alice"])
    assert run_shell(fake, read_line=read, clear=False) == 0  # type: ignore[arg-type]

    assert len(fake.tasks) == 1
    stored = fake.tasks[0]
    assert (stored.id, stored.summary, stored.assignee, stored.status) == (1, "Write spec", "Alice", TaskStatus.TODO)
    assert fake.list_calls == 0
    assert "The task added successfully (id=1)." in capsys.readouterr().out


def test_add_task_failure_prints_generic_message(capsys: pytest.CaptureFixture[str]) -> None:
    read = ScriptedInput(["2", "Write spec", "Alice"])
    assert run_shell(FailingTaskStore(), read_line=read, clear=False) == 0  # type: ignore[arg-type]
    out = capsys.readouterr().out
    assert "Failed to add the task." in out
    assert "disk I/O error" not in out


def test_add_blank_summary_is_reported_as_failure(store: TaskStore, capsys: pytest.CaptureFixture[str]) -> None:
    run_shell(store, read_line=ScriptedInput(["2", "   ", "Alice"]), clear=False)
    assert "Failed to add the task." in capsys.readouterr().out
    assert store.count_tasks() == 0


def test_show_tasks_corruption_propagates() -> None:
    with pytest.raises(CorruptTaskError):
        run_shell(FailingTaskStore(), read_line=ScriptedInput(["1"]), clear=False)  # type: ignore[arg-type]


def test_eof_at_menu_exits_without_action(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeTaskStore()
    assert run_shell(fake, read_line=ScriptedInput(["nope"]), clear=False) == 0  # type: ignore[arg-type]
    assert fake.tasks == []
    assert fake.list_calls == 0


def test_eof_during_add_flow_stores_nothing() -> None:
    fake = FakeTaskStore()
    run_shell(fake, read_line=ScriptedInput(["2", "only a summary"]), clear=False)  # type: ignore[arg-type]
    assert fake.tasks == []


def test_screen_is_cleared_at_start_and_before_results(capsys: pytest.CaptureFixture[str]) -> None:
    run_shell(FakeTaskStore(), read_line=ScriptedInput(["1"]), clear=True)  # type: ignore[arg-type]
    out = capsys.readouterr().out
    assert out.startswith(CLEAR_SEQUENCE)
    assert out.count(CLEAR_SEQUENCE) == 2


def test_real_store_end_to_end(store: TaskStore, capsys: pytest.CaptureFixture[str]) -> None:
    run_shell(store, read_line=ScriptedInput(["2", "Write spec", "Alice"]), clear=False)
    run_shell(store, read_line=ScriptedInput(["2", "Review spec", "Bob"]), clear=False)
    capsys.readouterr()

    run_shell(store, read_line=ScriptedInput(["1"]), clear=False)
    out = capsys.readouterr().out
    assert out.index("Write spec") < out.index("Review spec")
    assert out.count("Todo") == 2

    tasks = store.list_tasks()
    assert [t.id for t in tasks] == [1, 2]
    assert all(parse_created(t.created).tzinfo is UTC for t in tasks)
