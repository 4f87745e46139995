from __future__ import annotations

from pathlib import Path

import pytest

from wf2.domain.tasks import models as t


def test_sequence_children_are_stored_as_tuple() -> None:
    s = t.Sequence([t.notify("a"), t.notify("b")])

    assert isinstance(s.tasks, tuple)
    assert s == t.seq(t.notify("a"), t.notify("b"))


def test_tasks_are_immutable() -> None:
    task = t.simple_command("ls")

    with pytest.raises(AttributeError):
        task.command = "rm -rf /"  # type: ignore[misc]


def test_constructors_wrap_paths() -> None:
    assert t.file_exists("a/b", "d") == t.PathExists(Path("a/b"), "d")
    assert t.dir_create("x", "d").path == Path("x")
    assert t.dir_remove("x", "d").path == Path("x")
    assert t.file_write("f", "d", b"1").content == b"1"


def test_task_err_list_is_single_error_notification() -> None:
    tasks = t.task_err_list(ValueError("missing domains"))

    assert tasks == [t.Notify("missing domains", error=True)]


def test_describe_tasks_indents_sequence_children() -> None:
    tasks = [
        t.file_exists("/tmp/x", "must exist"),
        t.seq(t.simple_command("docker cp a b"), t.notify("+ a")),
        t.notify_error("boom"),
        t.file_write("/tmp/.env", "env file", b"A=1\n"),
    ]

    assert t.describe_tasks(tasks) == [
        "[file exists] /tmp/x (must exist)",
        "[sequence] 2 tasks",
        "  [command] docker cp a b",
        "  [notify] + a",
        "[error] boom",
        "[file write] /tmp/.env (env file, 4 bytes)",
    ]


def test_describe_task_rejects_unknown_type() -> None:
    with pytest.raises(TypeError):
        t.describe_task("not a task")  # type: ignore[arg-type]
