from __future__ import annotations

import runpy

import pytest


def test_init_exports_version() -> None:
    import wf2

    assert "__version__" in wf2.__all__
    assert isinstance(wf2.__version__, str)
    assert wf2.__version__


def test_main_module_runs_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    import wf2.adapters.cli.app as app_mod

    calls = []
    monkeypatch.setattr(app_mod, "run", lambda: calls.append("run"))

    runpy.run_module("wf2.__main__", run_name="__main__")

    assert calls == ["run"]


def test_pass_thru_commands_are_registered() -> None:
    from wf2.adapters.cli.app import app

    names = {command.name or command.callback.__name__ for command in app.registered_commands}

    assert {"up", "down", "stop", "exec", "db-import", "db-dump", "doctor", "pull", "push"} <= names
    assert {"composer", "npm", "m", "dc"} <= names
