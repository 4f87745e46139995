from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from wf2.core.interfaces import CommandRunner, Reporter


class RecordingRunner(CommandRunner):
    """Records every command; exit codes can be scripted per command"""

    def __init__(self, exit_codes: Optional[dict[str, int]] = None, raise_on: Optional[str] = None) -> None:
        self.calls: list[tuple[str, Optional[Path]]] = []
        self.exit_codes = exit_codes or {}
        self.raise_on = raise_on

    def run(self, command_line: str, cwd: Optional[Path] = None) -> int:
        self.calls.append((command_line, cwd))
        if command_line == self.raise_on:
            raise FileNotFoundError(2, "No such file or directory", command_line)
        return self.exit_codes.get(command_line, 0)

    @property
    def commands(self) -> list[str]:
        return [c for c, _ in self.calls]


class RecordingReporter(Reporter):
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_runner():
    return RecordingRunner
