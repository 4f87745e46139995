"""
Sequential task executor
"""
import shutil
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ...core.exceptions import TaskError, TaskHalted
from ...core.interfaces import CommandRunner, Reporter
from ...core.logging import get_logger
from .models import (
    CreateDirectory,
    Notify,
    PathExists,
    RemoveDirectory,
    RunCommand,
    Sequence,
    Task,
    WriteFile,
    describe_task,
)
from .runner import SubprocessRunner

logger = get_logger(__name__)


class ExecutorState(Enum):
    RUNNING = "running"
    HALTED = "halted"


class Executor:
    """
    Runs a task list top to bottom, one task at a time.
    
    The first failing task moves the executor to HALTED and every task
    queued after it is dropped. Notifications cannot fail. A Sequence
    propagates a child failure exactly like a flat list would.
    """
    
    def __init__(
        self,
        reporter: Reporter,
        runner: Optional[CommandRunner] = None,
        cwd: Optional[Path] = None,
    ):
        """
        Initialize executor.
        
        Args:
            reporter: Receives notification messages
            runner: Command runner (defaults to SubprocessRunner)
            cwd: Working directory for spawned commands
        """
        self.reporter = reporter
        self.runner = runner or SubprocessRunner()
        self.cwd = cwd
        self.state = ExecutorState.RUNNING
        self.halt_reason: Optional[TaskError] = None
    
    def run(self, tasks: List[Task]) -> None:
        """
        Execute every task in order.
        
        Raises:
            TaskHalted: On the first failing task
        """
        self.state = ExecutorState.RUNNING
        self.halt_reason = None
        try:
            self._run_all(tasks)
        except TaskError as e:
            self.state = ExecutorState.HALTED
            self.halt_reason = e
            logger.warning(f"halted: {e}")
            raise TaskHalted(str(e), task=e.task, exit_code=e.exit_code) from e
    
    def _run_all(self, tasks) -> None:
        for task in tasks:
            self._run_one(task)
    
    def _run_one(self, task: Task) -> None:
        logger.debug(describe_task(task))
        
        if isinstance(task, RunCommand):
            self._run_command(task)
        elif isinstance(task, Notify):
            if task.error:
                self.reporter.error(task.message)
            else:
                self.reporter.info(task.message)
        elif isinstance(task, PathExists):
            if not task.path.exists():
                raise TaskError(
                    f"Precondition failed: {task.path} does not exist ({task.description})",
                    task=task,
                )
        elif isinstance(task, CreateDirectory):
            self._fs_op(task, lambda: task.path.mkdir(parents=True, exist_ok=True))
        elif isinstance(task, RemoveDirectory):
            self._fs_op(task, lambda: shutil.rmtree(task.path))
        elif isinstance(task, WriteFile):
            self._fs_op(task, lambda: _write_bytes(task.path, task.content))
        elif isinstance(task, Sequence):
            self._run_all(task.tasks)
        else:
            raise TypeError(f"Unknown task type: {type(task).__name__}")
    
    def _run_command(self, task: RunCommand) -> None:
        try:
            code = self.runner.run(task.command, cwd=self.cwd)
        except OSError as e:
            raise TaskError(f"Could not spawn `{task.command}`: {e}", task=task) from e
        if code != 0:
            raise TaskError(
                f"Command failed with exit code {code}: {task.command}",
                task=task,
                exit_code=code,
            )
    
    @staticmethod
    def _fs_op(task, op) -> None:
        try:
            op()
        except OSError as e:
            raise TaskError(f"{task.description}: {e}", task=task) from e


def _write_bytes(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
