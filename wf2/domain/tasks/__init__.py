"""
Task domain module
"""
from .models import (
    RunCommand,
    Notify,
    PathExists,
    CreateDirectory,
    RemoveDirectory,
    WriteFile,
    Sequence,
    Task,
    describe_tasks,
)
from .executor import Executor, ExecutorState
from .runner import SubprocessRunner

__all__ = [
    "RunCommand",
    "Notify",
    "PathExists",
    "CreateDirectory",
    "RemoveDirectory",
    "WriteFile",
    "Sequence",
    "Task",
    "describe_tasks",
    "Executor",
    "ExecutorState",
    "SubprocessRunner",
]
