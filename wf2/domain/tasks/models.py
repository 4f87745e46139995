"""
Task domain models

A task describes exactly one effect. Planning code builds lists of tasks,
the executor consumes them; nothing else inspects them except for display.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union


@dataclass(frozen=True)
class RunCommand:
    """Run a fully formatted shell command line"""
    command: str


@dataclass(frozen=True)
class Notify:
    """Print a message. Never fails."""
    message: str
    error: bool = False


@dataclass(frozen=True)
class PathExists:
    """Precondition: the path must exist on the host"""
    path: Path
    description: str = ""


@dataclass(frozen=True)
class CreateDirectory:
    """Create a directory and any missing parents"""
    path: Path
    description: str = ""


@dataclass(frozen=True)
class RemoveDirectory:
    """Recursively remove a directory"""
    path: Path
    description: str = ""


@dataclass(frozen=True)
class WriteFile:
    """Write opaque bytes to a file, creating parent directories"""
    path: Path
    description: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class Sequence:
    """Ordered group of tasks with the same halt rule as a flat list"""
    tasks: Tuple["Task", ...]
    
    def __post_init__(self):
        object.__setattr__(self, "tasks", tuple(self.tasks))


Task = Union[RunCommand, Notify, PathExists, CreateDirectory, RemoveDirectory, WriteFile, Sequence]


# ============================================================
# Constructors
# ============================================================

def simple_command(command: str) -> RunCommand:
    return RunCommand(command)


def notify(message: str) -> Notify:
    return Notify(message)


def notify_error(message: str) -> Notify:
    return Notify(message, error=True)


def task_err_list(error: Exception) -> List[Task]:
    """Single-task plan reporting a planning failure"""
    return [notify_error(str(error))]


def file_exists(path: Union[str, Path], description: str) -> PathExists:
    return PathExists(Path(path), description)


def dir_create(path: Union[str, Path], description: str) -> CreateDirectory:
    return CreateDirectory(Path(path), description)


def dir_remove(path: Union[str, Path], description: str) -> RemoveDirectory:
    return RemoveDirectory(Path(path), description)


def file_write(path: Union[str, Path], description: str, content: bytes) -> WriteFile:
    return WriteFile(Path(path), description, content)


def seq(*tasks: Task) -> Sequence:
    return Sequence(tasks)


# ============================================================
# Display
# ============================================================

def describe_task(task: Task) -> str:
    """One-line human readable form of a single (non-sequence) task"""
    if isinstance(task, RunCommand):
        return f"[command] {task.command}"
    if isinstance(task, Notify):
        return f"[{'error' if task.error else 'notify'}] {task.message}"
    if isinstance(task, PathExists):
        return f"[file exists] {task.path} ({task.description})"
    if isinstance(task, CreateDirectory):
        return f"[dir create] {task.path} ({task.description})"
    if isinstance(task, RemoveDirectory):
        return f"[dir remove] {task.path} ({task.description})"
    if isinstance(task, WriteFile):
        return f"[file write] {task.path} ({task.description}, {len(task.content)} bytes)"
    if isinstance(task, Sequence):
        return f"[sequence] {len(task.tasks)} tasks"
    raise TypeError(f"Unknown task type: {type(task).__name__}")


def describe_tasks(tasks: List[Task], indent: int = 0) -> List[str]:
    """
    Render a task list for dry runs.
    
    Sequence children are listed below their parent, indented by two spaces.
    """
    lines = []
    prefix = "  " * indent
    for task in tasks:
        lines.append(prefix + describe_task(task))
        if isinstance(task, Sequence):
            lines.extend(describe_tasks(list(task.tasks), indent + 1))
    return lines
