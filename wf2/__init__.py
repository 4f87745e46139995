"""
wf2 - multi-container development environment tool

Turns high-level operations (up, down, push, pull, db-import, ...) into an
ordered list of tasks and runs them one at a time:
- Recipes plan tasks from a Context and an operation request
- The executor runs tasks in order and halts on the first failure
- Planning never touches containers, so plans can be inspected or printed
"""

__version__ = "0.1.0"

from .core import Context, Term
from .domain.recipes import M2Recipe, get_recipe, resolve, requests
from .domain.tasks import (
    RunCommand,
    Notify,
    PathExists,
    CreateDirectory,
    RemoveDirectory,
    WriteFile,
    Sequence,
    Executor,
    describe_tasks,
)

__all__ = [
    # Version
    "__version__",
    # Context
    "Context",
    "Term",
    # Recipes
    "M2Recipe",
    "get_recipe",
    "resolve",
    "requests",
    # Tasks
    "RunCommand",
    "Notify",
    "PathExists",
    "CreateDirectory",
    "RemoveDirectory",
    "WriteFile",
    "Sequence",
    "Executor",
    "describe_tasks",
]
