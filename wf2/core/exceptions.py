"""
Unified exception definitions
"""
from typing import Optional


class Wf2Error(Exception):
    """Base exception class"""
    pass


class ConfigError(Wf2Error):
    """Configuration error"""
    pass


class EnvError(Wf2Error):
    """Derived environment could not be computed"""
    pass


class TaskError(Wf2Error):
    """Task execution error"""

    def __init__(self, message: str, task=None, exit_code: Optional[int] = None):
        super().__init__(message)
        self.task = task
        self.exit_code = exit_code


class TaskHalted(TaskError):
    """Executor stopped on the first failing task"""
    pass


class SyncPathError(Wf2Error):
    """Sync path does not name something below the project root"""
    pass
