"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .context import Context, Term
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import CommandRunner, Reporter
from .utils import (
    component_count,
    container_name,
    host_path,
    join_args,
    path_to_str,
    remote_path,
)

__all__ = [
    "Context",
    "Term",
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "CommandRunner",
    "Reporter",
    "component_count",
    "container_name",
    "host_path",
    "join_args",
    "path_to_str",
    "remote_path",
]
