"""
Logging for wf2

Diagnostics go to stderr through rich, so stdout carries only task output
and notifications.
"""
import logging
from typing import Optional
from pathlib import Path

from rich.logging import RichHandler
from rich.console import Console


# Bound lazily to whatever sys.stdout / sys.stderr are when printing
_stdout_console = Console()
_stderr_console = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger for one wf2 invocation.

    Args:
        level: Level name, unknown names fall back to WARNING
        log_file: Also append plain-text records to this file
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    # task commands may contain [brackets], never treat them as markup
    handler = RichHandler(console=_stderr_console, rich_tracebacks=True, markup=False)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Console for plans and notifications"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Console for errors and log records"""
    return _stderr_console
