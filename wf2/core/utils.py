"""
Core utility functions
"""
from pathlib import Path, PurePosixPath
from typing import Iterable, Union

from .constants import CONTAINER_PREFIX, REMOTE_ROOT
from .exceptions import SyncPathError


# ============================================================
# Path Utilities
# ============================================================

def path_to_str(path: Union[str, Path, PurePosixPath]) -> str:
    """Render a path the way it appears in command lines"""
    return str(path)


def component_count(path: Union[str, PurePosixPath]) -> int:
    """
    Number of segments in a relative path.
    
    "top.txt" has one component, "a/b.txt" has two.
    """
    return len(PurePosixPath(path).parts)


def check_sync_path(path: str) -> str:
    """
    Reject sync paths that do not name something below the project root.
    
    Empty paths and "." name the root itself. Absolute paths and ".."
    segments leave it.
    
    Raises:
        SyncPathError: If the path is not a relative path below the root
    """
    pure = PurePosixPath(path)
    if not path or not pure.parts:
        raise SyncPathError(f"Sync path `{path}` must name a file or directory below the project root")
    if pure.is_absolute():
        raise SyncPathError(f"Sync path `{path}` must be relative to the project root")
    if ".." in pure.parts:
        raise SyncPathError(f"Sync path `{path}` must not contain `..`")
    return path


def host_path(cwd: Path, path: str) -> Path:
    """Resolve a relative path under the host root"""
    return Path(cwd) / path


def remote_path(path: str, root: str = REMOTE_ROOT) -> PurePosixPath:
    """Resolve a relative path under the container root"""
    return PurePosixPath(root) / path


# ============================================================
# Command Utilities
# ============================================================

def container_name(project: str, service: str) -> str:
    """Container name for a service, e.g. wf2__wf2_default__php"""
    return f"{CONTAINER_PREFIX}__{project}__{service}"


def join_args(args: Iterable[str]) -> str:
    """Join pre-split tokens with single spaces, without quoting"""
    return " ".join(args)
