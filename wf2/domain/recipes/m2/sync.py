"""
Push/pull planning between the host and the php container

Both planners work in phase batches: every path goes through phase N before
any path starts phase N+1. A failure part way through therefore never leaves
one path copied while another path is still waiting to be deleted.
"""
from typing import List, Sequence as Seq

from ....core.context import Context
from ....core.logging import get_logger
from ....core.utils import check_sync_path, component_count, host_path, remote_path
from ...tasks import models as t
from ...tasks.models import Task
from . import commands

logger = get_logger(__name__)


# ============================================================
# Push (host -> container)
# ============================================================

def push(ctx: Context, paths: Seq[str]) -> List[Task]:
    """
    Plan copying host paths into the container.
    
    Phases:
    1. every host path must exist
    2. remove every remote target
    3. recreate remote parents for nested paths
    4. copy every path
    
    Args:
        ctx: Project context, `ctx.cwd` is the host root
        paths: Relative paths, duplicates are kept
    
    Returns:
        Task list
    
    Raises:
        SyncPathError: If any path is not below the project root
    """
    paths = [check_sync_path(path) for path in paths]
    exists = []
    deletes = []
    parents = []
    copies = []
    
    for path in paths:
        local = host_path(ctx.cwd, path)
        remote = remote_path(path)
        
        exists.append(t.file_exists(local, f"Ensure that {path} exists locally"))
        
        deletes.extend([
            t.simple_command(commands.remote_rm(ctx, remote)),
            t.notify(f"- (remote) {path}"),
        ])
        
        # the remote root always exists
        if component_count(path) > 1:
            parents.append(t.simple_command(commands.remote_mkdir(ctx, remote.parent)))
        
        copies.extend([
            t.simple_command(commands.copy_to_container(ctx, local, remote.parent)),
            t.notify(f"+ (remote) {path}"),
        ])
    
    logger.debug(f"push: {len(paths)} paths, {len(parents)} parent dirs")
    return exists + deletes + parents + copies


# ============================================================
# Pull (container -> host)
# ============================================================

def pull(ctx: Context, paths: Seq[str]) -> List[Task]:
    """
    Plan copying container paths onto the host.
    
    Local state is inspected now, while planning. Nothing is re-checked
    when the tasks run.
    
    Phases:
    1. every remote path must exist (checked inside the container)
    2. prepare local directories
    3. copy every path, each copy grouped with its notification
    
    Args:
        ctx: Project context, `ctx.cwd` is the host root
        paths: Relative paths, duplicates are kept
    
    Returns:
        Task list
    
    Raises:
        SyncPathError: If any path is not below the project root
    """
    paths = [check_sync_path(path) for path in paths]
    checks = []
    prepare = []
    copies = []
    
    for path in paths:
        local = host_path(ctx.cwd, path)
        remote = remote_path(path)
        
        checks.append(t.simple_command(commands.remote_test_exists(ctx, remote)))
        prepare.extend(_reconcile_local(path, local))
        copies.append(t.seq(
            t.simple_command(commands.copy_from_container(ctx, remote, local.parent)),
            t.notify(f"+ {path}"),
        ))
    
    return checks + prepare + copies


def _reconcile_local(path: str, local) -> List[Task]:
    is_dir = local.exists() and local.is_dir()
    
    if is_dir:
        return [
            t.dir_remove(local, f"Remove {path} before pulling"),
            t.notify(f"- {path}"),
            t.dir_create(local, f"Recreate {path}"),
        ]
    
    if component_count(path) == 1:
        return []
    
    return [t.dir_create(local.parent, f"Ensure parent directory of {path} exists")]
