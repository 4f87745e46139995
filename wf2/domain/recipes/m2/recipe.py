"""
M2 recipe: PHP 7.1/7.2 environments for Magento 2

Services: traefik, varnish, nginx, php, node, db, redis, mail.
"""
from pathlib import Path
from typing import List, Sequence as Seq, Union

from ....core.constants import DB_DUMP_FILE
from ....core.context import Context
from ....core.exceptions import Wf2Error
from ....core.logging import get_logger
from ....core.utils import join_args
from ...tasks import models as t
from ...tasks.models import Task
from .. import requests as r
from . import commands, sync
from .env import M2Env
from .services import compose_content, service_notices

logger = get_logger(__name__)


class M2Recipe:
    """Plans tasks for every operation request; never executes anything"""
    
    name = "M2"
    pass_thru_commands = [
        ("composer", "[M2] Run composer commands with the correct user"),
        ("npm", "[M2] Run npm commands with the correct user"),
        ("m", "[M2] Execute ./bin/magento commands inside the PHP container"),
        ("dc", "[M2] Run docker-compose commands against this project"),
    ]
    
    def resolve(self, ctx: Context, request: r.OperationRequest) -> List[Task]:
        """
        Map a request to a task list.
        
        Planning failures come back as a single error notification.
        
        Raises:
            TypeError: If the request is not an OperationRequest variant
        """
        try:
            return self._dispatch(ctx, request)
        except Wf2Error as e:
            logger.debug(f"planning failed: {e}")
            return t.task_err_list(e)
    
    def _dispatch(self, ctx: Context, request: r.OperationRequest) -> List[Task]:
        if isinstance(request, r.Up):
            return self.up(ctx, request.detached)
        if isinstance(request, r.Down):
            return self.down(ctx)
        if isinstance(request, r.Stop):
            return self.stop(ctx)
        if isinstance(request, r.Exec):
            return self.exec(ctx, join_args(request.trailing), request.user)
        if isinstance(request, r.DBImport):
            return self.db_import(ctx, request.path)
        if isinstance(request, r.DBDump):
            return self.db_dump(ctx)
        if isinstance(request, r.Doctor):
            return self.doctor(ctx)
        if isinstance(request, r.Pull):
            return sync.pull(ctx, request.paths)
        if isinstance(request, r.Push):
            return sync.push(ctx, request.paths)
        if isinstance(request, r.PassThrough):
            return self.pass_through(ctx, request.command, request.trailing)
        raise TypeError(f"Unsupported operation request: {request!r}")
    
    # ============================================================
    # docker-compose
    # ============================================================
    
    def _compose_tasks(self, ctx: Context, trailing: str) -> List[Task]:
        """Write the env and compose files, then run docker-compose"""
        env = M2Env.from_ctx(ctx)
        return [
            t.file_write(ctx.env_file, "Writes the .env file to disk", env.content()),
            t.file_write(ctx.compose_file, "Writes the docker-compose file", compose_content(ctx, env)),
            t.simple_command(commands.compose_command(ctx, trailing)),
        ]
    
    def up(self, ctx: Context, detached: bool) -> List[Task]:
        tasks = self._compose_tasks(ctx, "up -d" if detached else "up")
        if detached:
            tasks.extend(t.notify(notice) for notice in service_notices())
        return tasks
    
    def down(self, ctx: Context) -> List[Task]:
        """Alias for docker-compose down"""
        return self._compose_tasks(ctx, "down")
    
    def stop(self, ctx: Context) -> List[Task]:
        """Stop containers but keep them, their networks and data"""
        return self._compose_tasks(ctx, "stop")
    
    def pass_through(self, ctx: Context, command: str, trailing: Seq[str]) -> List[Task]:
        """
        Forward arguments verbatim. Tokens are joined with single spaces and
        are not quoted.
        """
        args = join_args(trailing)
        if command == "composer":
            return [t.simple_command(commands.composer_command(ctx, args))]
        if command == "npm":
            return [t.simple_command(commands.npm_command(ctx, args))]
        if command == "m":
            return [t.simple_command(commands.mage_command(ctx, args))]
        if command == "dc":
            return self._compose_tasks(ctx, args)
        return self._compose_tasks(ctx, join_args([command, *trailing]))
    
    # ============================================================
    # Containers
    # ============================================================
    
    def exec(self, ctx: Context, trailing: str, user: str) -> List[Task]:
        """
        Alias for `docker exec` inside the PHP container.
        
        Commands that take their own flags need `--` after `exec`.
        """
        return [t.simple_command(commands.exec_command(ctx, trailing, user))]
    
    def doctor(self, ctx: Context) -> List[Task]:
        return [
            t.simple_command(commands.doctor_command(ctx)),
            t.notify("Fixed a known permissions error in the unison container"),
        ]
    
    # ============================================================
    # Database
    # ============================================================
    
    def db_import(self, ctx: Context, path: Union[str, Path]) -> List[Task]:
        """Import a DB from a file, with progress output when `pv` is installed"""
        path = Path(path)
        return [
            t.file_exists(path, "Ensure that the given DB file exists"),
            t.simple_command(commands.db_import_command(ctx, path, ctx.pv)),
        ]
    
    def db_dump(self, ctx: Context) -> List[Task]:
        """Dump the database to `dump.sql` in the project root"""
        return [
            t.simple_command(commands.db_dump_command(ctx)),
            t.notify(f"Written to file {DB_DUMP_FILE}"),
        ]
