"""
Command line templates

Each function owns exactly one command shape. Tests assert on the literal
output, so changes here are user visible.
"""
import shlex
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from ....core.constants import DB_DUMP_FILE, DB_NAME, DB_PASS, DB_USER, PHP_USER
from ....core.context import Context
from ....core.utils import container_name, path_to_str


# ============================================================
# Containers
# ============================================================

def php_container(ctx: Context) -> str:
    return container_name(ctx.name, "php")


def db_container(ctx: Context) -> str:
    return container_name(ctx.name, "db")


def interactive_exec(ctx: Context, container: str, user: str, trailing: str) -> str:
    """`docker exec -it` with terminal size hints"""
    return (
        f'docker exec -it -u {user} -e COLUMNS="{ctx.term.width}" -e LINES="{ctx.term.height}" '
        f"{container} {trailing}"
    )


def exec_command(ctx: Context, trailing: str, user: str) -> str:
    return interactive_exec(ctx, php_container(ctx), user, trailing)


def mage_command(ctx: Context, trailing: str) -> str:
    return interactive_exec(ctx, php_container(ctx), PHP_USER, f"./bin/magento {trailing}")


def npm_command(ctx: Context, trailing: str) -> str:
    return interactive_exec(ctx, container_name(ctx.name, "node"), PHP_USER, f"npm {trailing}")


def composer_command(ctx: Context, trailing: str) -> str:
    return f"docker exec -it -u {PHP_USER} {php_container(ctx)} composer {trailing}"


def doctor_command(ctx: Context) -> str:
    return (
        f"docker exec -it {container_name(ctx.name, 'unison')} "
        f"chown -R docker:docker /volumes/internal"
    )


# ============================================================
# docker-compose
# ============================================================

def compose_command(ctx: Context, trailing: str) -> str:
    return f"docker-compose -f {path_to_str(ctx.compose_file)} {trailing}"


# ============================================================
# Database
# ============================================================

def db_import_command(ctx: Context, path: Union[str, Path], pv: Optional[Path]) -> str:
    """Import a dump, streaming through `pv` when it is available"""
    file = path_to_str(path)
    container = db_container(ctx)
    if pv is not None:
        return (
            f"pv -f {file} | docker exec -i {container} "
            f"mysql -u{DB_USER} -p{DB_PASS} -D {DB_NAME}"
        )
    return f"docker exec -i {container} mysql -u{DB_USER} -p{DB_PASS} {DB_NAME} < {file}"


def db_dump_command(ctx: Context) -> str:
    return (
        f"docker exec -i {db_container(ctx)} "
        f"mysqldump -u{DB_USER} -p{DB_PASS} {DB_NAME} > {DB_DUMP_FILE}"
    )


# ============================================================
# Sync
# ============================================================

def _quote(path) -> str:
    return shlex.quote(path_to_str(path))


def remote_exec(ctx: Context, trailing: str) -> str:
    """Non-interactive exec in the php container as www-data"""
    return f"docker exec -u {PHP_USER} {php_container(ctx)} {trailing}"


def remote_rm(ctx: Context, target: PurePosixPath) -> str:
    return remote_exec(ctx, f"rm -rf {_quote(target)}")


def remote_mkdir(ctx: Context, target: PurePosixPath) -> str:
    return remote_exec(ctx, f"mkdir -p {_quote(target)}")


def remote_test_exists(ctx: Context, target: PurePosixPath) -> str:
    return remote_exec(ctx, f"test -e {_quote(target)}")


def copy_to_container(ctx: Context, source: Path, target_dir: PurePosixPath) -> str:
    target = f"{php_container(ctx)}:{target_dir}"
    return f"docker cp {_quote(source)} {_quote(target)}"


def copy_from_container(ctx: Context, source: PurePosixPath, target_dir: Path) -> str:
    origin = f"{php_container(ctx)}:{source}"
    return f"docker cp {_quote(origin)} {_quote(target_dir)}"
