"""
Main CLI application
"""
import typer
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.text import Text

from ...core.constants import CONFIG_FILE_NAME, PHP_USER, ROOT_USER
from ...core.context import Term
from ...core.exceptions import ConfigError, TaskError
from ...core.logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from ...domain.recipes import get_recipe, requests as r
from ...domain.tasks import Executor, describe_tasks
from ..config import ConfigLoader, build_context, resolve_recipe
from .reporter import RichReporter

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()

PASS_THRU_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}

app = typer.Typer(
    name="wf2",
    add_completion=False,
    help="Multi-container development environments",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@dataclass
class CliOptions:
    """Global options collected by the app callback"""
    config: Optional[Path] = None
    cwd: Optional[Path] = None
    dry_run: bool = False


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Log file path"),
    config: Optional[Path] = typer.Option(
        None, "--config", help=f"Project configuration file (default: ./{CONFIG_FILE_NAME})"
    ),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Project root (default: current directory)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the planned tasks without running them"),
):
    """
    wf2 - drive a local multi-container environment
    """
    setup_logging(level=log_level, log_file=log_file)
    ctx.obj = CliOptions(config=config, cwd=cwd, dry_run=dry_run)


# ============================================================
# Helpers
# ============================================================

def _terminal() -> Term:
    size = stdout_console.size
    return Term(width=size.width, height=size.height)


def _load(options: CliOptions):
    cwd = (options.cwd or Path.cwd()).resolve()
    config_path = options.config or (cwd / CONFIG_FILE_NAME)
    if options.config and not options.config.exists():
        raise ConfigError(f"Configuration file not found: {options.config}")
    cfg = ConfigLoader().load(toml_path=config_path)
    recipe = resolve_recipe(cfg)
    context = build_context(cfg, cwd, term=_terminal())
    logger.debug(f"context: {context}")
    return get_recipe(recipe), context


def _print_error(label: str, error: Exception) -> None:
    stderr_console.print(Text.assemble((f"{label}: ", "red"), str(error)), soft_wrap=True)


def execute(ctx: typer.Context, request: r.OperationRequest) -> None:
    """Plan the request and run (or print) the tasks"""
    options: CliOptions = ctx.obj or CliOptions()
    reporter = RichReporter()
    try:
        recipe, context = _load(options)
        tasks = recipe.resolve(context, request)
        if options.dry_run:
            reporter.plan(describe_tasks(tasks))
            return
        Executor(reporter=reporter, cwd=context.cwd).run(tasks)
    except TaskError as e:
        _print_error("Task Error", e)
        raise typer.Exit(1)
    except ConfigError as e:
        _print_error("Config Error", e)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected failure")
        _print_error("Error", e)
        raise typer.Exit(1)


# ============================================================
# Commands
# ============================================================

@app.command()
def up(
    ctx: typer.Context,
    detached: bool = typer.Option(False, "--detached", "-d", help="Run containers in the background"),
):
    """Bring up containers"""
    execute(ctx, r.Up(detached=detached))


@app.command()
def down(ctx: typer.Context):
    """Take down containers & delete everything"""
    execute(ctx, r.Down())


@app.command()
def stop(ctx: typer.Context):
    """Take down containers & retain data"""
    execute(ctx, r.Stop())


@app.command(name="exec", context_settings=PASS_THRU_SETTINGS)
def exec_(
    ctx: typer.Context,
    root: bool = typer.Option(False, "--root", "-r", help="Execute commands as root"),
    cmd: Optional[List[str]] = typer.Argument(None, help="Trailing args"),
):
    """Execute commands in the PHP container"""
    trailing = tuple(cmd or []) + tuple(ctx.args)
    execute(ctx, r.Exec(trailing=trailing, user=ROOT_USER if root else PHP_USER))


@app.command(name="db-import")
def db_import(ctx: typer.Context, file: Path = typer.Argument(..., help="DB file to import")):
    """Import a DB file"""
    execute(ctx, r.DBImport(path=file))


@app.command(name="db-dump")
def db_dump(ctx: typer.Context):
    """Dump the current database to dump.sql"""
    execute(ctx, r.DBDump())


@app.command()
def doctor(ctx: typer.Context):
    """Try to fix common issues"""
    execute(ctx, r.Doctor())


@app.command()
def pull(ctx: typer.Context, paths: List[str] = typer.Argument(..., help="Paths relative to the project root")):
    """Pull files or folders from the PHP container to the host"""
    execute(ctx, r.Pull(paths=tuple(paths)))


@app.command()
def push(ctx: typer.Context, paths: List[str] = typer.Argument(..., help="Paths relative to the project root")):
    """Push files or folders from the host into the PHP container"""
    execute(ctx, r.Push(paths=tuple(paths)))


def _register_pass_thru(name: str, help_text: str) -> None:
    def command(ctx: typer.Context):
        execute(ctx, r.PassThrough(command=name, trailing=tuple(ctx.args)))
    
    command.__doc__ = help_text
    app.command(name=name, context_settings=PASS_THRU_SETTINGS, add_help_option=False)(command)


for _name, _help in get_recipe("M2").pass_thru_commands:
    _register_pass_thru(_name, _help)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
