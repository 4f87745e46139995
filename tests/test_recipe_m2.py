from __future__ import annotations

import json
from pathlib import Path

import pytest

from wf2.core.context import Context, Term
from wf2.core.exceptions import ConfigError
from wf2.domain.recipes import get_recipe, resolve
from wf2.domain.recipes import requests as r
from wf2.domain.recipes.m2 import M2Recipe
from wf2.domain.tasks import models as t


@pytest.fixture
def m2() -> M2Recipe:
    return M2Recipe()


@pytest.fixture
def ctx() -> Context:
    return Context.default()


def test_db_import_with_pv(m2: M2Recipe) -> None:
    ctx = Context(name="wf2_default", cwd=Path("/users/shane"), pv=Path("/usr/pv"))

    tasks = m2.resolve(ctx, r.DBImport(path=Path("~/Downloads/dump.sql")))

    assert tasks == [
        t.PathExists(Path("~/Downloads/dump.sql"), "Ensure that the given DB file exists"),
        t.RunCommand(
            "pv -f ~/Downloads/dump.sql | docker exec -i wf2__wf2_default__db mysql -udocker -pdocker -D docker"
        ),
    ]


def test_db_import_without_pv(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.DBImport(path=Path("~/Downloads/dump.sql")))

    assert isinstance(tasks[0], t.PathExists)
    assert tasks[1] == t.RunCommand(
        "docker exec -i wf2__wf2_default__db mysql -udocker -pdocker docker < ~/Downloads/dump.sql"
    )


def test_db_dump(m2: M2Recipe, ctx: Context) -> None:
    assert m2.resolve(ctx, r.DBDump()) == [
        t.RunCommand("docker exec -i wf2__wf2_default__db mysqldump -udocker -pdocker docker > dump.sql"),
        t.Notify("Written to file dump.sql"),
    ]


@pytest.mark.parametrize(
    ("trailing", "user", "expected"),
    [
        (
            ("ls", "-lh"),
            "www-data",
            'docker exec -it -u www-data -e COLUMNS="80" -e LINES="30" wf2__wf2_default__php ls -lh',
        ),
        (
            ("rm", "-rf", "vendor"),
            "root",
            'docker exec -it -u root -e COLUMNS="80" -e LINES="30" wf2__wf2_default__php rm -rf vendor',
        ),
    ],
)
def test_exec(m2: M2Recipe, ctx: Context, trailing, user, expected) -> None:
    assert m2.resolve(ctx, r.Exec(trailing=trailing, user=user)) == [t.RunCommand(expected)]


def test_exec_uses_terminal_size(m2: M2Recipe) -> None:
    ctx = Context(name="shop", cwd=Path("/srv/shop"), term=Term(width=120, height=40))

    (task,) = m2.resolve(ctx, r.Exec(trailing=("bash",), user="www-data"))

    assert task.command == 'docker exec -it -u www-data -e COLUMNS="120" -e LINES="40" wf2__shop__php bash'


def test_pass_through_mage(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.PassThrough(command="m", trailing=("setup:upgrade",)))

    assert tasks == [
        t.RunCommand(
            'docker exec -it -u www-data -e COLUMNS="80" -e LINES="30" '
            "wf2__wf2_default__php ./bin/magento setup:upgrade"
        )
    ]


def test_pass_through_composer_is_not_quoted(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.PassThrough(command="composer", trailing=("install", "-vvv", "a b")))

    assert tasks == [t.RunCommand("docker exec -it -u www-data wf2__wf2_default__php composer install -vvv a b")]


def test_pass_through_npm(m2: M2Recipe, ctx: Context) -> None:
    (task,) = m2.resolve(ctx, r.PassThrough(command="npm", trailing=("run", "build")))

    assert task.command == (
        'docker exec -it -u www-data -e COLUMNS="80" -e LINES="30" wf2__wf2_default__node npm run build'
    )


def test_pass_through_unknown_command_goes_to_compose(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.PassThrough(command="logs", trailing=("unison", "-vv")))

    assert tasks[-1] == t.RunCommand(
        "docker-compose -f /users/shane/.wf2_m2_wf2_default/docker-compose.yml logs unison -vv"
    )


def test_pass_through_dc(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.PassThrough(command="dc", trailing=("ps",)))

    assert tasks[-1] == t.RunCommand("docker-compose -f /users/shane/.wf2_m2_wf2_default/docker-compose.yml ps")


@pytest.mark.parametrize(("request_", "sub"), [(r.Down(), "down"), (r.Stop(), "stop"), (r.Up(), "up")])
def test_compose_commands_write_files_first(m2: M2Recipe, ctx: Context, request_, sub: str) -> None:
    tasks = m2.resolve(ctx, request_)

    env_task, compose_task, cmd = tasks
    assert env_task.path == Path("/users/shane/.wf2_m2_wf2_default/.env")
    assert compose_task.path == Path("/users/shane/.wf2_m2_wf2_default/docker-compose.yml")
    assert cmd == t.RunCommand(f"docker-compose -f /users/shane/.wf2_m2_wf2_default/docker-compose.yml {sub}")


def test_up_detached_lists_services(m2: M2Recipe, ctx: Context) -> None:
    tasks = m2.resolve(ctx, r.Up(detached=True))

    assert tasks[2].command.endswith(" up -d")
    notices = [task.message for task in tasks[3:]]
    assert "MailHog: https://mail.jh" in notices
    assert all(isinstance(task, t.Notify) for task in tasks[3:])


def test_compose_file_names_containers(m2: M2Recipe, ctx: Context) -> None:
    compose = m2.resolve(ctx, r.Up())[1]
    doc = json.loads(compose.content)

    assert doc["services"]["php"]["container_name"] == "wf2__wf2_default__php"
    assert doc["services"]["php"]["image"] == "wearejh/php:7.2-m2"
    assert doc["services"]["mail"]["labels"] == ["traefik.frontend.rule=Host:mail.jh", "traefik.port=8025"]


@pytest.mark.parametrize(
    "request_",
    [r.Up(), r.Down(), r.Stop(), r.PassThrough(command="dc", trailing=("ps",))],
)
def test_env_failure_becomes_single_error_notification(m2: M2Recipe, request_) -> None:
    ctx = Context(name="shop", cwd=Path("/srv/shop"), domains=())

    tasks = m2.resolve(ctx, request_)

    assert len(tasks) == 1
    assert tasks[0].error is True
    assert "domain" in tasks[0].message


def test_unsupported_php_version_is_reported(m2: M2Recipe) -> None:
    ctx = Context(name="shop", cwd=Path("/srv/shop"), php_version="5.6")

    (task,) = m2.resolve(ctx, r.Down())

    assert isinstance(task, t.Notify) and task.error
    assert "5.6" in task.message


def test_doctor(m2: M2Recipe, ctx: Context) -> None:
    assert m2.resolve(ctx, r.Doctor()) == [
        t.RunCommand("docker exec -it wf2__wf2_default__unison chown -R docker:docker /volumes/internal"),
        t.Notify("Fixed a known permissions error in the unison container"),
    ]


def test_push_and_pull_are_dispatched(m2: M2Recipe, ctx: Context) -> None:
    push = m2.resolve(ctx, r.Push(paths=("top.txt",)))
    pull = m2.resolve(ctx, r.Pull(paths=("missing-on-host.txt",)))

    assert isinstance(push[0], t.PathExists)
    assert pull[0].command.endswith("test -e /var/www/missing-on-host.txt")


@pytest.mark.parametrize(
    "request_",
    [
        r.Push(paths=("",)),
        r.Push(paths=("app/../../etc/passwd",)),
        r.Pull(paths=(".",)),
        r.Pull(paths=("composer.json", "/etc/hosts")),
    ],
)
def test_sync_path_outside_project_becomes_single_error_notification(m2: M2Recipe, ctx: Context, request_) -> None:
    tasks = m2.resolve(ctx, request_)

    assert len(tasks) == 1
    assert isinstance(tasks[0], t.Notify) and tasks[0].error
    assert "Sync path" in tasks[0].message


def test_unknown_request_is_a_programming_error(m2: M2Recipe, ctx: Context) -> None:
    with pytest.raises(TypeError):
        m2.resolve(ctx, object())  # type: ignore[arg-type]


def test_resolve_helper_and_recipe_lookup(ctx: Context) -> None:
    assert resolve(ctx, r.DBDump())[1] == t.Notify("Written to file dump.sql")
    assert isinstance(get_recipe("M2"), M2Recipe)
    with pytest.raises(ConfigError):
        get_recipe("Wordpress")
