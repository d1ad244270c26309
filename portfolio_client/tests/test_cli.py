from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import pytest

from portfolio_client.infrastructure.container import Container
from portfolio_client.interfaces.cli import build_parser, run_command
from portfolio_client.shared.config import AppConfig

from conftest import BASE_URL, FakePortfolioApi


def _run(argv: list[str], fake_api: FakePortfolioApi, session_file: Path) -> int:
    args = build_parser().parse_args(argv)
    config = AppConfig(api_base_url=BASE_URL, session_file=session_file)
    container = Container(config, transport=httpx.MockTransport(fake_api.handler))
    return asyncio.run(run_command(args, container))


def test_login_then_list_projects(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    user = fake_api.add_user("Ana", "ana@example.com", "123456", "secret123")
    fake_api.add_project(user["_id"], title="Portafolio", description="Sitio", technologies=["HTML"])
    session_file = tmp_path / "session.json"

    assert _run(["login", "--email", "ana@example.com", "--password", "secret123"], fake_api, session_file) == 0
    assert "¡Bienvenido Ana!" in capsys.readouterr().out

    assert _run(["projects", "list"], fake_api, session_file) == 0
    out = capsys.readouterr().out
    assert "Hola, Ana" in out
    assert "Portafolio" in out
    assert "Tecnologías: HTML" in out


def test_projects_list_requires_login(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = _run(["projects", "list"], fake_api, tmp_path / "session.json")

    assert code == 1
    assert "Error: No autenticado" in capsys.readouterr().err
    assert fake_api.requests == []


def test_create_update_delete_project(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_api.add_user("Ana", "ana@example.com", "123456", "secret123")
    session_file = tmp_path / "session.json"
    _run(["login", "--email", "ana@example.com", "--password", "secret123"], fake_api, session_file)

    _run(
        ["projects", "create", "--title", "App", "--description", "Desc", "--technologies", "Python, httpx"],
        fake_api,
        session_file,
    )
    (project_id,) = fake_api.projects
    assert fake_api.projects[project_id]["technologies"] == ["Python", "httpx"]

    _run(["projects", "update", project_id, "--title", "App 2"], fake_api, session_file)
    assert fake_api.projects[project_id]["title"] == "App 2"
    assert fake_api.projects[project_id]["description"] == "Desc"

    _run(["projects", "delete", project_id, "--yes"], fake_api, session_file)
    assert fake_api.projects == {}
    assert "Proyecto eliminado exitosamente" in capsys.readouterr().out


def test_update_without_fields_is_rejected(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_api.add_user("Ana", "ana@example.com", "123456", "secret123")
    session_file = tmp_path / "session.json"
    _run(["login", "--email", "ana@example.com", "--password", "secret123"], fake_api, session_file)

    assert _run(["projects", "update", "abc"], fake_api, session_file) == 1
    assert "Nada que actualizar" in capsys.readouterr().err


def test_public_lookup_and_logout(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    session_file = tmp_path / "session.json"

    assert _run(["public", "123456"], fake_api, session_file) == 0
    assert "No se encontraron proyectos para este usuario" in capsys.readouterr().out

    assert _run(["public", "12"], fake_api, session_file) == 1
    assert "Ingresa un Itson ID válido" in capsys.readouterr().err

    assert _run(["logout"], fake_api, session_file) == 0
    assert _run(["whoami"], fake_api, session_file) == 1


def test_register_command(
    fake_api: FakePortfolioApi, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    session_file = tmp_path / "session.json"
    argv = [
        "register",
        "--name", "Ana",
        "--email", "ana@example.com",
        "--itson-id", "00123456",
        "--password", "secret123",
        "--truncate-itson-id",
    ]

    assert _run(argv, fake_api, session_file) == 0
    assert "¡Bienvenido Ana!" in capsys.readouterr().out

    assert _run(["whoami"], fake_api, session_file) == 0
    assert "Itson ID 123456" in capsys.readouterr().out
