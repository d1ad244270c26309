# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command-line front end for the portfolio API client."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys
from pathlib import Path

from portfolio_client.domain import ProjectDraft, parse_technologies
from portfolio_client.infrastructure.container import Container
from portfolio_client.shared.config import AppConfig, load_config
from portfolio_client.shared.errors import AppError, ValidationError
from portfolio_client.shared.logging import logger, new_correlation_id, setup_logging

from .render import format_found, format_project, format_projects, format_user


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-client", description="Manage your portfolio projects"
    )
    parser.add_argument("--api-url", help="Base URL of the portfolio API")
    parser.add_argument("--session-file", type=Path, help="Where the session is persisted")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    register = commands.add_parser("register", help="Create an account and sign in")
    register.add_argument("--name", required=True)
    register.add_argument("--email", required=True)
    register.add_argument("--itson-id", required=True)
    register.add_argument("--password", help="Prompted for when omitted")
    register.add_argument(
        "--truncate-itson-id",
        action="store_true",
        help="Use the last 6 digits of a longer Itson ID",
    )

    login = commands.add_parser("login", help="Sign in and persist the session")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="Prompted for when omitted")

    commands.add_parser("logout", help="Forget the persisted session")
    commands.add_parser("whoami", help="Show the signed-in user")

    projects = commands.add_parser("projects", help="Manage your projects")
    actions = projects.add_subparsers(dest="action", required=True)
    actions.add_parser("list", help="List your projects")

    show = actions.add_parser("show", help="Show one project")
    show.add_argument("project_id")

    create = actions.add_parser("create", help="Create a project")
    create.add_argument("--title", required=True)
    create.add_argument("--description", required=True)
    create.add_argument("--technologies", default="", help="Comma-separated list")
    create.add_argument("--repository")
    create.add_argument("--image", help="Image URL or data: URL")

    update = actions.add_parser("update", help="Change fields of a project")
    update.add_argument("project_id")
    update.add_argument("--title")
    update.add_argument("--description")
    update.add_argument("--technologies", help="Comma-separated list")
    update.add_argument("--repository")
    update.add_argument("--image", help="Image URL or data: URL")

    delete = actions.add_parser("delete", help="Delete a project")
    delete.add_argument("project_id")
    delete.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")

    public = commands.add_parser("public", help="Look up the public projects of a user")
    public.add_argument("itson_id")

    return parser


def _password(value: str | None) -> str:
    return value if value is not None else getpass.getpass("Password: ")


def _update_draft(args: argparse.Namespace) -> ProjectDraft:
    fields: dict[str, object] = {}
    if args.title is not None:
        fields["title"] = args.title.strip()
    if args.description is not None:
        fields["description"] = args.description.strip()
    if args.technologies is not None:
        fields["technologies"] = parse_technologies(args.technologies)
    if args.repository is not None:
        fields["repository"] = args.repository.strip()
    if args.image is not None:
        fields["images"] = [args.image.strip()] if args.image.strip() else []
    if not fields:
        raise ValidationError("Nada que actualizar")
    return ProjectDraft(**fields)


async def _projects(args: argparse.Namespace, container: Container) -> int:
    api = container.api_client

    if args.action == "list":
        dashboard = await container.dashboard_use_case.execute()
        print(dashboard.greeting)
        print(
            format_projects(
                dashboard.projects,
                empty_message="No tienes ningun proyecto. Crea uno para empezar.",
            )
        )
    elif args.action == "show":
        project = await api.get_project_by_id(args.project_id)
        print(format_project(project) if project else "Proyecto no encontrado")
    elif args.action == "create":
        project = await container.save_project_use_case.execute(
            title=args.title,
            description=args.description,
            technologies=args.technologies,
            repository=args.repository,
            image=args.image,
        )
        print("Proyecto creado exitosamente")
        if project:
            print(format_project(project))
    elif args.action == "update":
        project = await api.update_project(args.project_id, _update_draft(args))
        print("Proyecto actualizado exitosamente")
        if project:
            print(format_project(project))
    elif args.action == "delete":
        if not args.yes:
            answer = input(f'¿Estás seguro de que deseas eliminar "{args.project_id}"? [y/N] ')
            if answer.strip().lower() not in ("y", "yes", "s", "si", "sí"):
                print("Cancelado")
                return 0
        await api.delete_project(args.project_id)
        print("Proyecto eliminado exitosamente")
    return 0


async def run_command(args: argparse.Namespace, container: Container) -> int:
    api = container.api_client
    try:
        if args.command == "register":
            outcome = await container.register_user_use_case.execute(
                args.name,
                args.email,
                args.itson_id,
                _password(args.password),
                allow_truncate=args.truncate_itson_id,
            )
            for warning in outcome.warnings:
                print(f"Aviso: {warning}", file=sys.stderr)
            if outcome.logged_in:
                name = outcome.user.name if outcome.user else ""
                print(f"¡Bienvenido {name}!" if name else "¡Registro exitoso!")
            else:
                detail = outcome.login_error.message if outcome.login_error else ""
                print(f"Registro completado. Inicia sesión para continuar.\n(Detalle: {detail})")
        elif args.command == "login":
            session = await container.login_user_use_case.execute(
                args.email, _password(args.password)
            )
            name = session.user.name if session.user else ""
            print(f"¡Bienvenido {name}!" if name else "¡Inicio de sesión exitoso!")
        elif args.command == "logout":
            api.logout()
            print("Sesión cerrada")
        elif args.command == "whoami":
            if not api.is_authenticated():
                print("No autenticado")
                return 1
            print(format_user(api.get_user()))
        elif args.command == "projects":
            return await _projects(args, container)
        elif args.command == "public":
            projects = await container.public_portfolio_use_case.execute(args.itson_id)
            print(format_found(projects))
            if projects:
                print()
                print(format_projects(projects, empty_message=""))
        return 0
    except AppError as exc:
        logger.debug(f"cli: command {args.command} failed code={exc.code}")
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        await container.aclose()


def _config_for(args: argparse.Namespace) -> AppConfig:
    overrides: dict[str, object] = {}
    if args.api_url:
        overrides["api_base_url"] = args.api_url
    if args.session_file:
        overrides["session_file"] = args.session_file
    if not overrides:
        return load_config()
    return AppConfig(**overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _config_for(args)
    setup_logging("DEBUG" if args.verbose or config.debug_logging else config.log_level)
    new_correlation_id()
    return asyncio.run(run_command(args, Container(config)))


if __name__ == "__main__":
    sys.exit(main())
