# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Plain-text rendering of API results for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from portfolio_client.domain import Project, UserSummary


def format_project(project: Project) -> str:
    lines = [f"[{project.id}] {project.title or 'Sin título'}"]
    lines.append(f"    {project.description or 'Sin descripción'}")
    if project.technologies:
        lines.append(f"    Tecnologías: {', '.join(project.technologies)}")
    if project.repository:
        lines.append(f"    Repositorio: {project.repository}")
    if project.images:
        lines.append(f"    Imagen: {_short(project.images[0])}")
    return "\n".join(lines)


def format_projects(projects: Sequence[Project], *, empty_message: str) -> str:
    if not projects:
        return empty_message
    return "\n\n".join(format_project(project) for project in projects)


def format_found(projects: Sequence[Project]) -> str:
    if not projects:
        return "No se encontraron proyectos para este usuario"
    return f"Se encontraron {len(projects)} proyecto(s)"


def format_user(user: UserSummary | None) -> str:
    if user is None:
        return "Sin datos de usuario"
    parts = [user.name or "(sin nombre)"]
    if user.email:
        parts.append(f"<{user.email}>")
    if user.itson_id:
        parts.append(f"Itson ID {user.itson_id}")
    if user.id:
        parts.append(f"id={user.id}")
    return " ".join(parts)


def _short(value: str, limit: int = 80) -> str:
    # data: URLs can be megabytes long
    if len(value) <= limit:
        return value
    return value[: limit - 3] + "..."
