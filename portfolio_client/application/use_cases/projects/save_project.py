# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from portfolio_client.application.interfaces import PortfolioApi
from portfolio_client.domain import Project, ProjectForm
from portfolio_client.shared.errors import raise_validation_error
from portfolio_client.shared.logging import logger


class SaveProjectUseCase:
    """Creates a project, or replaces an existing one when an id is given."""

    def __init__(self, *, api: PortfolioApi) -> None:
        self._api = api

    async def execute(
        self,
        *,
        title: str,
        description: str,
        technologies: str | list[str] | None = None,
        repository: str | None = None,
        image: str | None = None,
        project_id: str | None = None,
    ) -> Project | None:
        try:
            form = ProjectForm(
                title=title,
                description=description,
                technologies=technologies,
                repository=repository,
                image=image,
            )
        except PydanticValidationError as exc:
            raise_validation_error(exc, "El título y la descripción son obligatorios.")

        draft = form.to_draft()
        if project_id:
            project = await self._api.update_project(project_id, draft)
            logger.info(f"project updated id={project_id}")
        else:
            project = await self._api.create_project(draft)
            logger.info(f"project created id={project.id if project else '-'}")
        return project
