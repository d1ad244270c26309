# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from portfolio_client.application.interfaces import PortfolioApi
from portfolio_client.domain import Project, UserSummary
from portfolio_client.shared.errors import ApiError

ANONYMOUS_GREETING = "Hola, usuario autenticado"


@dataclass(slots=True, frozen=True)
class Dashboard:
    greeting: str
    user: UserSummary | None
    projects: list[Project]


class DashboardUseCase:
    def __init__(self, *, api: PortfolioApi) -> None:
        self._api = api

    async def execute(self) -> Dashboard:
        if not self._api.is_authenticated():
            raise ApiError.not_authenticated()

        user = self._api.get_user()
        greeting = f"Hola, {user.name}" if user and user.name else ANONYMOUS_GREETING
        projects = await self._api.get_projects()
        return Dashboard(greeting=greeting, user=user, projects=projects)
