# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

import httpx

from portfolio_client.application.use_cases.projects.dashboard import DashboardUseCase
from portfolio_client.application.use_cases.projects.public_portfolio import \
    PublicPortfolioUseCase
from portfolio_client.application.use_cases.projects.save_project import SaveProjectUseCase
from portfolio_client.application.use_cases.users.login_user import LoginUserUseCase
from portfolio_client.application.use_cases.users.register_user import RegisterUserUseCase
from portfolio_client.infrastructure.api_client import PortfolioApiClient
from portfolio_client.infrastructure.session_store import JsonFileSessionStore
from portfolio_client.shared.config import AppConfig, load_config


class Container:
    """Wires the API client, its session store and the use cases from config."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or load_config()
        self._transport = transport

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def session_store(self) -> JsonFileSessionStore:
        return JsonFileSessionStore(self._config.session_file)

    @cached_property
    def api_client(self) -> PortfolioApiClient:
        return PortfolioApiClient(
            self.session_store,
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(api=self.api_client)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(api=self.api_client)

    @cached_property
    def save_project_use_case(self) -> SaveProjectUseCase:
        return SaveProjectUseCase(api=self.api_client)

    @cached_property
    def dashboard_use_case(self) -> DashboardUseCase:
        return DashboardUseCase(api=self.api_client)

    @cached_property
    def public_portfolio_use_case(self) -> PublicPortfolioUseCase:
        return PublicPortfolioUseCase(api=self.api_client)

    async def aclose(self) -> None:
        if "api_client" in self.__dict__:
            await self.api_client.aclose()
