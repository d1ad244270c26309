# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from portfolio_client.domain import Project, ProjectDraft, Session, UserSummary

TOKEN_KEY = "authToken"
USER_KEY = "user"
LEGACY_LOGGED_IN_KEY = "loggedIn"


class SessionStore(Protocol):
    """Key-value store holding the persisted session records."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...


class PortfolioApi(Protocol):
    async def register(
        self, name: str, email: str, itson_id: str, password: str
    ) -> UserSummary | None: ...

    async def login(self, email: str, password: str) -> Session: ...

    async def get_projects(self) -> list[Project]: ...

    async def get_project_by_id(self, project_id: str) -> Project | None: ...

    async def create_project(
        self, project: ProjectDraft | Mapping[str, Any]
    ) -> Project | None: ...

    async def update_project(
        self, project_id: str, updates: ProjectDraft | Mapping[str, Any]
    ) -> Project | None: ...

    async def delete_project(self, project_id: str) -> Any: ...

    async def get_public_projects(self, itson_id: str) -> list[Project]: ...

    def get_token(self) -> str | None: ...

    def get_user(self) -> UserSummary | None: ...

    def logout(self) -> None: ...

    def is_authenticated(self) -> bool: ...
