# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP client for the Portfolio REST API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from portfolio_client.application.interfaces import (
    LEGACY_LOGGED_IN_KEY,
    TOKEN_KEY,
    USER_KEY,
    SessionStore,
)
from portfolio_client.domain import Project, ProjectDraft, Session, UserSummary
from portfolio_client.shared.config import load_config
from portfolio_client.shared.errors.base import ApiError, ApiErrorKind
from portfolio_client.shared.logging import logger

AUTH_HEADER = "auth-token"

M = TypeVar("M", bound=BaseModel)


def parse_body(text: str) -> Any:
    """Decode a response body, keeping the raw text when it is not JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def error_message(data: Any, fallback: str) -> str:
    if isinstance(data, Mapping):
        message = data.get("message")
        if not message:
            return fallback
        if isinstance(message, list):
            return ",".join("" if item is None else str(item) for item in message)
        return str(message)
    if isinstance(data, str) and data:
        return data
    return fallback


def normalize_user_record(record: Mapping[str, Any]) -> dict[str, Any]:
    normalized = dict(record)
    # some endpoints only send the storage id
    if normalized.get("_id") and not normalized.get("id"):
        normalized["id"] = normalized["_id"]
    return normalized


class PortfolioApiClient:
    """Single point of contact with the Portfolio API.

    Every call goes through :meth:`_request`, which reads the body as text,
    tolerates non-JSON payloads and turns any failure into :class:`ApiError`.
    Nothing is retried. The session (token and user) lives in the injected
    :class:`SessionStore`.
    """

    def __init__(
        self,
        session_store: SessionStore,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if base_url is None:
            config = load_config()
            base_url = config.api_base_url
            timeout = timeout if timeout is not None else config.request_timeout

        self._base_url = base_url.rstrip("/")
        self._store = session_store
        self._owns_http = http_client is None
        if http_client is not None:
            self._http = http_client
        elif timeout is not None:
            self._http = httpx.AsyncClient(transport=transport, timeout=timeout)
        else:
            self._http = httpx.AsyncClient(transport=transport)

        logger.debug(f"PortfolioApiClient: initialized base_url={self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> PortfolioApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ==================== session ====================

    def get_token(self) -> str | None:
        return self._store.get(TOKEN_KEY) or None

    def get_user(self) -> UserSummary | None:
        raw = self._store.get(USER_KEY)
        if not raw:
            return None
        try:
            return UserSummary.model_validate(json.loads(raw))
        except ValueError:
            logger.warning("PortfolioApiClient: stored user record is unreadable, ignoring it")
            return None

    def logout(self) -> None:
        self._store.clear(TOKEN_KEY)
        self._store.clear(USER_KEY)
        self._store.clear(LEGACY_LOGGED_IN_KEY)
        logger.info("PortfolioApiClient: session cleared")

    def is_authenticated(self) -> bool:
        return bool(self.get_token())

    # ==================== auth ====================

    async def register(
        self, name: str, email: str, itson_id: str, password: str
    ) -> UserSummary | None:
        fallback = "Error al registrar"
        data = await self._request(
            "POST",
            "/auth/register",
            operation="register",
            fallback=fallback,
            payload={"name": name, "email": email, "itsonId": itson_id, "password": password},
        )
        if data is None:
            return None
        return self._parse_model(UserSummary, data, "register", fallback)

    async def login(self, email: str, password: str) -> Session:
        fallback = "Error al iniciar sesión"
        data = await self._request(
            "POST",
            "/auth/login",
            operation="login",
            fallback=fallback,
            payload={"email": email, "password": password},
        )
        token = data.get("token") if isinstance(data, Mapping) else None
        if not token:
            logger.warning("login error: response carried no token")
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, fallback)

        user_record: dict[str, Any] | None = None
        user: UserSummary | None = None
        if isinstance(data.get("user"), Mapping):
            user_record = normalize_user_record(data["user"])
            user = self._parse_model(UserSummary, user_record, "login", fallback)

        self._store.set(TOKEN_KEY, str(token))
        if user_record is not None:
            self._store.set(USER_KEY, json.dumps(user_record, ensure_ascii=False))

        logger.info(f"login ok user_id={user.id if user else '-'}")
        return Session(token=str(token), user=user)

    # ==================== projects ====================

    async def get_projects(self) -> list[Project]:
        fallback = "Error al obtener proyectos"
        data = await self._request(
            "GET", "/projects", operation="get projects", fallback=fallback, auth=True
        )
        return self._parse_projects(data, "get projects", fallback)

    async def get_project_by_id(self, project_id: str) -> Project | None:
        fallback = "Proyecto no encontrado"
        data = await self._request(
            "GET",
            self._project_path(project_id, "get project by id", fallback),
            operation="get project by id",
            fallback=fallback,
            auth=True,
        )
        if data is None:
            return None
        return self._parse_model(Project, data, "get project by id", fallback)

    async def create_project(self, project: ProjectDraft | Mapping[str, Any]) -> Project | None:
        fallback = "Error al crear proyecto"
        # the owner is taken from the token, never from the payload
        data = await self._request(
            "POST",
            "/projects",
            operation="create project",
            fallback=fallback,
            payload=_project_payload(project),
            auth=True,
        )
        if data is None:
            return None
        return self._parse_model(Project, data, "create project", fallback)

    async def update_project(
        self, project_id: str, updates: ProjectDraft | Mapping[str, Any]
    ) -> Project | None:
        fallback = "Error al actualizar proyecto"
        data = await self._request(
            "PUT",
            self._project_path(project_id, "update project", fallback),
            operation="update project",
            fallback=fallback,
            payload=_project_payload(updates),
            auth=True,
        )
        if data is None:
            return None
        return self._parse_model(Project, data, "update project", fallback)

    async def delete_project(self, project_id: str) -> Any:
        fallback = "Error al eliminar proyecto"
        return await self._request(
            "DELETE",
            self._project_path(project_id, "delete project", fallback),
            operation="delete project",
            fallback=fallback,
            auth=True,
        )

    async def get_public_projects(self, itson_id: str) -> list[Project]:
        fallback = "Error al obtener proyectos públicos"
        data = await self._request(
            "GET",
            f"/publicProjects/{quote(str(itson_id), safe='')}",
            operation="get public projects",
            fallback=fallback,
        )
        return self._parse_projects(data, "get public projects", fallback)

    # ==================== plumbing ====================

    def _require_token(self, operation: str) -> str:
        token = self.get_token()
        if not token:
            logger.warning(f"{operation} error: not authenticated")
            raise ApiError.not_authenticated()
        return token

    def _project_path(self, project_id: str, operation: str, fallback: str) -> str:
        self._require_token(operation)
        # "/projects/" would hit the list endpoint
        if not project_id:
            logger.warning(f"{operation} error: empty project id")
            raise ApiError(ApiErrorKind.APPLICATION, fallback)
        return f"/projects/{quote(str(project_id), safe='')}"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        fallback: str,
        payload: Mapping[str, Any] | None = None,
        auth: bool = False,
    ) -> Any:
        headers: dict[str, str] = {}
        if auth:
            headers[AUTH_HEADER] = self._require_token(operation)

        url = f"{self._base_url}{path}"
        try:
            response = await self._http.request(
                method,
                url,
                headers=headers,
                json=dict(payload) if payload is not None else None,
            )
        except httpx.HTTPError as exc:
            message = str(exc) or fallback
            logger.warning(f"{operation} error: transport failure {type(exc).__name__}: {message}")
            raise ApiError(ApiErrorKind.TRANSPORT, message) from exc

        data = parse_body(response.text)
        logger.debug(f"api: {method} {path} -> {response.status_code}")

        if not response.is_success:
            message = error_message(data, fallback)
            logger.warning(f"{operation} error: status={response.status_code} message={message}")
            raise ApiError(
                ApiErrorKind.APPLICATION,
                message,
                status=response.status_code,
            )

        return data

    def _parse_model(self, model: type[M], data: Any, operation: str, fallback: str) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning(f"{operation} error: unexpected response shape ({exc.error_count()} errors)")
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, fallback) from exc

    def _parse_projects(self, data: Any, operation: str, fallback: str) -> list[Project]:
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"{operation} error: expected a list, got {type(data).__name__}")
            raise ApiError(ApiErrorKind.MALFORMED_RESPONSE, fallback)
        return [self._parse_model(Project, item, operation, fallback) for item in data]


def _project_payload(project: ProjectDraft | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(project, ProjectDraft):
        return project.to_payload()
    # explicit nulls are kept so a caller can clear a field
    return dict(project)


__all__ = [
    "AUTH_HEADER",
    "PortfolioApiClient",
    "error_message",
    "normalize_user_record",
    "parse_body",
]
