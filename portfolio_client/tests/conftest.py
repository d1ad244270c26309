from __future__ import annotations

import asyncio
import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from portfolio_client.infrastructure.api_client import PortfolioApiClient
from portfolio_client.infrastructure.session_store import InMemorySessionStore

BASE_URL = "https://portfolio.test/api/v1"


def json_response(status: int, body: Any) -> httpx.Response:
    return httpx.Response(status, json=body)


class FakePortfolioApi:
    """In-memory Portfolio API served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.users: dict[str, dict[str, Any]] = {}
        self.projects: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._seq = 0

    def _next_id(self) -> str:
        self._seq += 1
        return f"{self._seq:024x}"

    def add_user(self, name: str, email: str, itson_id: str, password: str) -> dict[str, Any]:
        user = {
            "_id": self._next_id(),
            "name": name,
            "email": email,
            "itsonId": itson_id,
            "password": password,
        }
        self.users[user["_id"]] = user
        return user

    def add_project(self, owner_id: str, **fields: Any) -> dict[str, Any]:
        project = {
            "_id": self._next_id(),
            "userId": owner_id,
            "title": "",
            "description": "",
            "technologies": [],
            "images": [],
            **fields,
        }
        self.projects[project["_id"]] = project
        return project

    @staticmethod
    def token_for(user: dict[str, Any]) -> str:
        return f"tok-{user['_id']}"

    @staticmethod
    def _public(record: dict[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in record.items() if key != "password"}

    def _user_for(self, request: httpx.Request) -> dict[str, Any] | None:
        token = request.headers.get("auth-token", "")
        for user in self.users.values():
            if token == self.token_for(user):
                return user
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1")
        body = json.loads(request.content) if request.content else {}
        parts = [part for part in path.split("/") if part]

        if path == "/auth/register" and request.method == "POST":
            if any(u["email"] == body.get("email") for u in self.users.values()):
                return json_response(400, {"message": "El usuario ya existe"})
            user = self.add_user(body["name"], body["email"], body["itsonId"], body["password"])
            return json_response(201, self._public(user))

        if path == "/auth/login" and request.method == "POST":
            for user in self.users.values():
                if user["email"] == body.get("email") and user["password"] == body.get("password"):
                    return json_response(
                        200, {"token": self.token_for(user), "user": self._public(user)}
                    )
            return json_response(401, {"message": "Credenciales inválidas"})

        if parts[:1] == ["publicProjects"] and len(parts) == 2:
            owners = {u["_id"] for u in self.users.values() if u["itsonId"] == parts[1]}
            return json_response(
                200, [p for p in self.projects.values() if p["userId"] in owners]
            )

        if parts[:1] == ["projects"]:
            user = self._user_for(request)
            if user is None:
                return json_response(401, {"message": "Acceso denegado"})

            if len(parts) == 1 and request.method == "GET":
                return json_response(
                    200, [p for p in self.projects.values() if p["userId"] == user["_id"]]
                )
            if len(parts) == 1 and request.method == "POST":
                return json_response(201, self.add_project(user["_id"], **body))

            project = self.projects.get(parts[1])
            if project is None or project["userId"] != user["_id"]:
                return json_response(404, {"message": "Proyecto no encontrado"})
            if request.method == "GET":
                return json_response(200, project)
            if request.method == "PUT":
                project.update(body)
                return json_response(200, project)
            if request.method == "DELETE":
                del self.projects[project["_id"]]
                return json_response(200, {"message": "Proyecto eliminado"})

        return json_response(404, {"message": "Ruta no encontrada"})


@pytest.fixture()
def fake_api() -> FakePortfolioApi:
    return FakePortfolioApi()


@pytest.fixture()
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture()
def client(fake_api: FakePortfolioApi, store: InMemorySessionStore) -> Iterator[PortfolioApiClient]:
    api_client = PortfolioApiClient(
        store, base_url=BASE_URL, transport=httpx.MockTransport(fake_api.handler)
    )
    yield api_client
    asyncio.run(api_client.aclose())


@pytest.fixture()
def client_for(
    store: InMemorySessionStore,
) -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], PortfolioApiClient]]:
    created: list[PortfolioApiClient] = []

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> PortfolioApiClient:
        api_client = PortfolioApiClient(
            store, base_url=BASE_URL, transport=httpx.MockTransport(handler)
        )
        created.append(api_client)
        return api_client

    yield _build
    for api_client in created:
        asyncio.run(api_client.aclose())
