# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

NOT_AUTHENTICATED_MESSAGE = "No autenticado"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class ApiErrorKind(StrEnum):
    TRANSPORT = "transport"
    APPLICATION = "application"
    NOT_AUTHENTICATED = "not_authenticated"
    MALFORMED_RESPONSE = "malformed_response"


class ApiError(AppError):
    """Single error shape surfaced by the portfolio API client.

    Network failures, rejected requests and unreadable payloads all collapse
    into this type; ``kind`` tells them apart and ``message`` is what the user
    should see.
    """

    def __init__(
        self,
        kind: ApiErrorKind,
        message: str,
        *,
        status: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.status = status
        super().__init__(code=kind.value, message=message, context=context)

    @classmethod
    def not_authenticated(cls) -> ApiError:
        return cls(ApiErrorKind.NOT_AUTHENTICATED, NOT_AUTHENTICATED_MESSAGE)

    def to_dict(self) -> dict[str, Any]:
        payload = AppError.to_dict(self)
        if self.status is not None:
            payload["status"] = self.status
        return payload


class ValidationError(AppError):
    def __init__(
        self,
        message: str,
        *,
        code: str = "validation_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, message=message, context=context)

    @classmethod
    def for_fields(cls, message: str, *fields: str) -> ValidationError:
        return cls(message, context={"fields": sorted(fields)})
