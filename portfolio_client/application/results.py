# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from portfolio_client.shared.errors.base import ApiError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ApiResult(Generic[T]):
    """Tagged outcome of an API call: either a value or an :class:`ApiError`."""

    success: bool
    value: T | None = None
    error: ApiError | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> ApiResult[T]:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ApiError) -> ApiResult[T]:
        return cls(success=False, error=error)

    def unwrap(self) -> T | None:
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict[str, Any]:
        if self.error is None:
            return {"ok": True, "value": self.value}
        return {"ok": False, **self.error.to_dict()}


async def capture(awaitable: Awaitable[T]) -> ApiResult[T]:
    try:
        return ApiResult.ok(await awaitable)
    except ApiError as exc:
        return ApiResult.fail(exc)


__all__ = ["ApiResult", "capture"]
