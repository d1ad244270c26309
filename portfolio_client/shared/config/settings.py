# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://portfolio-api-three-black.vercel.app/api/v1"


def _session_file_factory() -> Path:
    return Path.home() / ".portfolio_client" / "session.json"


class AppConfig(BaseSettings):
    api_base_url: str = Field(DEFAULT_API_BASE_URL, alias="PORTFOLIO_API_URL")
    session_file: Path = Field(default_factory=_session_file_factory, alias="PORTFOLIO_SESSION_FILE")
    # None leaves the transport default in place
    request_timeout: float | None = Field(None, gt=0, alias="PORTFOLIO_API_TIMEOUT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("api_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("api base url must not be empty")
        return value.rstrip("/")

    @field_validator("session_file", mode="after")
    @classmethod
    def _expand_user(cls, value: Any) -> Any:  # noqa: N805
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DEFAULT_API_BASE_URL", "load_config"]
