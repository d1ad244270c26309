# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Input rules applied before anything is sent to the portfolio API."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from portfolio_client.shared.errors.base import ValidationError

from .entities import ProjectDraft

ITSON_ID_LENGTH = 6
MIN_PASSWORD_LENGTH = 6

_ITSON_ID_RE = re.compile(r"^[0-9]{6}$")
_DIGITS_RE = re.compile(r"^[0-9]+$")


def is_valid_itson_id(value: str | None) -> bool:
    return bool(value) and _ITSON_ID_RE.fullmatch(value) is not None


def normalize_itson_id(value: str, *, allow_truncate: bool = False) -> str:
    """Return a 6-digit ItsonId or raise :class:`ValidationError`.

    Longer numeric ids are cut down to their last six digits only when
    ``allow_truncate`` is set.
    """
    value = (value or "").strip()
    if not _DIGITS_RE.fullmatch(value):
        raise ValidationError.for_fields(
            "El Itson ID debe contener solo dígitos numéricos.", "itsonId"
        )
    if len(value) == ITSON_ID_LENGTH:
        return value
    if allow_truncate and len(value) > ITSON_ID_LENGTH:
        return value[-ITSON_ID_LENGTH:]
    raise ValidationError.for_fields(
        "Por favor provee un Itson ID de 6 dígitos para continuar.", "itsonId"
    )


def password_warning(password: str) -> str | None:
    if len(password) < MIN_PASSWORD_LENGTH:
        return (
            "La API puede requerir una contraseña mínima de "
            f"{MIN_PASSWORD_LENGTH} caracteres."
        )
    return None


def parse_technologies(text: str | None) -> list[str]:
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def _required(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("missing", "Field cannot be empty", {})
    return value


class RegistrationForm(BaseModel):
    name: str
    email: str
    itson_id: str = Field(serialization_alias="itsonId")
    password: str = Field(min_length=1)

    strip_required = field_validator("name", "email", "itson_id", mode="after")(_required)

    @field_validator("itson_id", mode="after")
    @classmethod
    def validate_itson_id(cls, value: str) -> str:
        if not is_valid_itson_id(value):
            raise PydanticCustomError(
                "itson_id_invalid",
                "ItsonId must be exactly 6 digits",
                {"pattern": _ITSON_ID_RE.pattern},
            )
        return value


class ProjectForm(BaseModel):
    title: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    repository: str | None = None
    image: str | None = None

    strip_required = field_validator("title", "description", mode="after")(_required)

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return parse_technologies(value)
        return value

    @field_validator("repository", "image", mode="after")
    @classmethod
    def blank_as_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    def to_draft(self) -> ProjectDraft:
        fields: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "technologies": list(self.technologies),
            "images": [self.image] if self.image else [],
        }
        if self.repository is not None:
            fields["repository"] = self.repository
        return ProjectDraft(**fields)
