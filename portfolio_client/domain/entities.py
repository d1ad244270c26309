# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


def _none_as_blank(value: Any) -> Any:
    return "" if value is None else value


class UserSummary(BaseModel):
    """User record as returned by the auth endpoints, password excluded."""

    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    name: str = ""
    email: str = ""
    itson_id: str | None = Field(None, validation_alias=AliasChoices("itsonId", "itson_id"))

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    normalize_text = field_validator("name", "email", mode="before")(_none_as_blank)


class Project(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    title: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    repository: str | None = None
    images: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    normalize_text = field_validator("title", "description", mode="before")(_none_as_blank)
    normalize_lists = field_validator("technologies", "images", mode="before")(_none_as_empty)


class ProjectDraft(BaseModel):
    """Project fields sent on create or update.

    Unset fields are left out of the request body, so the same model serves
    full creates and partial updates. A field set to ``None`` is sent as
    null, which clears it on the server.
    """

    title: str | None = None
    description: str | None = None
    technologies: list[str] | None = None
    repository: str | None = None
    images: list[str] | None = None

    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


@dataclass(slots=True, frozen=True)
class Session:

    token: str
    user: UserSummary | None
