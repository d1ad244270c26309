# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client for the Portfolio REST API."""

from portfolio_client.application import ApiResult, SessionStore, capture
from portfolio_client.domain import Project, ProjectDraft, Session, UserSummary
from portfolio_client.infrastructure import (InMemorySessionStore, JsonFileSessionStore,
                                             PortfolioApiClient)
from portfolio_client.shared.errors import ApiError, ApiErrorKind, ValidationError

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "ApiResult",
    "InMemorySessionStore",
    "JsonFileSessionStore",
    "PortfolioApiClient",
    "Project",
    "ProjectDraft",
    "Session",
    "SessionStore",
    "UserSummary",
    "ValidationError",
    "capture",
]
