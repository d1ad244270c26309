# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Project, ProjectDraft, Session, UserSummary
from .validation import (
    ITSON_ID_LENGTH,
    MIN_PASSWORD_LENGTH,
    ProjectForm,
    RegistrationForm,
    is_valid_itson_id,
    normalize_itson_id,
    parse_technologies,
    password_warning,
)

__all__ = [
    "ITSON_ID_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "Project",
    "ProjectDraft",
    "ProjectForm",
    "RegistrationForm",
    "Session",
    "UserSummary",
    "is_valid_itson_id",
    "normalize_itson_id",
    "parse_technologies",
    "password_warning",
]
