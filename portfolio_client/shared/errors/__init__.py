# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import ApiError, ApiErrorKind, AppError, ValidationError
from .validation import format_pydantic_errors, raise_validation_error

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "AppError",
    "ValidationError",
    "format_pydantic_errors",
    "raise_validation_error",
]
