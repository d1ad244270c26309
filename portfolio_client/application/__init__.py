# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import (
    LEGACY_LOGGED_IN_KEY,
    TOKEN_KEY,
    USER_KEY,
    PortfolioApi,
    SessionStore,
)
from .results import ApiResult, capture

__all__ = [
    "ApiResult",
    "LEGACY_LOGGED_IN_KEY",
    "PortfolioApi",
    "SessionStore",
    "TOKEN_KEY",
    "USER_KEY",
    "capture",
]
