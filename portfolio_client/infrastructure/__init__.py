# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from portfolio_client.infrastructure.api_client import PortfolioApiClient
from portfolio_client.infrastructure.session_store import (InMemorySessionStore,
                                                           JsonFileSessionStore)

__all__ = ["InMemorySessionStore", "JsonFileSessionStore", "PortfolioApiClient"]
