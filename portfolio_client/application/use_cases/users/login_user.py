# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio_client.application.interfaces import PortfolioApi
from portfolio_client.domain import Session
from portfolio_client.shared.errors import ValidationError


class LoginUserUseCase:
    def __init__(self, *, api: PortfolioApi) -> None:
        self._api = api

    async def execute(self, email: str, password: str) -> Session:
        email = (email or "").strip()
        missing = [field for field, value in (("email", email), ("password", password)) if not value]
        if missing:
            raise ValidationError.for_fields("Por favor completa ambos campos.", *missing)
        return await self._api.login(email, password)
