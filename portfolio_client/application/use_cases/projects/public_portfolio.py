# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio_client.application.interfaces import PortfolioApi
from portfolio_client.domain import Project, is_valid_itson_id
from portfolio_client.shared.errors import ValidationError


class PublicPortfolioUseCase:
    def __init__(self, *, api: PortfolioApi) -> None:
        self._api = api

    async def execute(self, itson_id: str) -> list[Project]:
        itson_id = (itson_id or "").strip()
        if not is_valid_itson_id(itson_id):
            raise ValidationError.for_fields("Ingresa un Itson ID válido (6 dígitos)", "itsonId")
        return await self._api.get_public_projects(itson_id)
