# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from portfolio_client.application.interfaces import PortfolioApi
from portfolio_client.domain import (
    RegistrationForm,
    Session,
    UserSummary,
    normalize_itson_id,
    password_warning,
)
from portfolio_client.shared.errors import ApiError, ValidationError, raise_validation_error
from portfolio_client.shared.logging import logger


@dataclass(slots=True, frozen=True)
class RegistrationOutcome:
    user: UserSummary | None
    session: Session | None
    login_error: ApiError | None = None
    warnings: tuple[str, ...] = ()

    @property
    def logged_in(self) -> bool:
        return self.session is not None


class RegisterUserUseCase:
    """Registers an account and then signs in with the same credentials.

    A failed automatic sign-in does not undo the registration; the outcome
    carries the login error so the caller can ask for a manual login.
    """

    def __init__(self, *, api: PortfolioApi) -> None:
        self._api = api

    async def execute(
        self,
        name: str,
        email: str,
        itson_id: str,
        password: str,
        *,
        allow_truncate: bool = False,
    ) -> RegistrationOutcome:
        missing = [
            field
            for field, value in (("name", name), ("email", email), ("itsonId", itson_id))
            if not (value or "").strip()
        ]
        if not password:
            missing.append("password")
        if missing:
            raise ValidationError.for_fields("Por favor completa todos los campos.", *missing)

        itson_id = normalize_itson_id(itson_id, allow_truncate=allow_truncate)
        try:
            form = RegistrationForm(name=name, email=email, itson_id=itson_id, password=password)
        except PydanticValidationError as exc:
            raise_validation_error(exc)

        warning = password_warning(form.password)
        warnings = (warning,) if warning else ()

        user = await self._api.register(form.name, form.email, form.itson_id, form.password)
        logger.info(f"register ok user_id={user.id if user else '-'}")

        try:
            session = await self._api.login(form.email, form.password)
        except ApiError as exc:
            logger.info(f"register: automatic login failed kind={exc.kind}")
            return RegistrationOutcome(user=user, session=None, login_error=exc, warnings=warnings)

        return RegistrationOutcome(user=user, session=session, warnings=warnings)
