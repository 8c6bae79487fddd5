# File: /app/services/accounts.py | Version: 1.1 | Title: Registration / login / details flows returning typed results
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, List, Optional, TypeVar

from app.core.config import settings
from app.schemas.user import UserInput
from app.security import TokenService
from app.services.user_store import EmailTakenError, UserStore
from app.services.validators import EMAIL_TAKEN, validate_user_input

log = logging.getLogger(__name__)

T = TypeVar("T")


class Outcome(str, Enum):
    CREATED = "created"
    INVALID = "invalid"
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class RegistrationResult:
    outcome: Outcome
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class LoginResult:
    outcome: Outcome
    token: Optional[str] = None
    reused: bool = False


@dataclass(frozen=True)
class DetailsResult:
    outcome: Outcome


async def _with_deadline(aw: Awaitable[T], timeout: Optional[float] = None) -> T:
    return await asyncio.wait_for(aw, timeout or settings.REQUEST_TIMEOUT_SECONDS)


async def _register(data: UserInput, store: UserStore) -> RegistrationResult:
    errors = await validate_user_input(data, store)
    if errors:
        return RegistrationResult(Outcome.INVALID, errors)
    try:
        user = await store.create(data)
    except EmailTakenError:
        # lost the race against a concurrent registration with the same email
        return RegistrationResult(Outcome.INVALID, [EMAIL_TAKEN])
    log.info("User %s registered", user.id)
    return RegistrationResult(Outcome.CREATED)


async def register_user(
    data: UserInput, store: UserStore, timeout: Optional[float] = None
) -> RegistrationResult:
    """Validate the input and create the user. Never raises."""
    try:
        return await _with_deadline(_register(data, store), timeout)
    except Exception:
        log.exception("Registration failed")
        return RegistrationResult(Outcome.FAILED)


async def _login(
    email: str,
    password: str,
    authorization: Optional[str],
    store: UserStore,
    tokens: TokenService,
) -> LoginResult:
    user = await store.find_by_credentials(email, password)
    if user is None:
        return LoginResult(Outcome.NOT_FOUND)

    existing = tokens.get_token(authorization)
    if existing and tokens.validate_token(existing, user):
        log.debug("Reusing valid token for user %s", user.id)
        return LoginResult(Outcome.OK, token=existing, reused=True)

    # none supplied, or it expired / belongs to someone else
    log.debug("Issuing new token for user %s", user.id)
    return LoginResult(Outcome.OK, token=tokens.generate_new_token(user))


async def login_user(
    email: str,
    password: str,
    authorization: Optional[str],
    store: UserStore,
    tokens: TokenService,
    timeout: Optional[float] = None,
) -> LoginResult:
    """Check credentials, then hand back the caller's still-valid token or a fresh one."""
    try:
        return await _with_deadline(
            _login(email, password, authorization, store, tokens), timeout
        )
    except Exception:
        log.exception("Login failed")
        return LoginResult(Outcome.FAILED)


async def _details() -> DetailsResult:
    # greeting stub: the caller's token is not inspected yet
    return DetailsResult(Outcome.OK)


async def user_details() -> DetailsResult:
    try:
        return await _details()
    except Exception:
        log.exception("Details lookup failed")
        return DetailsResult(Outcome.FAILED)
