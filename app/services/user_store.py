# File: /app/services/user_store.py | Version: 1.1 | Title: Storage collaborator (UserStore protocol + SQLAlchemy implementation)
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol, Set, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import users as crud
from app.models import User
from app.schemas.user import UserInput
from app.security import verify_password

log = logging.getLogger(__name__)

T = TypeVar("T")


class EmailTakenError(Exception):
    """Raised by a store when an insert hits the unique email constraint."""

    def __init__(self, email: str):
        super().__init__(f"email already registered: {email}")
        self.email = email


class UserStore(Protocol):
    async def email_exists(self, email: str) -> bool: ...

    async def create(self, data: UserInput) -> User: ...

    async def find_by_credentials(self, email: str, password: str) -> Optional[User]: ...


class SqlUserStore:
    """
    UserStore over a request-scoped SQLAlchemy session.

    Session work and bcrypt run in worker threads so the event loop stays free
    and callers can time out. A timed-out call keeps running in its thread;
    `drain()` waits for it so the session is not closed underneath it.
    """

    def __init__(self, db: Session):
        self.db = db
        self._pending: Set[asyncio.Future] = set()

    async def _run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        task = asyncio.ensure_future(asyncio.to_thread(fn, *args, **kwargs))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        # cancelling the caller must not orphan the thread's result
        return await asyncio.shield(task)

    async def drain(self) -> None:
        if self._pending:
            log.debug("Waiting for %d abandoned store call(s)", len(self._pending))
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def email_exists(self, email: str) -> bool:
        return await self._run(crud.email_exists, self.db, email=email)

    async def create(self, data: UserInput) -> User:
        try:
            return await self._run(crud.create_user, self.db, data=data)
        except IntegrityError as exc:
            raise EmailTakenError(data.email) from exc

    def _check_credentials(self, email: str, password: str) -> Optional[User]:
        user = crud.get_user_by_email(self.db, email=email)
        if user is None:
            return None
        if not verify_password(password, user.hashed_password):
            log.debug("Password mismatch for user %s", user.id)
            return None
        return user

    async def find_by_credentials(self, email: str, password: str) -> Optional[User]:
        if not email or not password:
            return None
        return await self._run(self._check_credentials, email, password)
