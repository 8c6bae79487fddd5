# File: /app/dependencies.py | Version: 2.1 | Path: /app/dependencies.py
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.security import JwtTokenService, TokenService
from app.services.user_store import SqlUserStore, UserStore

_token_service = JwtTokenService()


async def get_user_store(db: Session = Depends(get_db)) -> AsyncIterator[UserStore]:
    store = SqlUserStore(db)
    try:
        yield store
    finally:
        # runs before get_db closes the session
        await store.drain()


def get_token_service() -> TokenService:
    return _token_service
