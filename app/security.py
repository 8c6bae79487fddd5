# File: /app/security.py | Version: 2.0 | Title: Password hashing + JWT token collaborator (get / validate / generate)
from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Optional, Protocol

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.models import User

log = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def _jwt_encode(claims: dict) -> str:
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _jwt_decode(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return _jwt_encode(to_encode)


def get_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the bearer credential out of an Authorization header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def validate_token(token: Optional[str], user: Optional[User] = None) -> bool:
    """
    True when the token decodes with our key, has not expired and is an access
    token. If a user is given, the token's subject must also be that user.
    """
    if not token:
        return False
    try:
        payload = _jwt_decode(token)
    except JWTError:
        return False
    if payload.get("type") not in (None, "access"):
        return False
    if user is not None and payload.get("sub") != str(user.id):
        log.debug("Token subject does not match user %s", user.id)
        return False
    return True


def generate_new_token(user: User) -> str:
    return create_access_token({"sub": str(user.id)})


class TokenService(Protocol):
    def get_token(self, authorization: Optional[str]) -> Optional[str]: ...

    def validate_token(self, token: Optional[str], user: User) -> bool: ...

    def generate_new_token(self, user: User) -> str: ...


class JwtTokenService:
    """Default TokenService backed by the module-level JWT helpers."""

    def get_token(self, authorization: Optional[str]) -> Optional[str]:
        return get_token(authorization)

    def validate_token(self, token: Optional[str], user: User) -> bool:
        return validate_token(token, user)

    def generate_new_token(self, user: User) -> str:
        return generate_new_token(user)
