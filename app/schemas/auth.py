# File: /app/schemas/auth.py | Version: 3.0 | Path: /app/schemas/auth.py
from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # plain str: a malformed email is just a failed lookup (404), not a 422
    email: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
