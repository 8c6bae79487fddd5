# File: /app/schemas/user.py | Version: 3.0 | Path: /app/schemas/user.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class UserInput(BaseModel):
    """Registration fields as sent by clients (camelCase on the wire)."""

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str = ""
    password: str = ""
    phone_number: str = Field("", alias="phoneNumber")

    model_config = ConfigDict(populate_by_name=True)


class StatusData(BaseModel):
    status: str


class UserEnvelope(BaseModel):
    errors: List[str] = []
    data: StatusData


class WelcomeResponse(BaseModel):
    status: str = "Welcome"
