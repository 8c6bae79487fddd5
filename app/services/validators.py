# File: /app/services/validators.py | Version: 1.1 | Title: Registration input validation (ordered, one message per field)
from __future__ import annotations

import re
from typing import AsyncIterator, List

import phonenumbers
from email_validator import EmailNotValidError, validate_email

from app.core.config import settings
from app.schemas.user import UserInput
from app.services.user_store import UserStore

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 64

# 8+ chars with a digit, a lowercase, an uppercase and one of $ @ # & !
PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z])(?=.*[$@#&!]).{8,}$")

EMAIL_TAKEN = "This Email is taken"
PASSWORD_RULE = (
    "Password must be at least 8 characters long and include a number, an uppercase "
    "letter, a lowercase letter, and a special character ($, @, #, &, or !)."
)


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone_number(phone_number: str) -> bool:
    region = None if phone_number.startswith("+") else settings.DEFAULT_PHONE_REGION
    try:
        parsed = phonenumbers.parse(phone_number, region)
    except phonenumbers.NumberParseException:
        return False
    return phonenumbers.is_valid_number(parsed)


def is_strong_password(password: str) -> bool:
    return PASSWORD_PATTERN.match(password) is not None


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units, as browsers and JS clients count it."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _name_error(value: str, label: str) -> str | None:
    # NOTE: the enforced minimum is 3 while the message says 4; clients match on this text.
    if not value:
        return f"{label} name is required"
    length = utf16_length(value)
    if length < NAME_MIN_LENGTH:
        return f"The {label} name must be at least 4 characters long."
    if length > NAME_MAX_LENGTH:
        return f"The {label} name must not exceed {NAME_MAX_LENGTH} characters."
    return None


async def iter_user_input_errors(data: UserInput, store: UserStore) -> AsyncIterator[str]:
    """
    Yield validation messages in field order: first name, last name, email,
    password, phone number. Each field stops at its first failing check.

    The email uniqueness lookup is the only awaited step; store errors propagate.
    """
    for value, label in ((data.first_name, "first"), (data.last_name, "last")):
        error = _name_error(value, label)
        if error:
            yield error

    if not data.email:
        yield "Email address is required"
    elif not is_valid_email(data.email):
        yield "The email address format is invalid."
    elif await store.email_exists(data.email):
        yield EMAIL_TAKEN

    if not data.password:
        yield "Password is required."
    elif not is_strong_password(data.password):
        yield PASSWORD_RULE

    if not data.phone_number:
        yield "Phone number is required."
    elif not is_valid_phone_number(data.phone_number):
        yield "The phone number format is invalid."


async def validate_user_input(data: UserInput, store: UserStore) -> List[str]:
    return [error async for error in iter_user_input_errors(data, store)]
