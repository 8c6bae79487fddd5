# File: tests/test_validators.py | Version: 1.0 | Title: Registration input validation rules
import asyncio

import pytest

from app.schemas.user import UserInput
from app.services.validators import (
    EMAIL_TAKEN,
    PASSWORD_RULE,
    is_strong_password,
    is_valid_email,
    is_valid_phone_number,
    utf16_length,
    validate_user_input,
)
from conftest import VALID_USER, FakeUserStore


def _errors(store: FakeUserStore, **overrides) -> list:
    data = UserInput.model_validate({**VALID_USER, **overrides})
    return asyncio.run(validate_user_input(data, store))


def test_valid_input_has_no_errors(fake_store):
    assert _errors(fake_store) == []
    assert fake_store.lookups == 1


def test_all_fields_missing_reports_each_once_in_order(fake_store):
    errors = asyncio.run(validate_user_input(UserInput(), fake_store))
    assert errors == [
        "first name is required",
        "last name is required",
        "Email address is required",
        "Password is required.",
        "Phone number is required.",
    ]
    # no uniqueness lookup without an email
    assert fake_store.lookups == 0


@pytest.mark.parametrize(
    "field, message",
    [
        ("firstName", "first name is required"),
        ("lastName", "last name is required"),
        ("email", "Email address is required"),
        ("password", "Password is required."),
        ("phoneNumber", "Phone number is required."),
    ],
)
def test_single_missing_field(fake_store, field, message):
    assert _errors(fake_store, **{field: ""}) == [message]


def test_name_lower_bound_is_three_despite_message(fake_store):
    assert _errors(fake_store, firstName="Al") == [
        "The first name must be at least 4 characters long."
    ]
    assert _errors(fake_store, lastName="Li") == [
        "The last name must be at least 4 characters long."
    ]
    assert _errors(fake_store, firstName="Ali", lastName="Lid") == []


def test_name_upper_bound(fake_store):
    assert _errors(fake_store, firstName="a" * 64, lastName="b" * 64) == []
    assert _errors(fake_store, firstName="a" * 65) == [
        "The first name must not exceed 64 characters."
    ]
    assert _errors(fake_store, lastName="b" * 65) == [
        "The last name must not exceed 64 characters."
    ]


def test_bad_email_format_skips_uniqueness_lookup(fake_store):
    assert _errors(fake_store, email="not-an-email") == ["The email address format is invalid."]
    assert fake_store.lookups == 0


def test_taken_email(fake_store):
    fake_store.add("u1", VALID_USER["email"], "whatever")
    assert _errors(fake_store) == [EMAIL_TAKEN]


def test_password_composite_rule(fake_store):
    assert _errors(fake_store, password="abcdefgh") == [PASSWORD_RULE]
    assert _errors(fake_store, password="Abc1234!") == []
    assert _errors(fake_store, password="Abc123!") == [PASSWORD_RULE]  # 7 chars
    assert _errors(fake_store, password="Abc12345%") == [PASSWORD_RULE]  # % not allowed


def test_bad_phone_number(fake_store):
    assert _errors(fake_store, phoneNumber="12345") == ["The phone number format is invalid."]
    assert _errors(fake_store, phoneNumber="call me") == ["The phone number format is invalid."]


def test_errors_collected_across_fields(fake_store):
    fake_store.add("u1", VALID_USER["email"], "whatever")
    errors = _errors(fake_store, firstName="", password="weak", phoneNumber="x")
    assert errors == [
        "first name is required",
        EMAIL_TAKEN,
        PASSWORD_RULE,
        "The phone number format is invalid.",
    ]


def test_store_errors_propagate():
    store = FakeUserStore(fail_with=RuntimeError("db down"))
    with pytest.raises(RuntimeError):
        _errors(store)


def test_format_helpers():
    assert is_valid_email("bob@example.com")
    assert not is_valid_email("bob@")
    assert is_valid_phone_number("+442083661177")
    assert not is_valid_phone_number("+12001230101")
    assert is_strong_password("Abc12345!")
    assert not is_strong_password("ABC12345!")


def test_name_length_counts_utf16_units(fake_store):
    # each emoji is two UTF-16 code units
    assert _errors(fake_store, firstName="😀😀") == []
    assert _errors(fake_store, firstName="😀") == [
        "The first name must be at least 4 characters long."
    ]
    assert _errors(fake_store, lastName="😀" * 33) == [
        "The last name must not exceed 64 characters."
    ]
    assert utf16_length("Zoë") == 3
