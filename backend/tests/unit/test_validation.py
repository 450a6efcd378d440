import pytest
from pydantic import ValidationError

from insurance_management.api.schemas.payment import InsertPaymentDTO
from insurance_management.api.schemas.user import InsertUserDTO
from insurance_management.core.constants import Messages
from insurance_management.validation.errors import collect_field_errors


def errors_for(**payload) -> dict[str, list[str]]:
    with pytest.raises(ValidationError) as exc_info:
        InsertPaymentDTO.model_validate(payload)
    return collect_field_errors(exc_info.value.errors())


@pytest.mark.parametrize("phone", ["0912345678", " 0912345678 "])
def test_valid_phone(phone):
    assert InsertPaymentDTO(name="P", phone=phone).phone == "0912345678"


@pytest.mark.parametrize("phone", ["091234567", "09123456789", "09123x5678"])
def test_phone_must_have_ten_digits(phone):
    assert errors_for(name="P", phone=phone) == {"phone": [Messages.INVALID_PHONE]}


@pytest.mark.parametrize("account", ["12345678", "123456789012345", "1234-5678-90"])
def test_bank_account_outside_range(account):
    assert errors_for(name="P", bankAccount=account) == {"bankAccount": [Messages.INVALID_BANK_ACCOUNT]}


def test_email_is_normalized():
    assert InsertPaymentDTO(name="P", email="User@Example.COM").email == "user@example.com"


def test_every_violation_is_reported_once():
    errors = errors_for(name=" ", email="x@", phone="1", bankAccount="1", amount=-5)

    assert set(errors) == {"name", "email", "phone", "bankAccount", "amount"}
    assert errors["name"] == [Messages.REQUIRED]
    assert all(len(messages) == 1 for messages in errors.values())


def test_request_locations_are_stripped():
    errors = collect_field_errors(
        [
            {"loc": ("body", "email"), "type": "email_format", "msg": Messages.INVALID_EMAIL},
            {"loc": ("query", "password"), "type": "missing", "msg": "Field required"},
            {"loc": ("body",), "type": "missing", "msg": "Field required"},
        ]
    )

    assert errors == {
        "email": [Messages.INVALID_EMAIL],
        "password": [Messages.REQUIRED],
        "body": [Messages.REQUIRED],
    }


def test_short_but_filled_value_is_not_reported_as_missing():
    errors = collect_field_errors(
        [
            {"loc": ("body", "code"), "type": "string_too_short", "input": "ab", "ctx": {"min_length": 3}},
            {"loc": ("body", "name"), "type": "string_too_short", "input": "   ", "ctx": {"min_length": 1}},
        ]
    )

    assert errors == {
        "code": [Messages.TOO_SHORT.format(min_length=3)],
        "name": [Messages.REQUIRED],
    }


@pytest.mark.parametrize(
    ("password", "message"),
    [("", Messages.REQUIRED), ("abc", Messages.PASSWORD_TOO_SHORT), ("a" * 73, Messages.PASSWORD_TOO_LONG)],
)
def test_password_messages(password, message):
    with pytest.raises(ValidationError) as exc_info:
        InsertUserDTO.model_validate({"email": "a@example.com", "password": password, "name": "A"})

    assert collect_field_errors(exc_info.value.errors()) == {"password": [message]}
