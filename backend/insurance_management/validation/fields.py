"""
Reusable constrained field types for request DTOs.

Each type raises a PydanticCustomError carrying the localized message, so
the 400 body shows exactly the text clients expect, e.g.::

    {"phone": ["Số điện thoại phải có 10 chữ số"]}
"""

import re
from typing import Annotated

from pydantic import AfterValidator, StringConstraints
from pydantic_core import PydanticCustomError

from insurance_management.core.constants import Messages

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")
PHONE_PATTERN = re.compile(r"^\d{10}$")
BANK_ACCOUNT_PATTERN = re.compile(r"^\d{9,14}$")

# bcrypt only reads 72 bytes and current releases reject anything longer
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("email_format", Messages.INVALID_EMAIL)
    return value.lower()


def _check_phone(value: str) -> str:
    if not PHONE_PATTERN.match(value):
        raise PydanticCustomError("phone_format", Messages.INVALID_PHONE)
    return value


def _check_bank_account(value: str) -> str:
    if not BANK_ACCOUNT_PATTERN.match(value):
        raise PydanticCustomError("bank_account_format", Messages.INVALID_BANK_ACCOUNT)
    return value


def _check_password(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("password_required", Messages.REQUIRED)
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError("password_too_short", Messages.PASSWORD_TOO_SHORT)
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError("password_too_long", Messages.PASSWORD_TOO_LONG)
    return value


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Email = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_check_email)]
PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_check_phone)]
BankAccount = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(_check_bank_account)]
Password = Annotated[str, AfterValidator(_check_password)]
