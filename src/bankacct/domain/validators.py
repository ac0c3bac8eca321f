"""Syntax checks for values proposed for account fields.

Every validator takes the raw switch value, which is None when the switch
carried no value, and returns whether it is acceptable. None never passes.
Character classes are spelled out in ASCII so that non-Latin letters and
digits are rejected.
"""

import re
from collections.abc import Callable

from bankacct.domain.value_objects import (
    ACCOUNT_NUMBER_LENGTH,
    AREA_CODE_DIGITS,
    FIRST_NAME_LENGTH,
    MAX_TRANSFER_DIGITS,
    PASSWORD_LENGTH,
    PHONE_DIGITS,
    SOCIAL_DIGITS,
)

Validator = Callable[[str | None], bool]

_NAME = re.compile(r"[A-Za-z]+")
_MIDDLE = re.compile(r"[A-Za-z]")
_AREA = re.compile(rf"[0-9]{{{AREA_CODE_DIGITS}}}")
_PHONE = re.compile(rf"[0-9]{{{PHONE_DIGITS}}}")
_SOCIAL = re.compile(rf"[0-9]{{{SOCIAL_DIGITS}}}")
_PASSWORD = re.compile(rf"[A-Z0-9]{{{PASSWORD_LENGTH}}}")
_AMOUNT = re.compile(rf"0*[0-9]{{1,{MAX_TRANSFER_DIGITS}}}")
_TOKEN = re.compile(r"\S+")


def _matches(pattern: re.Pattern[str], value: str | None) -> bool:
    return value is not None and pattern.fullmatch(value) is not None


def is_valid_name(value: str | None, max_length: int = FIRST_NAME_LENGTH) -> bool:
    """Non-empty, letters only, no longer than max_length."""
    return (
        value is not None
        and _NAME.fullmatch(value) is not None
        and len(value) <= max_length
    )


def is_valid_middle_initial(value: str | None) -> bool:
    return _matches(_MIDDLE, value)


def is_valid_area_code(value: str | None) -> bool:
    return _matches(_AREA, value)


def is_valid_phone(value: str | None) -> bool:
    return _matches(_PHONE, value)


def is_valid_social(value: str | None) -> bool:
    return _matches(_SOCIAL, value)


def is_valid_password(value: str | None) -> bool:
    """Six characters, each an upper-case letter or a digit."""
    return _matches(_PASSWORD, value)


def is_valid_transfer_amount(value: str | None) -> bool:
    """Whole, non-negative amount written as plain digits.

    Leading zeros aside, at most MAX_TRANSFER_DIGITS digits long.
    """
    return _matches(_AMOUNT, value)


def is_valid_token(value: str | None, max_length: int) -> bool:
    """One run of non-whitespace characters, no longer than max_length.

    This is all a field needs to survive a round trip through the
    whitespace-separated database file.
    """
    return (
        value is not None
        and _TOKEN.fullmatch(value) is not None
        and len(value) <= max_length
    )


def is_valid_account_number(value: str | None) -> bool:
    return is_valid_token(value, ACCOUNT_NUMBER_LENGTH)


__all__ = [
    "Validator",
    "is_valid_account_number",
    "is_valid_area_code",
    "is_valid_middle_initial",
    "is_valid_name",
    "is_valid_password",
    "is_valid_phone",
    "is_valid_social",
    "is_valid_token",
    "is_valid_transfer_amount",
]
