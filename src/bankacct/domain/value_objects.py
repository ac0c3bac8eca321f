from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

FIRST_NAME_LENGTH = 50
LAST_NAME_LENGTH = 50
ACCOUNT_NUMBER_LENGTH = 5
PASSWORD_LENGTH = 6
MIDDLE_INITIAL_LENGTH = 1

AREA_CODE_DIGITS = 3
PHONE_DIGITS = 7
SOCIAL_DIGITS = 9

CENTS = Decimal("0.01")

# Largest whole-number part accepted for a transfer amount and for a stored
# balance. MONEY_CONTEXT holds any sum of the two exactly, cents included.
MAX_TRANSFER_DIGITS = 18
MAX_BALANCE_DIGITS = 30
MONEY_CONTEXT = Context(prec=40, rounding=ROUND_HALF_UP)


class Switch(str, Enum):
    """Command-line switch letters, as typed after the '/' prefix."""

    HELP = "?"
    DATABASE = "D"

    CHANGE_AREA = "A"
    CHANGE_FIRST = "F"
    CHANGE_PHONE = "H"
    CHANGE_LAST = "L"
    CHANGE_MIDDLE = "M"
    CHANGE_SOCIAL = "S"
    TRANSFER = "T"
    NEW_PASSWORD = "W"

    INFO = "I"
    REPORT = "R"

    NUMBER = "N"
    PASSWORD = "P"


def to_cents(amount: Decimal) -> Decimal:
    """Round an amount to whole cents."""
    return amount.quantize(CENTS, context=MONEY_CONTEXT)


def format_amount(amount: Decimal) -> str:
    return f"{to_cents(amount):f}"


__all__ = [
    "ACCOUNT_NUMBER_LENGTH",
    "AREA_CODE_DIGITS",
    "CENTS",
    "FIRST_NAME_LENGTH",
    "LAST_NAME_LENGTH",
    "MAX_BALANCE_DIGITS",
    "MAX_TRANSFER_DIGITS",
    "MIDDLE_INITIAL_LENGTH",
    "MONEY_CONTEXT",
    "PASSWORD_LENGTH",
    "PHONE_DIGITS",
    "SOCIAL_DIGITS",
    "Switch",
    "format_amount",
    "to_cents",
]
