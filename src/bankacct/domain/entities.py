from dataclasses import dataclass, field
from decimal import Decimal

from bankacct.domain.validators import (
    is_valid_area_code,
    is_valid_middle_initial,
    is_valid_name,
    is_valid_password,
    is_valid_phone,
    is_valid_social,
    is_valid_token,
)
from bankacct.domain.value_objects import (
    ACCOUNT_NUMBER_LENGTH,
    AREA_CODE_DIGITS,
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    MIDDLE_INITIAL_LENGTH,
    MONEY_CONTEXT,
    PASSWORD_LENGTH,
    PHONE_DIGITS,
    SOCIAL_DIGITS,
    format_amount,
)
from bankacct.exceptions import (
    FieldFormatError,
    FieldLengthError,
    InsufficientBalanceError,
)


def _check_length(field_name: str, value: str, max_length: int) -> None:
    if len(value) > max_length:
        raise FieldLengthError(field_name, len(value), max_length)


def _check_token(field_name: str, value: str, max_length: int) -> None:
    _check_length(field_name, value, max_length)
    if not is_valid_token(value, max_length):
        raise FieldFormatError(field_name)


def _check_digits(field_name: str, value: int, digits: int) -> None:
    if not 0 <= value < 10**digits:
        raise FieldFormatError(field_name)


@dataclass
class Account:
    """One bank customer record.

    Text fields are bounded: a value longer than its field allows is rejected
    with FieldLengthError rather than cut short. Area code, phone and social
    security number are held as integers and rendered zero-padded to their
    fixed width.

    A new account, such as one read from the database file, only needs each
    text field to be a single whitespace-free token within its length, so
    "O'Neil" or a lower-case password load as they were saved. The change_*
    methods hold new values to the strict field validators.
    """

    first: str
    last: str
    middle: str
    social: int
    area: int
    phone: int
    number: str
    password: str
    balance: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

        _check_token("first name", self.first, FIRST_NAME_LENGTH)
        _check_token("last name", self.last, LAST_NAME_LENGTH)
        _check_token("middle initial", self.middle, MIDDLE_INITIAL_LENGTH)
        _check_token("account number", self.number, ACCOUNT_NUMBER_LENGTH)
        _check_token("password", self.password, PASSWORD_LENGTH)

        _check_digits("social security number", self.social, SOCIAL_DIGITS)
        _check_digits("area code", self.area, AREA_CODE_DIGITS)
        _check_digits("phone number", self.phone, PHONE_DIGITS)

    @property
    def social_text(self) -> str:
        return f"{self.social:0{SOCIAL_DIGITS}d}"

    @property
    def area_text(self) -> str:
        return f"{self.area:0{AREA_CODE_DIGITS}d}"

    @property
    def phone_text(self) -> str:
        return f"{self.phone:0{PHONE_DIGITS}d}"

    @property
    def balance_text(self) -> str:
        return format_amount(self.balance)

    def change_first_name(self, value: str) -> None:
        _check_length("first name", value, FIRST_NAME_LENGTH)
        if not is_valid_name(value, FIRST_NAME_LENGTH):
            raise FieldFormatError("first name")
        self.first = value

    def change_last_name(self, value: str) -> None:
        _check_length("last name", value, LAST_NAME_LENGTH)
        if not is_valid_name(value, LAST_NAME_LENGTH):
            raise FieldFormatError("last name")
        self.last = value

    def change_middle_initial(self, value: str) -> None:
        if not is_valid_middle_initial(value):
            raise FieldFormatError("middle initial")
        self.middle = value

    def change_area_code(self, value: str) -> None:
        if not is_valid_area_code(value):
            raise FieldFormatError("area code")
        self.area = int(value)

    def change_phone(self, value: str) -> None:
        if not is_valid_phone(value):
            raise FieldFormatError("phone number")
        self.phone = int(value)

    def change_social(self, value: str) -> None:
        if not is_valid_social(value):
            raise FieldFormatError("social security number")
        self.social = int(value)

    def change_password(self, value: str) -> None:
        _check_length("password", value, PASSWORD_LENGTH)
        if not is_valid_password(value):
            raise FieldFormatError("password")
        self.password = value

    def can_withdraw(self, amount: Decimal) -> bool:
        return self.balance >= amount

    def withdraw(self, amount: Decimal) -> None:
        if not self.can_withdraw(amount):
            raise InsufficientBalanceError(
                self.number, format_amount(amount), self.balance_text
            )
        self.balance = MONEY_CONTEXT.subtract(self.balance, amount)

    def deposit(self, amount: Decimal) -> None:
        self.balance = MONEY_CONTEXT.add(self.balance, amount)

    def credentials_match(self, number: str, password: str) -> bool:
        return self.number == number and self.password == password
