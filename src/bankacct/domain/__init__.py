from bankacct.domain.entities import Account
from bankacct.domain.validators import (
    Validator,
    is_valid_account_number,
    is_valid_area_code,
    is_valid_middle_initial,
    is_valid_name,
    is_valid_password,
    is_valid_phone,
    is_valid_social,
    is_valid_transfer_amount,
)
from bankacct.domain.value_objects import Switch

__all__ = [
    "Account",
    "Switch",
    "Validator",
    "is_valid_account_number",
    "is_valid_area_code",
    "is_valid_middle_initial",
    "is_valid_name",
    "is_valid_password",
    "is_valid_phone",
    "is_valid_social",
    "is_valid_transfer_amount",
]
