"""Flat-text account database.

A database file holds nine whitespace-separated tokens per account, in the
order: last name, first name, middle initial, social security number, area
code, phone number, balance, account number, password. The writer puts each
token on its own line with a blank line after every record; the reader only
cares about whitespace.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bankacct.domain.entities import Account
from bankacct.domain.value_objects import MAX_BALANCE_DIGITS
from bankacct.exceptions import DatabaseLoadError, DatabaseSaveError, ValidationError
from bankacct.logging_config import get_logger
from bankacct.repositories.interfaces import AccountRepository

logger = get_logger(__name__)

FIELDS_PER_RECORD = 9


def _parse_unsigned(token: str, field_name: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"{field_name} is not an unsigned number: {token!r}")
    return int(token)


def _parse_balance(token: str) -> Decimal:
    try:
        balance = Decimal(token)
    except InvalidOperation:
        raise ValueError(f"balance is not a number: {token!r}") from None
    if not balance.is_finite():
        raise ValueError(f"balance is not a number: {token!r}")
    if balance.adjusted() >= MAX_BALANCE_DIGITS:
        raise ValueError(
            f"balance has more than {MAX_BALANCE_DIGITS} whole digits: {token!r}"
        )
    return balance


def parse_record(tokens: Sequence[str]) -> Account:
    """Build an account from one record's nine tokens.

    Raises:
        ValueError: If a numeric token is malformed.
        ValidationError: If a field breaks the account's format rules.
    """
    last, first, middle, social, area, phone, balance, number, password = tokens
    return Account(
        first=first,
        last=last,
        middle=middle,
        social=_parse_unsigned(social, "social security number"),
        area=_parse_unsigned(area, "area code"),
        phone=_parse_unsigned(phone, "phone number"),
        balance=_parse_balance(balance),
        number=number,
        password=password,
    )


def format_record(account: Account) -> str:
    return "\n".join(
        [
            account.last,
            account.first,
            account.middle,
            account.social_text,
            account.area_text,
            account.phone_text,
            account.balance_text,
            account.number,
            account.password,
        ]
    )


class FlatFileDatabase:
    """Reads and writes the account database file."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Account]:
        """Parse every record in the database file.

        Raises:
            DatabaseLoadError: If the file cannot be read, ends with an
                incomplete record, or holds a malformed field.
        """
        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DatabaseLoadError(str(self._path), str(e)) from e

        tokens = text.split()
        if len(tokens) % FIELDS_PER_RECORD:
            raise DatabaseLoadError(
                str(self._path),
                f"{len(tokens)} fields is not a whole number of records",
            )

        accounts: list[Account] = []
        for start in range(0, len(tokens), FIELDS_PER_RECORD):
            record_number = start // FIELDS_PER_RECORD + 1
            try:
                accounts.append(
                    parse_record(tokens[start : start + FIELDS_PER_RECORD])
                )
            except ValidationError as e:
                raise DatabaseLoadError(
                    str(self._path), f"record {record_number}: {e.message}"
                ) from e
            except ValueError as e:
                raise DatabaseLoadError(
                    str(self._path), f"record {record_number}: {e}"
                ) from e

        logger.info("database_loaded", path=str(self._path), accounts=len(accounts))
        return accounts

    def save(self, accounts: Sequence[Account]) -> None:
        """Overwrite the database file with the given accounts.

        Raises:
            DatabaseSaveError: If the file cannot be written.
        """
        content = "".join(f"{format_record(account)}\n\n" for account in accounts)
        try:
            self._path.write_text(content, encoding=self._encoding)
        except OSError as e:
            raise DatabaseSaveError(str(self._path), str(e)) from e
        logger.info("database_saved", path=str(self._path), accounts=len(accounts))


@contextmanager
def write_on_shutdown(
    database: FlatFileDatabase, store: AccountRepository
) -> Iterator[AccountRepository]:
    """Persist the store when the block exits, however it exits.

    The store is sorted by account number and written exactly once, after a
    normal exit as well as after an exception. An exception from the block
    still propagates once the write is done, unless the write itself fails:
    DatabaseSaveError then takes its place and the block's exception is
    logged.
    """
    failure: BaseException | None = None
    try:
        yield store
    except BaseException as e:
        failure = e
        raise
    finally:
        store.sort_by_number()
        try:
            database.save(store.list_all())
        except DatabaseSaveError:
            if failure is not None:
                logger.error(
                    "failure_superseded_by_save_error",
                    error=getattr(failure, "error_code", type(failure).__name__),
                    message=str(failure),
                )
            raise
