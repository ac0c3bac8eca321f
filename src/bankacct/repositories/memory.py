"""In-memory account store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal

from bankacct.domain.entities import Account
from bankacct.logging_config import get_logger
from bankacct.repositories.interfaces import AccountRepository

logger = get_logger(__name__)


class AccountStore(AccountRepository):
    """Ordered collection of accounts owned by a single invocation.

    Account numbers are expected to be unique, but the store does not enforce
    it: duplicates in a loaded database are logged and kept.
    """

    def __init__(self, records: Iterable[Account] | None = None) -> None:
        self._accounts: list[Account] = []
        if records is not None:
            self.load(records)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def load(self, records: Iterable[Account]) -> None:
        self._accounts = []
        for account in records:
            self.add(account)
        logger.debug("accounts_loaded", count=len(self._accounts))

    def add(self, account: Account) -> None:
        if self.get_by_number(account.number) is not None:
            logger.warning("duplicate_account_number", number=account.number)
        self._accounts.append(account)

    def sort_by_number(self) -> None:
        self._accounts.sort(key=lambda account: account.number)

    def find(self, number: str | None, password: str | None) -> Account | None:
        """Return the one account matching both number and password.

        Returns None when either credential is missing, when nothing matches,
        or when the match is ambiguous.
        """
        if number is None or password is None:
            return None
        matches = [
            account
            for account in self._accounts
            if account.credentials_match(number, password)
        ]
        if len(matches) != 1:
            if matches:
                logger.warning(
                    "ambiguous_credentials", number=number, matches=len(matches)
                )
            return None
        return matches[0]

    def get_by_number(self, number: str) -> Account | None:
        for account in self._accounts:
            if account.number == number:
                return account
        return None

    def list_all(self) -> list[Account]:
        return list(self._accounts)

    def total_balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts), Decimal("0"))
