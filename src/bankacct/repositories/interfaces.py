from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal

from bankacct.domain.entities import Account


class AccountRepository(ABC):
    @abstractmethod
    def load(self, records: Iterable[Account]) -> None:
        pass

    @abstractmethod
    def add(self, account: Account) -> None:
        pass

    @abstractmethod
    def sort_by_number(self) -> None:
        pass

    @abstractmethod
    def find(self, number: str | None, password: str | None) -> Account | None:
        pass

    @abstractmethod
    def get_by_number(self, number: str) -> Account | None:
        pass

    @abstractmethod
    def list_all(self) -> list[Account]:
        pass

    @abstractmethod
    def total_balance(self) -> Decimal:
        pass
