from abc import ABC, abstractmethod
from collections.abc import Sequence

from bankacct.domain.entities import Account


class ReportingService(ABC):
    @abstractmethod
    def display_info(self, account: Account) -> None:
        """Show every field of one account."""

    @abstractmethod
    def write_report(self, accounts: Sequence[Account], path: str) -> None:
        """Write the tabular report of all accounts to path.

        Raises:
            ReportFileError: If the file cannot be opened or written.
        """
