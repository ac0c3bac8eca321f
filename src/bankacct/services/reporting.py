"""Plain-text renderings of accounts: the /I listing and the /R report."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from bankacct.domain.entities import Account
from bankacct.exceptions import ReportFileError
from bankacct.logging_config import get_logger
from bankacct.services.interfaces import ReportingService

logger = get_logger(__name__)

NAME_WIDTH = 14

REPORT_HEADER = (
    "-------  ----            -----           --  ---------  ------------  -------\n"
    "Account  Last            First           MI  SS         Phone         Account\n"
    "Number   Name            Name                Number     Number        Balance\n"
    "-------  ----            -----           --  ---------  ------------  -------\n"
)


def render_account_info(account: Account) -> str:
    """One field per line, first name first, password last."""
    fields = [
        account.first,
        account.last,
        account.middle,
        account.social_text,
        account.area_text,
        account.phone_text,
        account.balance_text,
        account.number,
        account.password,
    ]
    return "".join(f"{value}\n" for value in fields)


def render_report_row(account: Account) -> str:
    # Names longer than the column push the rest of the row right.
    return (
        f" {account.number}   "
        f"{account.last:<{NAME_WIDTH}}  "
        f"{account.first:<{NAME_WIDTH}}  "
        f"{account.middle}.  "
        f"{account.social_text}  "
        f"({account.area_text}){account.phone_text}  "
        f"{account.balance_text}\n"
    )


def render_report(accounts: Sequence[Account]) -> str:
    return REPORT_HEADER + "".join(render_report_row(a) for a in accounts)


class TextReportingService(ReportingService):
    """Renders to a text stream and to report files."""

    def __init__(self, out: TextIO | None = None, encoding: str = "utf-8") -> None:
        self._out = out
        self._encoding = encoding

    def display_info(self, account: Account) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(render_account_info(account))
        out.flush()
        logger.debug("account_displayed", number=account.number)

    def write_report(self, accounts: Sequence[Account], path: str) -> None:
        content = render_report(accounts)
        try:
            with open(Path(path), "w", encoding=self._encoding) as report:
                report.write(content)
        except OSError as e:
            raise ReportFileError(path, e.strerror or str(e)) from e
        logger.info("report_written", path=path, accounts=len(accounts))
