"""Command dispatch: turns queued switches into account changes and queries.

Mutating commands run first, in a fixed priority order, each at most once per
run. Query commands (account info, then the report) run after all of them.
The first failure stops the run; changes already made are kept.

Field commands share one flow: find the acting account from the next /N and
/P values, or fall back to the account the previous command acted on; take
and validate the command's own value; apply it. Transfers resolve both of
their accounts explicitly and never fall back.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from bankacct.domain.entities import Account
from bankacct.domain.validators import (
    Validator,
    is_valid_area_code,
    is_valid_middle_initial,
    is_valid_name,
    is_valid_password,
    is_valid_phone,
    is_valid_social,
    is_valid_transfer_amount,
)
from bankacct.domain.value_objects import (
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    MAX_BALANCE_DIGITS,
    MONEY_CONTEXT,
    Switch,
    format_amount,
)
from bankacct.exceptions import (
    AccountRequiredError,
    BankAcctError,
    InformationRequiredError,
    InsufficientBalanceError,
    TransferDestinationRequiredError,
)
from bankacct.logging_config import get_logger
from bankacct.repositories.interfaces import AccountRepository
from bankacct.services.interfaces import ReportingService
from bankacct.services.switch_queue import SwitchQueue

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldCommand:
    """Change one field of the acting account."""

    switch: Switch
    name: str
    validator: Validator
    apply: Callable[[Account, str], None]


@dataclass(frozen=True)
class TransferCommand:
    """Move a whole amount from one account to another."""

    switch: Switch = Switch.TRANSFER
    name: str = "transfer"


Command = FieldCommand | TransferCommand


MUTATING_COMMANDS: tuple[Command, ...] = (
    FieldCommand(
        Switch.CHANGE_AREA,
        "change_area_code",
        is_valid_area_code,
        Account.change_area_code,
    ),
    FieldCommand(
        Switch.CHANGE_FIRST,
        "change_first_name",
        lambda value: is_valid_name(value, FIRST_NAME_LENGTH),
        Account.change_first_name,
    ),
    FieldCommand(
        Switch.CHANGE_PHONE,
        "change_phone",
        is_valid_phone,
        Account.change_phone,
    ),
    FieldCommand(
        Switch.CHANGE_LAST,
        "change_last_name",
        lambda value: is_valid_name(value, LAST_NAME_LENGTH),
        Account.change_last_name,
    ),
    FieldCommand(
        Switch.CHANGE_MIDDLE,
        "change_middle_initial",
        is_valid_middle_initial,
        Account.change_middle_initial,
    ),
    FieldCommand(
        Switch.CHANGE_SOCIAL,
        "change_social",
        is_valid_social,
        Account.change_social,
    ),
    TransferCommand(),
    FieldCommand(
        Switch.NEW_PASSWORD,
        "change_password",
        is_valid_password,
        Account.change_password,
    ),
)


@dataclass
class DispatchSummary:
    """What a successful run did."""

    applied: list[str] = field(default_factory=list)
    displayed: str | None = None
    report_path: str | None = None
    acting_account: Account | None = None


class CommandDispatcher:
    """Runs queued switches against an account store."""

    def __init__(
        self,
        store: AccountRepository,
        reporting: ReportingService,
        commands: Sequence[Command] = MUTATING_COMMANDS,
    ) -> None:
        self._store = store
        self._reporting = reporting
        self._commands = tuple(commands)

    def run(self, switches: SwitchQueue) -> DispatchSummary:
        """Apply every supplied mutating command, then the queries.

        Raises:
            AccountRequiredError: No account could be resolved for a command.
            InformationRequiredError: A command's value is missing or invalid.
            TransferDestinationRequiredError: A transfer has no destination.
            InsufficientBalanceError: A transfer exceeds the source balance.
            ReportFileError: The report file could not be written.
        """
        summary = DispatchSummary()
        try:
            carried = self._run_mutations(switches, summary)
            summary.acting_account = carried
            self._run_queries(switches, carried, summary)
        except BankAcctError as e:
            logger.warning(
                "dispatch_failed",
                error=e.error_code,
                exit_code=e.exit_code,
                applied=summary.applied,
                **e.context,
            )
            raise
        logger.info("dispatch_completed", applied=summary.applied)
        return summary

    def _run_mutations(
        self, switches: SwitchQueue, summary: DispatchSummary
    ) -> Account | None:
        carried: Account | None = None
        for command in self._commands:
            if command.switch not in switches:
                continue
            if isinstance(command, TransferCommand):
                carried = self._transfer(command, switches)
            else:
                carried = self._change_field(command, switches, carried)
            summary.applied.append(command.name)
        return carried

    def _run_queries(
        self,
        switches: SwitchQueue,
        carried: Account | None,
        summary: DispatchSummary,
    ) -> None:
        if Switch.INFO in switches:
            switches.take_next(Switch.INFO)
            account = self._resolve(switches)
            if account is None:
                account = carried
            if account is None:
                raise AccountRequiredError("display_info")
            self._reporting.display_info(account)
            summary.displayed = account.number

        if Switch.REPORT in switches:
            path = switches.take_next(Switch.REPORT)
            if path is None:
                raise InformationRequiredError("write_report")
            self._store.sort_by_number()
            self._reporting.write_report(self._store.list_all(), path)
            summary.report_path = path

    def _resolve(self, switches: SwitchQueue) -> Account | None:
        # Both values are consumed even when one of them is missing.
        number = switches.take_next(Switch.NUMBER)
        password = switches.take_next(Switch.PASSWORD)
        return self._store.find(number, password)

    def _change_field(
        self,
        command: FieldCommand,
        switches: SwitchQueue,
        carried: Account | None,
    ) -> Account:
        account = self._resolve(switches)
        if account is None:
            account = carried
        if account is None:
            raise AccountRequiredError(command.name)

        value = switches.take_next(command.switch)
        if value is None or not command.validator(value):
            raise InformationRequiredError(command.name, value)

        command.apply(account, value)
        logger.info("field_changed", command=command.name, number=account.number)
        return account

    def _transfer(self, command: TransferCommand, switches: SwitchQueue) -> Account:
        source = self._resolve(switches)
        if source is None:
            raise AccountRequiredError(command.name)

        destination = self._resolve(switches)
        if destination is None:
            raise TransferDestinationRequiredError(source.number)

        value = switches.take_next(command.switch)
        if value is None or not is_valid_transfer_amount(value):
            raise InformationRequiredError(command.name, value)

        amount = Decimal(value)
        if not source.can_withdraw(amount):
            raise InsufficientBalanceError(
                source.number, format_amount(amount), source.balance_text
            )
        # the destination balance must still load on the next run
        total = MONEY_CONTEXT.add(destination.balance, amount)
        if total.adjusted() >= MAX_BALANCE_DIGITS:
            raise InformationRequiredError(command.name, value)

        source.withdraw(amount)
        destination.deposit(amount)
        logger.info(
            "funds_transferred",
            source=source.number,
            destination=destination.number,
            amount=format_amount(amount),
        )
        return source
