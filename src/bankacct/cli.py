"""Command-line interface for bankacct.

Switches are written with a '/' prefix and the value glued on, e.g.
``bankacct /Daccounts.txt /NA0001 /PSECRT1 /H5551234 /I``. Every switch may be
repeated; values queue up per switch in the order given.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from uuid import uuid4

from bankacct import __version__
from bankacct.config import Settings, get_settings
from bankacct.domain.value_objects import Switch
from bankacct.exceptions import BankAcctError, DatabaseNotSpecifiedError
from bankacct.logging_config import configure_logging, get_logger, log_context
from bankacct.repositories.flat_file import FlatFileDatabase, write_on_shutdown
from bankacct.repositories.memory import AccountStore
from bankacct.services.dispatcher import CommandDispatcher, DispatchSummary
from bankacct.services.interfaces import ReportingService
from bankacct.services.reporting import TextReportingService
from bankacct.services.switch_queue import SwitchQueue

logger = get_logger(__name__)

ACTION_SWITCHES: dict[Switch, str] = {
    Switch.CHANGE_AREA: "Change the area code for a specified account",
    Switch.CHANGE_FIRST: "Change the first name for a specified account",
    Switch.CHANGE_PHONE: "Change the phone number for a specified account",
    Switch.CHANGE_LAST: "Change the last name for a specified account",
    Switch.CHANGE_MIDDLE: "Change the middle initial for a specified account",
    Switch.CHANGE_SOCIAL: "Change the social security number for a specified account",
    Switch.TRANSFER: "Transfer money from one specified account to another",
    Switch.NEW_PASSWORD: "Change the password for a specified account",
    Switch.INFO: "Display the information of a specified account",
    Switch.REPORT: "Print a report to a specified report file",
}

INFO_SWITCHES: dict[Switch, str] = {
    Switch.NUMBER: "Specifies the account number for an action option",
    Switch.PASSWORD: "Specifies the password for an action option",
}


def _dest(switch: Switch) -> str:
    return f"switch_{switch.name.lower()}"


def _add_switch(group: argparse._ArgumentGroup, switch: Switch, help_text: str) -> None:
    group.add_argument(
        f"/{switch.value}",
        dest=_dest(switch),
        action="append",
        nargs="?",
        const="",
        metavar="VALUE",
        help=help_text,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the '/'-prefixed switch parser.

    Each switch appends to a list, takes an optional value, and records "" when
    given bare, so "/R" still counts as supplied.
    """
    parser = argparse.ArgumentParser(
        prog="bankacct",
        description=f"Bank account management software version {__version__}",
        prefix_chars="/",
        add_help=False,
        usage=(
            "bankacct [/?]\n"
            "       bankacct /D<database> <action option> [info options]"
        ),
    )

    general = parser.add_argument_group("general options")
    _add_switch(general, Switch.HELP, "Display this help menu")
    _add_switch(
        general,
        Switch.DATABASE,
        "Database file to load and save; the last one given is used",
    )

    actions = parser.add_argument_group("action options")
    for switch, help_text in ACTION_SWITCHES.items():
        _add_switch(actions, switch, help_text)

    info = parser.add_argument_group("info options")
    for switch, help_text in INFO_SWITCHES.items():
        _add_switch(info, switch, help_text)

    return parser


def parse_switches(
    argv: list[str], parser: argparse.ArgumentParser | None = None
) -> SwitchQueue:
    """Split argv into per-switch value queues. Unknown tokens are ignored."""
    if parser is None:
        parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        logger.debug("ignored_arguments", arguments=unknown)

    switches = SwitchQueue()
    for switch in Switch:
        for value in getattr(args, _dest(switch), None) or []:
            switches.add(switch, value)
    return switches


def resolve_database_path(switches: SwitchQueue, settings: Settings) -> Path:
    """The last /D value, else the configured default database."""
    value = switches.peek_last(Switch.DATABASE)
    if value is not None:
        return Path(value)
    if settings.database_path is not None:
        return settings.database_path
    raise DatabaseNotSpecifiedError()


def execute(
    switches: SwitchQueue,
    settings: Settings,
    reporting: ReportingService | None = None,
) -> DispatchSummary:
    """Load the database, dispatch the switches, and write the database back.

    The database is written back whenever it was loaded, whether or not the
    dispatch succeeds.
    """
    path = resolve_database_path(switches, settings)
    if reporting is None:
        reporting = TextReportingService(encoding=settings.report_encoding)

    with log_context(database=str(path)):
        database = FlatFileDatabase(path, settings.database_encoding)
        store = AccountStore(database.load())
        with write_on_shutdown(database, store):
            store.sort_by_number()
            return CommandDispatcher(store, reporting).run(switches)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run bankacct and return its exit code.

    Exit codes:
        0: success
        1: no database file specified
        2: the database file could not be loaded
        3: an account was needed but not supplied
        4: information was needed but missing or invalid
        5: the report file could not be written
        6: a transfer destination account was needed but not supplied
        7: a transfer amount exceeded the source balance
        8: the database file could not be written back; this replaces the
           code of any failure that happened before the write
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    switches = parse_switches(argv, parser)
    if switches.is_empty() or Switch.HELP in switches:
        parser.print_help()

    with log_context(invocation_id=uuid4().hex):
        try:
            execute(switches, settings)
        except BankAcctError as e:
            logger.error("invocation_failed", **e.to_dict())
            print(f"Error: {e.message}", file=sys.stderr)
            return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
