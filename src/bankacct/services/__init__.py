from bankacct.services.dispatcher import (
    MUTATING_COMMANDS,
    CommandDispatcher,
    DispatchSummary,
    FieldCommand,
    TransferCommand,
)
from bankacct.services.interfaces import ReportingService
from bankacct.services.reporting import (
    TextReportingService,
    render_account_info,
    render_report,
)
from bankacct.services.switch_queue import SwitchQueue

__all__ = [
    "MUTATING_COMMANDS",
    "CommandDispatcher",
    "DispatchSummary",
    "FieldCommand",
    "ReportingService",
    "SwitchQueue",
    "TextReportingService",
    "TransferCommand",
    "render_account_info",
    "render_report",
]
