"""Exception hierarchy for bankacct.

All application exceptions inherit from BankAcctError. Each failure kind
that can end an invocation carries the process exit code it maps to, so the
CLI can turn any caught error into a return value without a lookup table.
"""

from typing import Any


class BankAcctError(Exception):
    """Base exception for all bankacct errors.

    Includes an error_code for logs, the exit_code reported to the invoker,
    and extra context.
    """

    error_code: str = "BANKACCT_ERROR"
    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        exit_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if exit_code is not None:
            self.exit_code = exit_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured logs."""
        return {
            "error": self.error_code,
            "message": self.message,
            "exit_code": self.exit_code,
            "context": self.context,
        }


# =============================================================================
# Database Errors
# =============================================================================


class DatabaseError(BankAcctError):
    """Base exception for database file errors."""

    error_code = "DATABASE_ERROR"


class DatabaseNotSpecifiedError(DatabaseError):
    """Raised when no database file was given."""

    error_code = "DATABASE_NOT_SPECIFIED"
    exit_code = 1

    def __init__(self) -> None:
        super().__init__("No database file specified")


class DatabaseLoadError(DatabaseError):
    """Raised when the database file cannot be read or parsed."""

    error_code = "DATABASE_UNREADABLE"
    exit_code = 2

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f'Could not load "{path}": {reason}',
            context={"path": path, "reason": reason},
        )


class DatabaseSaveError(DatabaseError):
    """Raised when the database file cannot be written back."""

    error_code = "DATABASE_UNWRITABLE"
    exit_code = 8

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f'Could not save "{path}": {reason}',
            context={"path": path, "reason": reason},
        )


# =============================================================================
# Account Errors
# =============================================================================


class AccountError(BankAcctError):
    """Base exception for account-related errors."""

    error_code = "ACCOUNT_ERROR"


class AccountRequiredError(AccountError):
    """Raised when a command has no resolvable acting account."""

    error_code = "ACCOUNT_REQUIRED"
    exit_code = 3

    def __init__(self, command: str) -> None:
        super().__init__(
            f"An account is required for {command}",
            context={"command": command},
        )


class TransferDestinationRequiredError(AccountError):
    """Raised when the destination account of a transfer is not resolved."""

    error_code = "TRANSFER_DESTINATION_REQUIRED"
    exit_code = 6

    def __init__(self, source_number: str) -> None:
        super().__init__(
            f"A destination account is required to transfer from {source_number}",
            context={"source": source_number},
        )


class InsufficientBalanceError(AccountError):
    """Raised when a transfer would take a balance below zero."""

    error_code = "INSUFFICIENT_BALANCE"
    exit_code = 7

    def __init__(self, account_number: str, requested: str, available: str) -> None:
        super().__init__(
            f"Insufficient balance in {account_number}: "
            f"requested {requested}, available {available}",
            context={
                "account_number": account_number,
                "requested": requested,
                "available": available,
            },
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(BankAcctError):
    """Base exception for validation errors."""

    error_code = "VALIDATION_ERROR"


class InformationRequiredError(ValidationError):
    """Raised when a command's value is missing or fails its validator."""

    error_code = "INFORMATION_REQUIRED"
    exit_code = 4

    def __init__(self, command: str, value: str | None = None) -> None:
        reason = "missing" if value is None else "invalid"
        super().__init__(
            f"Information required for {command}: value {reason}",
            context={"command": command, "reason": reason},
        )


class FieldLengthError(ValidationError):
    """Raised when a value is longer than its field allows."""

    error_code = "FIELD_TOO_LONG"

    def __init__(self, field_name: str, length: int, max_length: int) -> None:
        super().__init__(
            f"{field_name} is {length} characters, maximum is {max_length}",
            context={
                "field": field_name,
                "length": length,
                "max_length": max_length,
            },
        )


class FieldFormatError(ValidationError):
    """Raised when a value does not match its field's format."""

    error_code = "FIELD_FORMAT"

    def __init__(self, field_name: str) -> None:
        super().__init__(
            f"Invalid value for {field_name}",
            context={"field": field_name},
        )


# =============================================================================
# Report Errors
# =============================================================================


class ReportFileError(BankAcctError):
    """Raised when the report file cannot be written."""

    error_code = "REPORT_FILE_ERROR"
    exit_code = 5

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f'Could not write report "{path}": {reason}',
            context={"path": path, "reason": reason},
        )
