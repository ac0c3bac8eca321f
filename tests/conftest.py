import logging
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog

from bankacct.config import Settings, get_settings
from bankacct.domain.entities import Account
from bankacct.repositories.flat_file import FlatFileDatabase
from bankacct.repositories.memory import AccountStore
from bankacct.services.interfaces import ReportingService


@pytest.fixture(autouse=True)
def _reset_settings_and_logging():
    package_logger = logging.getLogger("bankacct")
    level = package_logger.level
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    package_logger.setLevel(level)


@pytest.fixture
def first_account() -> Account:
    return Account(
        first="Alice",
        last="Smith",
        middle="J",
        social=123456789,
        area=555,
        phone=1234567,
        number="A0001",
        password="SECRT1",
        balance=Decimal("100.00"),
    )


@pytest.fixture
def second_account() -> Account:
    return Account(
        first="Bob",
        last="Jones",
        middle="K",
        social=987654321,
        area=212,
        phone=7654321,
        number="A0002",
        password="SECRT2",
        balance=Decimal("50.00"),
    )


@pytest.fixture
def store(first_account: Account, second_account: Account) -> AccountStore:
    return AccountStore([second_account, first_account])


@pytest.fixture
def reporting() -> MagicMock:
    return MagicMock(spec=ReportingService)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        log_level="WARNING",
        database_path=None,
        _env_file=None,
    )


@pytest.fixture
def database_path(
    tmp_path: Path, first_account: Account, second_account: Account
) -> Path:
    path = tmp_path / "accounts.txt"
    FlatFileDatabase(path).save([first_account, second_account])
    return path

