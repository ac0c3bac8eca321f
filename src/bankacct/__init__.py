from bankacct.domain.entities import Account
from bankacct.domain.value_objects import Switch
from bankacct.repositories.flat_file import FlatFileDatabase, write_on_shutdown
from bankacct.repositories.memory import AccountStore
from bankacct.services.dispatcher import CommandDispatcher, DispatchSummary
from bankacct.services.switch_queue import SwitchQueue

__all__ = [
    "Account",
    "AccountStore",
    "CommandDispatcher",
    "DispatchSummary",
    "FlatFileDatabase",
    "Switch",
    "SwitchQueue",
    "write_on_shutdown",
]

__version__ = "2.0.0"
