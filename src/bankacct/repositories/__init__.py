from bankacct.repositories.flat_file import FlatFileDatabase, write_on_shutdown
from bankacct.repositories.interfaces import AccountRepository
from bankacct.repositories.memory import AccountStore

__all__ = [
    "AccountRepository",
    "AccountStore",
    "FlatFileDatabase",
    "write_on_shutdown",
]
