"""Persistence access for the services."""

from account_system.repositories.interfaces import (
    UserRepository,
    AccountRepository,
    TransactionRepository,
)
from account_system.repositories.user_repository import SqlAlchemyUserRepository
from account_system.repositories.account_repository import SqlAlchemyAccountRepository
from account_system.repositories.transaction_repository import (
    SqlAlchemyTransactionRepository,
)

__all__ = [
    "UserRepository",
    "AccountRepository",
    "TransactionRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTransactionRepository",
]
