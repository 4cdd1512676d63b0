"""
Database models package.

All models must be imported here so that they are registered
on Base.metadata before tables are created.
"""

from account_system.models.base import Base
from account_system.models.enums import (
    AccountStatus,
    TransactionType,
    TransactionResultType,
)
from account_system.models.user import AccountUser
from account_system.models.account import Account
from account_system.models.transaction import Transaction

__all__ = [
    "Base",
    "AccountStatus",
    "TransactionType",
    "TransactionResultType",
    "AccountUser",
    "Account",
    "Transaction",
]
