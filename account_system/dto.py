"""
Plain data returned by the services.

Services hand these to the API layer instead of live ORM
objects, so nothing outside the unit of work can mutate or
lazy-load through them.
"""

from dataclasses import dataclass
from datetime import datetime

from account_system.models.account import Account
from account_system.models.enums import (
    AccountStatus,
    TransactionType,
    TransactionResultType,
)
from account_system.models.transaction import Transaction


@dataclass(frozen=True)
class AccountDto:
    user_id: int
    account_number: str
    balance: int
    account_status: AccountStatus
    registered_at: datetime
    unregistered_at: datetime | None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDto":
        return cls(
            user_id=account.account_user_id,
            account_number=account.account_number,
            balance=account.balance,
            account_status=account.account_status,
            registered_at=account.registered_at,
            unregistered_at=account.unregistered_at,
        )


@dataclass(frozen=True)
class TransactionDto:
    account_number: str
    transaction_type: TransactionType
    transaction_result_type: TransactionResultType
    amount: int
    balance_snapshot: int
    transaction_id: str
    transacted_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionDto":
        return cls(
            account_number=transaction.account.account_number,
            transaction_type=transaction.transaction_type,
            transaction_result_type=transaction.transaction_result_type,
            amount=transaction.amount,
            balance_snapshot=transaction.balance_snapshot,
            transaction_id=transaction.transaction_id,
            transacted_at=transaction.transacted_at,
        )


@dataclass(frozen=True)
class AccountDetailDto:
    """Full view of one account, internal id included."""
    id: int
    account_user_id: int
    account_number: str
    account_status: AccountStatus
    balance: int
    registered_at: datetime
    unregistered_at: datetime | None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDetailDto":
        return cls(
            id=account.id,
            account_user_id=account.account_user_id,
            account_number=account.account_number,
            account_status=account.account_status,
            balance=account.balance,
            registered_at=account.registered_at,
            unregistered_at=account.unregistered_at,
        )
