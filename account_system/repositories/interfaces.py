"""
Repository interfaces.

The services only depend on these contracts. The SQLAlchemy
implementations live next to them; tests may substitute any
other implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from account_system.models.account import Account
from account_system.models.transaction import Transaction
from account_system.models.user import AccountUser


class UserRepository(ABC):

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[AccountUser]:
        """Return the user with this id, or None."""
        ...


class AccountRepository(ABC):

    @abstractmethod
    def find_by_id(self, account_id: int) -> Optional[Account]:
        ...

    @abstractmethod
    def find_by_account_number(self, account_number: str) -> Optional[Account]:
        ...

    @abstractmethod
    def find_most_recently_created(self) -> Optional[Account]:
        """Return the account with the highest id, or None if there is none."""
        ...

    @abstractmethod
    def count_by_user(self, user_id: int) -> int:
        """Count every account ever created for the user, whatever its status."""
        ...

    @abstractmethod
    def find_all_by_user(self, user_id: int) -> list[Account]:
        """Return the user's accounts in creation order."""
        ...

    @abstractmethod
    def save(self, account: Account) -> Account:
        ...


class TransactionRepository(ABC):

    @abstractmethod
    def find_by_transaction_id(self, transaction_id: str) -> Optional[Transaction]:
        ...

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        ...
