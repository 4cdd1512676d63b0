"""
Account service: opens, lists and closes customer accounts.

Rules enforced here:
1. The requesting user must exist
2. A user may not own more than MAX_ACCOUNTS_PER_USER accounts
3. Account numbers come from one global counter
4. Only the owner can close an account, once, at zero balance

The service only flushes. The caller controls the commit.
"""

import logging
from datetime import datetime

from account_system.config import get_settings
from account_system.dto import AccountDetailDto, AccountDto
from account_system.exceptions import AccountException, ErrorCode
from account_system.models.account import Account
from account_system.models.enums import AccountStatus
from account_system.models.user import AccountUser
from account_system.repositories.interfaces import (
    AccountRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(
        self,
        account_repository: AccountRepository,
        user_repository: UserRepository,
        max_accounts_per_user: int | None = None,
        initial_account_number: str | None = None,
    ):
        settings = get_settings()
        self.account_repository = account_repository
        self.user_repository = user_repository
        self.max_accounts_per_user = (
            max_accounts_per_user
            if max_accounts_per_user is not None
            else settings.MAX_ACCOUNTS_PER_USER
        )
        self.initial_account_number = (
            initial_account_number or settings.INITIAL_ACCOUNT_NUMBER
        )

    def _get_user(self, user_id: int) -> AccountUser:
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise AccountException(ErrorCode.USER_NOT_FOUND)
        return user

    def _get_account_by_number(self, account_number: str) -> Account:
        account = self.account_repository.find_by_account_number(account_number)
        if not account:
            raise AccountException(
                ErrorCode.ACCOUNT_NOT_FOUND, account_number=account_number
            )
        return account

    def _next_account_number(self) -> str:
        """
        Allocate the next account number.

        The counter is global: the most recently created account's
        number plus one, whoever owns it. An empty store starts
        at the configured seed.
        """
        latest = self.account_repository.find_most_recently_created()
        if latest is None:
            return self.initial_account_number
        return str(int(latest.account_number) + 1)

    def create_account(self, user_id: int, initial_balance: int) -> AccountDto:
        """
        Open a new account for a user.

        Every account the user ever opened counts toward the cap,
        closed ones included. The create that would exceed the cap
        is rejected.
        """
        user = self._get_user(user_id)

        if self.account_repository.count_by_user(user.id) >= self.max_accounts_per_user:
            raise AccountException(ErrorCode.MAX_ACCOUNTS_PER_USER_EXCEEDED)

        account = self.account_repository.save(Account(
            account_user_id=user.id,
            account_number=self._next_account_number(),
            account_status=AccountStatus.IN_USE,
            balance=initial_balance,
            registered_at=datetime.utcnow(),
        ))

        logger.info(
            "Opened account %s for user %s with balance %s",
            account.account_number, user.id, initial_balance,
        )
        return AccountDto.from_entity(account)

    def delete_account(self, user_id: int, account_number: str) -> AccountDto:
        """
        Close (unregister) an account.

        Checked in order: ownership, not already unregistered,
        balance is zero. The account row is kept.
        """
        user = self._get_user(user_id)
        account = self._get_account_by_number(account_number)

        if account.account_user_id != user.id:
            raise AccountException(
                ErrorCode.OWNERSHIP_MISMATCH, account_number=account_number
            )
        if account.account_status == AccountStatus.UNREGISTERED:
            raise AccountException(
                ErrorCode.ALREADY_UNREGISTERED, account_number=account_number
            )
        if account.balance != 0:
            raise AccountException(
                ErrorCode.BALANCE_NOT_EMPTY, account_number=account_number
            )

        account.unregister(datetime.utcnow())
        self.account_repository.save(account)

        logger.info("Unregistered account %s of user %s", account_number, user.id)
        return AccountDto.from_entity(account)

    def get_accounts_by_user_id(self, user_id: int) -> list[AccountDto]:
        """Return all of a user's accounts, whatever their status."""
        user = self._get_user(user_id)
        return [
            AccountDto.from_entity(account)
            for account in self.account_repository.find_all_by_user(user.id)
        ]

    def get_account(self, account_id: int) -> AccountDetailDto:
        """Get an account by its internal id."""
        if account_id < 0:
            raise ValueError(f"Account id must not be negative, got {account_id}")

        account = self.account_repository.find_by_id(account_id)
        if not account:
            raise AccountException(ErrorCode.ACCOUNT_NOT_FOUND)
        return AccountDetailDto.from_entity(account)
