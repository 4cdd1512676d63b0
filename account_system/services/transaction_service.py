"""
Transaction service: using and cancelling account balance.

Each operation:
1. Loads the referenced user, account and/or transaction
2. Validates the business rules in a fixed order
3. Mutates the account balance
4. Appends a transaction record with the resulting balance

Failures detected after these checks (for example further
down the request) are recorded through the save_failed_*
methods, which write a FAIL record without touching the
balance. The caller controls the commit.
"""

import logging
import uuid
from datetime import datetime

from account_system.dto import TransactionDto
from account_system.exceptions import AccountException, ErrorCode
from account_system.models.account import Account
from account_system.models.enums import (
    AccountStatus,
    TransactionType,
    TransactionResultType,
)
from account_system.models.transaction import Transaction
from account_system.repositories.interfaces import (
    AccountRepository,
    TransactionRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


def one_year_before(moment: datetime) -> datetime:
    """Same calendar date one year earlier; Feb 29 maps to Feb 28."""
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        return moment.replace(year=moment.year - 1, day=28)


def _check_amount(amount: int) -> None:
    if amount <= 0:
        raise ValueError(f"amount must be positive, got {amount}")


class TransactionService:

    def __init__(
        self,
        account_repository: AccountRepository,
        user_repository: UserRepository,
        transaction_repository: TransactionRepository,
    ):
        self.account_repository = account_repository
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository

    def _get_account_by_number(self, account_number: str) -> Account:
        account = self.account_repository.find_by_account_number(account_number)
        if not account:
            raise AccountException(
                ErrorCode.ACCOUNT_NOT_FOUND, account_number=account_number
            )
        return account

    def _save_transaction(
        self,
        transaction_type: TransactionType,
        result_type: TransactionResultType,
        amount: int,
        account: Account,
    ) -> Transaction:
        """Append a record carrying the account's current balance."""
        return self.transaction_repository.save(Transaction(
            transaction_id=uuid.uuid4().hex,
            account=account,
            transaction_type=transaction_type,
            transaction_result_type=result_type,
            amount=amount,
            balance_snapshot=account.balance,
            transacted_at=datetime.utcnow(),
        ))

    def use_balance(
        self, user_id: int, account_number: str, amount: int
    ) -> TransactionDto:
        """
        Take an amount out of an account.

        Checked in order: the user owns the account, the account
        is in use, the amount does not exceed the balance.
        """
        _check_amount(amount)
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise AccountException(
                ErrorCode.USER_NOT_FOUND, account_number=account_number
            )
        account = self._get_account_by_number(account_number)

        if account.account_user_id != user.id:
            raise AccountException(
                ErrorCode.OWNERSHIP_MISMATCH, account_number=account_number
            )
        if account.account_status != AccountStatus.IN_USE:
            raise AccountException(
                ErrorCode.ACCOUNT_NOT_USABLE, account_number=account_number
            )

        account.use_balance(amount)
        self.account_repository.save(account)

        txn = self._save_transaction(
            TransactionType.USE, TransactionResultType.SUCCESS, amount, account
        )
        logger.info(
            "Used %s from account %s, balance now %s (transaction %s)",
            amount, account_number, account.balance, txn.transaction_id,
        )
        return TransactionDto.from_entity(txn)

    def save_failed_use_transaction(
        self, account_number: str, amount: int
    ) -> TransactionDto:
        """Record a failed use. The balance is left as it is."""
        _check_amount(amount)
        account = self._get_account_by_number(account_number)
        txn = self._save_transaction(
            TransactionType.USE, TransactionResultType.FAIL, amount, account
        )
        return TransactionDto.from_entity(txn)

    def cancel_balance(
        self, transaction_id: str, account_number: str, amount: int
    ) -> TransactionDto:
        """
        Cancel a previous use in full.

        Checked in order: the transaction belongs to this account,
        the amount equals the original amount, the original is
        not older than one year.

        The original is not checked for type or result, and it may
        be cancelled more than once. Each cancel credits the amount.
        """
        _check_amount(amount)
        original = self.transaction_repository.find_by_transaction_id(
            transaction_id
        )
        if not original:
            raise AccountException(
                ErrorCode.TRANSACTION_NOT_FOUND, account_number=account_number
            )
        account = self._get_account_by_number(account_number)

        if original.account_id != account.id:
            raise AccountException(
                ErrorCode.TRANSACTION_ACCOUNT_MISMATCH,
                account_number=account_number,
            )
        if original.amount != amount:
            raise AccountException(
                ErrorCode.PARTIAL_CANCEL_NOT_ALLOWED,
                account_number=account_number,
            )
        if original.transacted_at < one_year_before(datetime.utcnow()):
            raise AccountException(
                ErrorCode.TRANSACTION_TOO_OLD_TO_CANCEL,
                account_number=account_number,
            )

        account.cancel_balance(amount)
        self.account_repository.save(account)

        txn = self._save_transaction(
            TransactionType.CANCEL, TransactionResultType.SUCCESS, amount, account
        )
        logger.info(
            "Cancelled %s on account %s (original %s, transaction %s)",
            amount, account_number, transaction_id, txn.transaction_id,
        )
        return TransactionDto.from_entity(txn)

    def save_failed_cancel_transaction(
        self, account_number: str, amount: int
    ) -> TransactionDto:
        """Record a failed cancel. The balance is left as it is."""
        _check_amount(amount)
        account = self._get_account_by_number(account_number)
        txn = self._save_transaction(
            TransactionType.CANCEL, TransactionResultType.FAIL, amount, account
        )
        return TransactionDto.from_entity(txn)

    def query_transaction(self, transaction_id: str) -> TransactionDto:
        """Get a transaction by its public id."""
        txn = self.transaction_repository.find_by_transaction_id(transaction_id)
        if not txn:
            raise AccountException(ErrorCode.TRANSACTION_NOT_FOUND)
        return TransactionDto.from_entity(txn)
