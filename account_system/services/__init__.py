"""Business logic services."""

from account_system.services.account_service import AccountService
from account_system.services.transaction_service import TransactionService

__all__ = ["AccountService", "TransactionService"]
