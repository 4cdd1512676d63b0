"""
Service wiring for FastAPI.

Builds each service from repositories bound to the request's
session. FastAPI caches get_db per request, so the endpoint
and its services share one session (one unit of work).
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from account_system.models.base import get_db
from account_system.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyUserRepository,
)
from account_system.services.account_service import AccountService
from account_system.services.transaction_service import TransactionService


def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(
        SqlAlchemyAccountRepository(db),
        SqlAlchemyUserRepository(db),
    )


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(
        SqlAlchemyAccountRepository(db),
        SqlAlchemyUserRepository(db),
        SqlAlchemyTransactionRepository(db),
    )
