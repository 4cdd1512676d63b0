"""
Transaction API endpoints.

When a use or cancel is rejected by a business rule, the
request's writes are rolled back and a FAIL transaction is
recorded and committed on its own before the error is returned.
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from account_system.dependencies import get_transaction_service
from account_system.exceptions import AccountException
from account_system.models.base import get_db
from account_system.services.transaction_service import TransactionService
from account_system.schemas.transaction import (
    UseBalanceRequest,
    CancelBalanceRequest,
    BalanceTransactionResponse,
    QueryTransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transaction", tags=["Transactions"])


def _record_failure(
    db: Session,
    save_failed: Callable[[str, int], object],
    account_number: str,
    amount: int,
) -> None:
    """Commit a FAIL record; an unknown account gets none."""
    try:
        save_failed(account_number, amount)
        db.commit()
    except AccountException as e:
        db.rollback()
        logger.warning(
            "No failure record for account %s: %s",
            account_number, e.error_code.value,
        )


@router.post("/use", response_model=BalanceTransactionResponse)
def use_balance(
    request: UseBalanceRequest,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """Use balance from an account."""
    try:
        txn = service.use_balance(
            request.user_id, request.account_number, request.amount
        )
        db.commit()
        return txn
    except AccountException as e:
        db.rollback()
        logger.error(
            "Failed to use balance on account %s: %s",
            request.account_number, e.error_code.value,
        )
        _record_failure(
            db, service.save_failed_use_transaction,
            request.account_number, request.amount,
        )
        raise
    except ValueError:
        db.rollback()
        raise


@router.post("/cancel", response_model=BalanceTransactionResponse)
def cancel_balance(
    request: CancelBalanceRequest,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """Cancel a previous use of balance in full."""
    try:
        txn = service.cancel_balance(
            request.transaction_id, request.account_number, request.amount
        )
        db.commit()
        return txn
    except AccountException as e:
        db.rollback()
        logger.error(
            "Failed to cancel transaction %s on account %s: %s",
            request.transaction_id, request.account_number, e.error_code.value,
        )
        _record_failure(
            db, service.save_failed_cancel_transaction,
            request.account_number, request.amount,
        )
        raise
    except ValueError:
        db.rollback()
        raise


@router.get("/{transaction_id}", response_model=QueryTransactionResponse)
def query_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Get transaction details."""
    return service.query_transaction(transaction_id)
