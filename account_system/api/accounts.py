"""
Account API endpoints.

The routers are thin: they handle HTTP concerns and the
commit/rollback of the request's unit of work, and delegate
every business rule to AccountService. Business-rule errors
propagate to the exception handlers registered in main.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from account_system.dependencies import get_account_service
from account_system.exceptions import AccountException
from account_system.models.base import get_db
from account_system.services.account_service import AccountService
from account_system.schemas.account import (
    CreateAccountRequest,
    CreateAccountResponse,
    DeleteAccountRequest,
    DeleteAccountResponse,
    AccountInfo,
    AccountResponse,
)

router = APIRouter(prefix="/account", tags=["Accounts"])


@router.post("", response_model=CreateAccountResponse, status_code=201)
def create_account(
    request: CreateAccountRequest,
    db: Session = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    """Open a new account for a user."""
    try:
        account = service.create_account(request.user_id, request.initial_balance)
        db.commit()
        return account
    except (AccountException, ValueError):
        db.rollback()
        raise


@router.delete("", response_model=DeleteAccountResponse)
def delete_account(
    request: DeleteAccountRequest,
    db: Session = Depends(get_db),
    service: AccountService = Depends(get_account_service),
):
    """
    Unregister an account.

    Only the owner can do it, and only when the balance is zero.
    """
    try:
        account = service.delete_account(request.user_id, request.account_number)
        db.commit()
        return account
    except (AccountException, ValueError):
        db.rollback()
        raise


@router.get("", response_model=list[AccountInfo])
def get_accounts_by_user_id(
    user_id: int,
    service: AccountService = Depends(get_account_service),
):
    """List all of a user's accounts with their balances."""
    return service.get_accounts_by_user_id(user_id)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Get account details by internal id."""
    return service.get_account(account_id)
