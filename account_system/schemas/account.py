"""
Pydantic schemas for account operations.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from account_system.models.enums import AccountStatus


class CreateAccountRequest(BaseModel):
    """Request to open a new account."""
    user_id: int = Field(ge=1)
    initial_balance: int = Field(ge=0)


class CreateAccountResponse(BaseModel):
    user_id: int
    account_number: str
    registered_at: datetime

    model_config = {"from_attributes": True}


class DeleteAccountRequest(BaseModel):
    """Request to unregister an account."""
    user_id: int = Field(ge=1)
    account_number: str = Field(min_length=10, max_length=10)


class DeleteAccountResponse(BaseModel):
    user_id: int
    account_number: str
    unregistered_at: datetime | None

    model_config = {"from_attributes": True}


class AccountInfo(BaseModel):
    """One entry of a user's account list."""
    account_number: str
    balance: int

    model_config = {"from_attributes": True}


class AccountResponse(BaseModel):
    id: int
    account_number: str
    account_user_id: int
    account_status: AccountStatus
    balance: int
    registered_at: datetime
    unregistered_at: datetime | None

    model_config = {"from_attributes": True}
