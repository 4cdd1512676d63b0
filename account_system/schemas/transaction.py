"""
Pydantic schemas for transaction operations.

Amounts are integer minor currency units.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from account_system.models.enums import TransactionType, TransactionResultType


class UseBalanceRequest(BaseModel):
    user_id: int = Field(ge=1)
    account_number: str = Field(min_length=10, max_length=10)
    amount: int = Field(ge=10, le=1_000_000_000)


class CancelBalanceRequest(BaseModel):
    transaction_id: str = Field(min_length=1, max_length=32)
    account_number: str = Field(min_length=10, max_length=10)
    amount: int = Field(ge=10, le=1_000_000_000)


class BalanceTransactionResponse(BaseModel):
    """Response for both use and cancel."""
    account_number: str
    transaction_result_type: TransactionResultType
    transaction_id: str
    amount: int
    transacted_at: datetime

    model_config = {"from_attributes": True}


class QueryTransactionResponse(BaseModel):
    account_number: str
    transaction_type: TransactionType
    transaction_result_type: TransactionResultType
    transaction_id: str
    amount: int
    transacted_at: datetime

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    account_number: str | None = None
    error_code: str
    error_message: str
