"""
Business-rule errors.

Every rejection the services can produce is one of the codes
below. Services raise AccountException and never catch it;
the API layer turns it into an error response.
"""

import enum


class ErrorCode(str, enum.Enum):
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    MAX_ACCOUNTS_PER_USER_EXCEEDED = "MAX_ACCOUNTS_PER_USER_EXCEEDED"
    OWNERSHIP_MISMATCH = "OWNERSHIP_MISMATCH"
    ALREADY_UNREGISTERED = "ALREADY_UNREGISTERED"
    BALANCE_NOT_EMPTY = "BALANCE_NOT_EMPTY"
    ACCOUNT_NOT_USABLE = "ACCOUNT_NOT_USABLE"
    AMOUNT_EXCEEDS_BALANCE = "AMOUNT_EXCEEDS_BALANCE"
    TRANSACTION_ACCOUNT_MISMATCH = "TRANSACTION_ACCOUNT_MISMATCH"
    PARTIAL_CANCEL_NOT_ALLOWED = "PARTIAL_CANCEL_NOT_ALLOWED"
    TRANSACTION_TOO_OLD_TO_CANCEL = "TRANSACTION_TOO_OLD_TO_CANCEL"

    @property
    def description(self) -> str:
        return ERROR_DESCRIPTIONS[self]

    @property
    def is_not_found(self) -> bool:
        return self in NOT_FOUND_CODES


ERROR_DESCRIPTIONS: dict[ErrorCode, str] = {
    ErrorCode.USER_NOT_FOUND: "User not found.",
    ErrorCode.ACCOUNT_NOT_FOUND: "Account not found.",
    ErrorCode.TRANSACTION_NOT_FOUND: "Transaction not found.",
    ErrorCode.MAX_ACCOUNTS_PER_USER_EXCEEDED:
        "A user cannot own more than the maximum number of accounts.",
    ErrorCode.OWNERSHIP_MISMATCH: "The account does not belong to this user.",
    ErrorCode.ALREADY_UNREGISTERED: "The account is already unregistered.",
    ErrorCode.BALANCE_NOT_EMPTY: "An account with a remaining balance cannot be closed.",
    ErrorCode.ACCOUNT_NOT_USABLE: "The account is not in use.",
    ErrorCode.AMOUNT_EXCEEDS_BALANCE: "The amount exceeds the account balance.",
    ErrorCode.TRANSACTION_ACCOUNT_MISMATCH:
        "The transaction did not take place on this account.",
    ErrorCode.PARTIAL_CANCEL_NOT_ALLOWED:
        "Only the full transaction amount can be cancelled.",
    ErrorCode.TRANSACTION_TOO_OLD_TO_CANCEL:
        "Transactions older than one year cannot be cancelled.",
}

NOT_FOUND_CODES = frozenset({
    ErrorCode.USER_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND,
})


class AccountException(Exception):
    """A business rule rejected the requested operation."""

    def __init__(self, error_code: ErrorCode, account_number: str | None = None):
        self.error_code = error_code
        self.error_message = error_code.description
        self.account_number = account_number
        super().__init__(f"{error_code.value}: {self.error_message}")
