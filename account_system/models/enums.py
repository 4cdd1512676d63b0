"""
Shared enumerations for database models.

Stored as database enums so that an unknown status or
transaction type is rejected by the database as well.
"""

import enum


class AccountStatus(str, enum.Enum):
    """Lifecycle of a customer account. UNREGISTERED is terminal."""
    IN_USE = "IN_USE"
    UNREGISTERED = "UNREGISTERED"


class TransactionType(str, enum.Enum):
    USE = "USE"
    CANCEL = "CANCEL"


class TransactionResultType(str, enum.Enum):
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
