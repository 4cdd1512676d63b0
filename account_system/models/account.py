"""
Customer account model.

An account belongs to exactly one user and holds a balance
in minor currency units. Accounts are never deleted; closing
an account moves it to UNREGISTERED, which is terminal.

The balance-changing methods enforce the entity invariants.
Business-rule checks that need other entities (ownership,
transaction history) live in the services.
"""

from datetime import datetime

from sqlalchemy import (
    String, DateTime, BigInteger, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from account_system.exceptions import AccountException, ErrorCode
from account_system.models.base import Base
from account_system.models.enums import AccountStatus


# Valid state transitions, the source of truth for the state machine
VALID_TRANSITIONS: dict[AccountStatus, set[AccountStatus]] = {
    AccountStatus.IN_USE: {AccountStatus.UNREGISTERED},
    AccountStatus.UNREGISTERED: set(),  # Terminal state
}


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    account_number: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )
    account_user_id: Mapped[int] = mapped_column(
        ForeignKey("account_users.id"), nullable=False, index=True
    )
    account_status: Mapped[AccountStatus] = mapped_column(
        SAEnum(
            AccountStatus,
            name="account_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AccountStatus.IN_USE,
    )
    balance: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0
    )
    registered_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    unregistered_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, default=None
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    account_user: Mapped["AccountUser"] = relationship(back_populates="accounts")

    @validates("balance")
    def _validate_balance(self, key: str, value: int) -> int:
        if value is None or value < 0:
            raise ValueError(f"balance must be non-negative, got {value}")
        return value

    @validates("account_user_id")
    def _validate_owner(self, key: str, value: int) -> int:
        if self.account_user_id is not None and value != self.account_user_id:
            raise ValueError("the owner of an account cannot change")
        return value

    def can_transition_to(self, new_status: AccountStatus) -> bool:
        """Check if a state transition is valid."""
        return new_status in VALID_TRANSITIONS.get(self.account_status, set())

    def use_balance(self, amount: int) -> None:
        """Take `amount` out of the balance."""
        if amount <= 0:
            raise ValueError(f"use amount must be positive, got {amount}")
        if amount > self.balance:
            raise AccountException(
                ErrorCode.AMOUNT_EXCEEDS_BALANCE,
                account_number=self.account_number,
            )
        self.balance -= amount

    def cancel_balance(self, amount: int) -> None:
        """Put a previously used `amount` back into the balance."""
        if amount <= 0:
            raise ValueError(f"cancel amount must be positive, got {amount}")
        self.balance += amount

    def unregister(self, now: datetime) -> None:
        if not self.can_transition_to(AccountStatus.UNREGISTERED):
            raise AccountException(
                ErrorCode.ALREADY_UNREGISTERED,
                account_number=self.account_number,
            )
        self.account_status = AccountStatus.UNREGISTERED
        self.unregistered_at = now

    def __repr__(self) -> str:
        return f"<Account {self.account_number} ({self.account_status.value})>"
