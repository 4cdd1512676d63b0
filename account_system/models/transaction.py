"""
Transaction model.

One row per use or cancel attempt against an account, whether
it succeeded or failed. Rows are an audit trail: they are
written once and never updated or deleted.
"""

from datetime import datetime

from sqlalchemy import (
    String, DateTime, BigInteger, ForeignKey,
    Enum as SAEnum, event,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from account_system.models.base import Base
from account_system.models.enums import TransactionType, TransactionResultType


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    transaction_id: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    transaction_type: Mapped[TransactionType] = mapped_column(
        SAEnum(
            TransactionType,
            name="transaction_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    transaction_result_type: Mapped[TransactionResultType] = mapped_column(
        SAEnum(
            TransactionResultType,
            name="transaction_result_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    balance_snapshot: Mapped[int] = mapped_column(BigInteger, nullable=False)
    transacted_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # Relationships
    account: Mapped["Account"] = relationship()

    @validates("amount")
    def _validate_amount(self, key: str, value: int) -> int:
        if value is None or value <= 0:
            raise ValueError(f"transaction amount must be positive, got {value}")
        return value

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.transaction_type.value} "
            f"{self.amount} ({self.transaction_result_type.value})>"
        )


@event.listens_for(Transaction, "before_update")
def _reject_update(mapper, connection, target: Transaction) -> None:
    raise ValueError(
        f"Transaction {target.transaction_id} is append-only and cannot be updated"
    )
