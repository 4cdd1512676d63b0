"""
Account user model.

Represents the owner of accounts. Users are managed by an
external identity service; this system only reads them.
"""

from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from account_system.models.base import Base


class AccountUser(Base):
    __tablename__ = "account_users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # A user can own many accounts, in creation order
    accounts: Mapped[list["Account"]] = relationship(
        back_populates="account_user", order_by="Account.id"
    )

    def __repr__(self) -> str:
        return f"<AccountUser {self.id} {self.name}>"
