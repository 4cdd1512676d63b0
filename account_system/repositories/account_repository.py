"""
SQLAlchemy implementation of AccountRepository.

save() flushes but never commits. The caller owns the
transaction boundary and decides when to commit or roll back.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from account_system.models.account import Account
from account_system.repositories.interfaces import AccountRepository


class SqlAlchemyAccountRepository(AccountRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, account_id: int) -> Optional[Account]:
        return self.db.get(Account, account_id)

    def find_by_account_number(self, account_number: str) -> Optional[Account]:
        return self.db.execute(
            select(Account).where(Account.account_number == account_number)
        ).scalar_one_or_none()

    def find_most_recently_created(self) -> Optional[Account]:
        return self.db.execute(
            select(Account).order_by(Account.id.desc()).limit(1)
        ).scalar_one_or_none()

    def count_by_user(self, user_id: int) -> int:
        return self.db.execute(
            select(func.count(Account.id)).where(
                Account.account_user_id == user_id
            )
        ).scalar_one()

    def find_all_by_user(self, user_id: int) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.account_user_id == user_id)
            .order_by(Account.id)
        ).scalars().all()
        return list(accounts)

    def save(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account
