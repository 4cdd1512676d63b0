"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from account_system.models.user import AccountUser
from account_system.repositories.interfaces import UserRepository


class SqlAlchemyUserRepository(UserRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[AccountUser]:
        return self.db.get(AccountUser, user_id)
