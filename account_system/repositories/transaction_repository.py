"""SQLAlchemy implementation of TransactionRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from account_system.models.transaction import Transaction
from account_system.repositories.interfaces import TransactionRepository


class SqlAlchemyTransactionRepository(TransactionRepository):

    def __init__(self, db: Session):
        self.db = db

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Transaction]:
        return self.db.execute(
            select(Transaction).where(
                Transaction.transaction_id == transaction_id
            )
        ).scalar_one_or_none()

    def save(self, transaction: Transaction) -> Transaction:
        self.db.add(transaction)
        self.db.flush()
        return transaction
