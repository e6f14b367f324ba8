from datetime import datetime

from coffee_loyalty.models.transaction import Transaction
from coffee_loyalty.repositories.base import Repository


class TransactionRepository(Repository):
    model = Transaction
    label = "transaction"

    def list(
        self,
        *,
        member_id=None,
        product_id=None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ):
        """Newest first; member and product are joined eagerly."""
        q = self.db.query(Transaction)
        if member_id is not None:
            q = q.filter(Transaction.member_id == member_id)
        if product_id is not None:
            q = q.filter(Transaction.product_id == product_id)
        if date_from is not None:
            q = q.filter(Transaction.created_at >= date_from)
        if date_to is not None:
            q = q.filter(Transaction.created_at <= date_to)
        return q.order_by(Transaction.created_at.desc()).all()
