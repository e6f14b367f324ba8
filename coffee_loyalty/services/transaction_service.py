from sqlalchemy.orm import Session

from coffee_loyalty.repositories.transaction_repository import TransactionRepository
from coffee_loyalty.services.filters import TransactionFilter


def list_transactions(db: Session, transaction_filter: TransactionFilter):
    return TransactionRepository(db).list(
        member_id=transaction_filter.member_id,
        product_id=transaction_filter.product_id,
        date_from=transaction_filter.date_from,
        date_to=transaction_filter.date_to,
    )
