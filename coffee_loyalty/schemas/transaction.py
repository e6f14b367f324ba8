from datetime import datetime
from typing import Any, Optional

from uuid import UUID

from coffee_loyalty.schemas.common import ApiModel
from coffee_loyalty.schemas.member import MemberOut
from coffee_loyalty.schemas.product import ProductOut


class TransactionCreate(ApiModel):
    # checked by the ledger in a fixed order, see record_purchase
    member_id: Any = None
    product_id: Any = None
    quantity: Any = 1


class TransactionOut(ApiModel):
    id: UUID
    member_id: UUID
    product_id: UUID

    quantity: int
    total_price: float
    points_added: int

    created_at: datetime


class TransactionDetailOut(TransactionOut):
    member: Optional[MemberOut] = None
    product: Optional[ProductOut] = None
