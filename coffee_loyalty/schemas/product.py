from datetime import datetime
from typing import Any, Optional

from uuid import UUID

from coffee_loyalty.schemas.common import ApiModel


class ProductCreate(ApiModel):
    name: str = ""
    # only JSON numbers count, checked by create_product
    price: Any = None
    point_value: Any = 1


class ProductUpdate(ApiModel):
    name: Any = None
    price: Any = None
    point_value: Any = None


class ProductOut(ApiModel):
    id: UUID
    name: str
    price: float
    point_value: int

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
