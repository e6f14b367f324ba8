import uuid
from sqlalchemy import CheckConstraint, Column, Float, Integer, String, TIMESTAMP, Uuid
from sqlalchemy.sql import func
from coffee_loyalty.db import Base


class Product(Base):
    __tablename__ = "products"

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("point_value >= 0", name="ck_products_point_value_non_negative"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(String(150), nullable=False, unique=True)

    price = Column(Float, nullable=False, default=0)
    # points earned per unit purchased
    point_value = Column(Integer, nullable=False, default=1)

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
