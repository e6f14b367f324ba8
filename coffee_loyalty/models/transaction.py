import uuid
from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from coffee_loyalty.db import Base


class Transaction(Base):
    """One purchase event. Rows are written once and never updated."""

    __tablename__ = "transactions"

    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_transactions_quantity_positive"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    member_id = Column(Uuid(as_uuid=True), ForeignKey("members.id"), nullable=False, index=True)
    product_id = Column(Uuid(as_uuid=True), ForeignKey("products.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False, default=1)

    # price and points as they were when the purchase happened
    total_price = Column(Float, nullable=False, default=0)
    points_added = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP, nullable=False, index=True)

    member = relationship("Member", lazy="joined")
    product = relationship("Product", lazy="joined")
