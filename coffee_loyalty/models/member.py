import uuid
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from coffee_loyalty.db import Base


class Member(Base):
    __tablename__ = "members"

    __table_args__ = (CheckConstraint("points >= 0", name="ck_members_points_non_negative"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(String(150), nullable=False, index=True)
    # natural key used for duplicate detection
    phone = Column(String(30), nullable=False, unique=True)

    club_category_id = Column(Uuid(as_uuid=True), ForeignKey("club_categories.id"), nullable=True, index=True)

    valid_until = Column(TIMESTAMP, nullable=False, index=True)
    points = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    club_category = relationship("ClubCategory", lazy="joined")
