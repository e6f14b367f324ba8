import uuid
from sqlalchemy import Column, String, TIMESTAMP, Uuid
from sqlalchemy.sql import func
from coffee_loyalty.db import Base


class ClubCategory(Base):
    __tablename__ = "club_categories"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(String(100), nullable=False, unique=True, default="Regular")
    description = Column(String(255), nullable=False, default="")

    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
