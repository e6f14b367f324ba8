from datetime import datetime
from typing import Optional

from uuid import UUID

from coffee_loyalty.schemas.common import ApiModel


class ClubCategoryCreate(ApiModel):
    name: str = "Regular"
    description: Optional[str] = None


class ClubCategoryOut(ApiModel):
    id: UUID
    name: str
    description: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
