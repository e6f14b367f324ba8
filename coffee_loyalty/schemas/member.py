from datetime import datetime
from typing import Any, Optional

from uuid import UUID

from coffee_loyalty.schemas.club_category import ClubCategoryOut
from coffee_loyalty.schemas.common import ApiModel


class MemberCreate(ApiModel):
    name: str = ""
    phone: str = ""

    # club category NAME, resolved to an existing category
    club_category: Optional[str] = None

    # defaults to one year from creation
    valid_until: Optional[datetime] = None
    # defaults to 0; anything but a non-negative whole number falls back to 0
    points: Any = None


class MemberUpdate(ApiModel):
    # each field is applied only when present and valid, see edit_member
    name: Any = None
    phone: Any = None
    club_category: Any = None
    valid_until: Any = None
    points: Any = None


class MemberOut(ApiModel):
    id: UUID
    name: str
    phone: str

    club_category: Optional[ClubCategoryOut] = None

    valid_until: datetime
    points: int

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ValidityOut(ApiModel):
    valid: bool


class RedeemRequest(ApiModel):
    # validated by the ledger so that its rule order is kept
    points: Any = None


class RedeemOut(ApiModel):
    success: bool
    message: str
