from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from coffee_loyalty.db import get_db
from coffee_loyalty.errors import LoyaltyError
from coffee_loyalty.schemas.member import (
    MemberCreate,
    MemberOut,
    MemberUpdate,
    RedeemOut,
    RedeemRequest,
    ValidityOut,
)
from coffee_loyalty.services.filters import parse_member_filter
from coffee_loyalty.services.ledger_service import redeem_points
from coffee_loyalty.services.member_service import (
    check_validity,
    create_member,
    edit_member,
    list_members,
    search_members,
)


router = APIRouter(prefix="/members", tags=["members"])


@router.post("", response_model=MemberOut)
def add_member(payload: MemberCreate, db: Session = Depends(get_db)):
    return create_member(db, payload)


@router.get("", response_model=list[MemberOut])
def get_members(filter: str | None = None, db: Session = Depends(get_db)):
    return list_members(db, parse_member_filter(filter))


@router.get("/search", response_model=list[MemberOut])
def search_member(query: str | None = None, db: Session = Depends(get_db)):
    return search_members(db, query)


@router.put("/{member_id}", response_model=MemberOut)
def update_member(member_id: str, payload: MemberUpdate, db: Session = Depends(get_db)):
    return edit_member(db, member_id, payload)


@router.get("/{member_id}/validity", response_model=ValidityOut)
def get_member_validity(member_id: str, db: Session = Depends(get_db)):
    return {"valid": check_validity(db, member_id)}


@router.post("/{member_id}/redeem", response_model=RedeemOut)
def redeem_member_points(member_id: str, payload: RedeemRequest, db: Session = Depends(get_db)):
    try:
        redeem_points(db, member_id=member_id, points=payload.points)
    except LoyaltyError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "message": e.message},
        )
    return {"success": True, "message": "Points redeemed successfully."}
