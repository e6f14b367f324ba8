from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coffee_loyalty.db import get_db
from coffee_loyalty.schemas.club_category import ClubCategoryCreate, ClubCategoryOut
from coffee_loyalty.services.club_category_service import create_club_category, list_club_categories


router = APIRouter(prefix="/club-categories", tags=["club-categories"])


@router.post("", response_model=ClubCategoryOut)
def add_club_category(payload: ClubCategoryCreate, db: Session = Depends(get_db)):
    return create_club_category(db, payload)


@router.get("", response_model=list[ClubCategoryOut])
def get_club_categories(db: Session = Depends(get_db)):
    return list_club_categories(db)
