from sqlalchemy.orm import Session

from coffee_loyalty.errors import BusinessRuleViolation, ValidationError
from coffee_loyalty.models.club_category import ClubCategory
from coffee_loyalty.repositories.club_category_repository import ClubCategoryRepository


def create_club_category(db: Session, payload) -> ClubCategory:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("ClubCategory name is required.")

    categories = ClubCategoryRepository(db)
    if categories.find_by_name(name):
        raise BusinessRuleViolation("ClubCategory name already exists.")

    category = ClubCategory(name=name, description=(payload.description or "").strip())
    return categories.save(category)


def list_club_categories(db: Session):
    return ClubCategoryRepository(db).list_all()
