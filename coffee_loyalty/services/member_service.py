from sqlalchemy.orm import Session

from coffee_loyalty.errors import BusinessRuleViolation, NotFoundError, ValidationError
from coffee_loyalty.models.member import Member
from coffee_loyalty.repositories.club_category_repository import ClubCategoryRepository
from coffee_loyalty.repositories.member_repository import MemberRepository
from coffee_loyalty.services.filters import MemberFilter
from coffee_loyalty.utils import add_one_year, as_whole_number, parse_datetime, to_naive_utc, utcnow


DUPLICATE_PHONE_MESSAGE = "A member with this phone is already registered."


def _resolve_club_category(db: Session, name):
    if not isinstance(name, str):
        raise ValidationError("ClubCategory not found.")

    category = ClubCategoryRepository(db).find_by_name(name.strip())
    if not category:
        raise ValidationError("ClubCategory not found.")
    return category


def create_member(db: Session, payload) -> Member:
    name = (payload.name or "").strip()
    phone = (payload.phone or "").strip()
    if not name or not phone:
        raise ValidationError("Name and phone are required.")

    members = MemberRepository(db)
    if members.find_by_phone(phone):
        raise BusinessRuleViolation(DUPLICATE_PHONE_MESSAGE)

    club_category_id = None
    if payload.club_category:
        club_category_id = _resolve_club_category(db, payload.club_category).id

    if payload.valid_until is not None:
        valid_until = to_naive_utc(payload.valid_until)
    else:
        valid_until = add_one_year(utcnow())

    points = as_whole_number(payload.points)
    if points is None or points < 0:
        points = 0

    member = Member(
        name=name,
        phone=phone,
        club_category_id=club_category_id,
        valid_until=valid_until,
        points=points,
    )
    return members.save(member)


def edit_member(db: Session, member_id: str, payload) -> Member:
    """
    Partial update. A field is applied only when it is present and valid; an unknown
    club category or a phone owned by another member rejects the whole edit.
    """
    members = MemberRepository(db)
    member = members.get(member_id)
    if not member:
        raise NotFoundError("Member not found.")

    if isinstance(payload.name, str) and payload.name.strip():
        member.name = payload.name.strip()

    if isinstance(payload.phone, str) and payload.phone.strip():
        phone = payload.phone.strip()
        if phone != member.phone and members.find_by_phone(phone, exclude_id=member.id):
            raise BusinessRuleViolation(DUPLICATE_PHONE_MESSAGE)
        member.phone = phone

    if payload.club_category:
        member.club_category_id = _resolve_club_category(db, payload.club_category).id

    valid_until = parse_datetime(payload.valid_until)
    if valid_until is not None:
        member.valid_until = valid_until

    points = as_whole_number(payload.points)
    if points is not None and points >= 0:
        member.points = points

    return members.save(member)


def search_members(db: Session, query: str | None):
    term = (query or "").strip()
    if not term:
        raise ValidationError("Query is required.")
    return MemberRepository(db).search(term)


def list_members(db: Session, member_filter: MemberFilter):
    return MemberRepository(db).list(
        valid_from=member_filter.valid_from,
        club_category_id=member_filter.club_category_id,
    )


def check_validity(db: Session, member_id: str) -> bool:
    member = MemberRepository(db).get(member_id)
    if not member:
        raise NotFoundError("Member not found.")
    return member.valid_until >= utcnow()
