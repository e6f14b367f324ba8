from datetime import datetime

from sqlalchemy import or_

from coffee_loyalty.models.member import Member
from coffee_loyalty.repositories.base import Repository


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MemberRepository(Repository):
    model = Member
    label = "member"

    def find_by_phone(self, phone: str, *, exclude_id=None):
        q = self.db.query(Member).filter(Member.phone == phone)
        if exclude_id is not None:
            q = q.filter(Member.id != exclude_id)
        return q.first()

    def search(self, term: str):
        pattern = _like_pattern(term)
        return (
            self.db.query(Member)
            .filter(or_(Member.name.ilike(pattern, escape="\\"), Member.phone.ilike(pattern, escape="\\")))
            .order_by(Member.name.asc())
            .all()
        )

    def list(self, *, valid_from: datetime | None = None, club_category_id=None):
        q = self.db.query(Member)
        if valid_from is not None:
            q = q.filter(Member.valid_until >= valid_from)
        if club_category_id is not None:
            q = q.filter(Member.club_category_id == club_category_id)
        return q.order_by(Member.created_at.asc()).all()
