from coffee_loyalty.models.club_category import ClubCategory
from coffee_loyalty.repositories.base import Repository


class ClubCategoryRepository(Repository):
    model = ClubCategory
    label = "club category"

    def find_by_name(self, name: str):
        return self.db.query(ClubCategory).filter(ClubCategory.name == name).first()

    def list_all(self):
        return self.db.query(ClubCategory).order_by(ClubCategory.name.asc()).all()
