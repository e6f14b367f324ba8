from coffee_loyalty.models.product import Product
from coffee_loyalty.repositories.base import Repository


class ProductRepository(Repository):
    model = Product
    label = "product"

    def find_by_name(self, name: str, *, exclude_id=None):
        q = self.db.query(Product).filter(Product.name == name)
        if exclude_id is not None:
            q = q.filter(Product.id != exclude_id)
        return q.first()
