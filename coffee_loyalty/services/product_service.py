from sqlalchemy.orm import Session

from coffee_loyalty.errors import BusinessRuleViolation, NotFoundError, ValidationError
from coffee_loyalty.models.product import Product
from coffee_loyalty.repositories.product_repository import ProductRepository
from coffee_loyalty.utils import as_number, as_whole_number


def create_product(db: Session, payload) -> Product:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Product name is required.")

    price = as_number(payload.price)
    if price is None or price < 0:
        raise ValidationError("Product price must be a non-negative number.")

    point_value = as_whole_number(payload.point_value)
    if point_value is None or point_value < 0:
        raise ValidationError("Product pointValue must be a non-negative number.")

    products = ProductRepository(db)
    if products.find_by_name(name):
        raise BusinessRuleViolation("Product name already exists.")

    product = Product(name=name, price=price, point_value=point_value)
    return products.save(product)


def edit_product(db: Session, product_id: str, payload) -> Product:
    """Partial update; a field is applied only when present and valid."""
    products = ProductRepository(db)
    product = products.get(product_id)
    if not product:
        raise NotFoundError("Product not found.")

    if isinstance(payload.name, str) and payload.name.strip():
        name = payload.name.strip()
        # the product's own current name is not a duplicate
        if products.find_by_name(name, exclude_id=product.id):
            raise BusinessRuleViolation("Product name already exists.")
        product.name = name

    price = as_number(payload.price)
    if price is not None and price >= 0:
        product.price = price

    point_value = as_whole_number(payload.point_value)
    if point_value is not None and point_value >= 0:
        product.point_value = point_value

    return products.save(product)


def list_products(db: Session):
    return ProductRepository(db).list_all()
