from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coffee_loyalty.db import get_db
from coffee_loyalty.schemas.product import ProductCreate, ProductOut, ProductUpdate
from coffee_loyalty.services.product_service import create_product, edit_product, list_products


router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductOut)
def add_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return create_product(db, payload)


@router.get("", response_model=list[ProductOut])
def get_products(db: Session = Depends(get_db)):
    return list_products(db)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    return edit_product(db, product_id, payload)
