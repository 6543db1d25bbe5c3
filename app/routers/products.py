# app/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError

from app.database import MAX_INTEGER, get_db
from app.models.categories import Category
from app.models.products import Product
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


def _get_product_or_404(db: Session, product_id: int) -> Product:
    product = None
    if 0 < product_id <= MAX_INTEGER:
        product = (
            db.query(Product)
            .options(joinedload(Product.category))
            .filter(Product.id == product_id)
            .first()
        )

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return product


def _ensure_category_exists(db: Session, category_id: int | None):
    if category_id is None:
        return

    if not 0 < category_id <= MAX_INTEGER or db.get(Category, category_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
):
    _ensure_category_exists(db, product_data.category_id)

    product = Product(
        name=product_data.name,
        price=product_data.price,
        stock=product_data.stock,
        category_id=product_data.category_id,
    )

    try:
        db.add(product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise HTTPException(status_code=500, detail="Unable to create product")

    return _get_product_or_404(db, product.id)


@router.get("", response_model=list[ProductResponse])
def list_products(
    db: Session = Depends(get_db),
    name: str | None = Query(None),
    page: int = Query(1, ge=1, le=MAX_INTEGER // 100),
    limit: int = Query(20, ge=1, le=100),
):
    query = db.query(Product).options(joinedload(Product.category))

    if name:
        query = query.filter(Product.name.ilike(f"%{name}%"))

    products = (
        query
        .order_by(Product.id.asc())
        .limit(limit)
        .offset((page - 1) * limit)
        .all()
    )

    return products


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    return _get_product_or_404(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    if product_data.name is not None:
        product.name = product_data.name

    if product_data.price is not None:
        product.price = product_data.price

    if product_data.stock is not None:
        product.stock = product_data.stock

    # An explicit null detaches the product from its category
    if "category_id" in product_data.model_fields_set:
        _ensure_category_exists(db, product_data.category_id)
        product.category_id = product_data.category_id

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise HTTPException(status_code=500, detail="Unable to update product")

    db.expire_all()
    return _get_product_or_404(db, product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    # Sold lines keep their recorded subtotal; the FK is set to NULL
    try:
        db.delete(product)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise HTTPException(status_code=500, detail="Unable to delete product")

    return None
