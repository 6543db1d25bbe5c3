# app/services/inventory.py

from decimal import Decimal
from typing import NamedTuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.core.exceptions import InsufficientStock, NotFound
from app.database import MAX_INTEGER
from app.models.products import Product


class ProductStock(NamedTuple):
    id: int
    name: str
    price: Decimal
    stock: int


class InventoryStore:
    """
    Stock access for checkout, bound to the caller's session.

    Reads return plain snapshots rather than ORM instances so a decrement
    issued through ``decrement_stock`` is never shadowed by a cached object
    in the identity map.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_for_update(self, product_id: int, lock: bool = False) -> ProductStock:
        # No row can carry an id the key column cannot hold
        if not 0 < product_id <= MAX_INTEGER:
            raise NotFound(product_id)

        stmt = select(Product.id, Product.name, Product.price, Product.stock).where(
            Product.id == product_id
        )

        # Row lock is held until the session commits or rolls back
        if lock:
            stmt = stmt.with_for_update()

        row = self.db.execute(stmt).first()

        if row is None:
            raise NotFound(product_id)

        return ProductStock(id=row.id, name=row.name, price=row.price, stock=row.stock)

    def decrement_stock(self, product_id: int, quantity: int) -> None:
        if quantity > MAX_INTEGER:
            raise InsufficientStock(product_id, requested=quantity)

        # Single guarded statement; stock never drops below zero
        stmt = (
            update(Product)
            .where(Product.id == product_id, Product.stock >= quantity)
            .values(stock=Product.stock - quantity)
            .execution_options(synchronize_session=False)
        )

        result = self.db.execute(stmt)

        if result.rowcount == 0:
            raise InsufficientStock(product_id, requested=quantity)
