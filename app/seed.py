# app/seed.py
#
# Default catalog for a fresh database. Safe to run on every startup:
# rows are matched by name and only inserted when missing.

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.models.categories import Category
from app.models.products import Product

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Electronics", "Gadgets and devices"),
    ("Clothing", "Apparel and accessories"),
    ("Food & Beverage", "Consumables"),
]

DEFAULT_PRODUCTS = [
    ("Smartphone", Decimal("699.99"), 50, "Electronics"),
    ("Laptop", Decimal("1299.99"), 20, "Electronics"),
]


def seed_database(db: Session):
    logger.info("Running database seeding...")

    categories = {}
    for name, description in DEFAULT_CATEGORIES:
        category = db.query(Category).filter(Category.name == name).first()

        if category is None:
            category = Category(name=name, description=description)
            db.add(category)
            db.flush()
            logger.info("Seeded category: %s", name)
        else:
            logger.info("Category %s already exists, skipping", name)

        categories[name] = category

    for name, price, stock, category_name in DEFAULT_PRODUCTS:
        if db.query(Product).filter(Product.name == name).first():
            logger.info("Product %s already exists, skipping", name)
            continue

        db.add(
            Product(
                name=name,
                price=price,
                stock=stock,
                category_id=categories[category_name].id,
            )
        )
        logger.info("Seeded product: %s", name)

    db.commit()
    logger.info("Database seeding completed")
