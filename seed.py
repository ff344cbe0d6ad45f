#!/usr/bin/env python3
"""
Seed script to load sample categories and products into the catalog
"""
from decimal import Decimal
import logging

from sqlalchemy.orm import Session
from database.connection import SessionLocal, create_tables
from models.category import Category
from schemas.category import CategoryCreate
from schemas.product import ProductCreate
from services.category import create_category
from services.product import create_product

logger = logging.getLogger(__name__)

SAMPLE_CATALOG = [
    {
        "name": "Electronics",
        "description": "Phones, laptops and accessories",
        "products": [
            {"title": "Wireless Headphones", "price": Decimal("89.99"), "stock": 25, "is_featured": True,
             "description": "Over-ear headphones with noise cancelling"},
            {"title": "USB-C Charger", "price": Decimal("19.50"), "stock": 120},
            {"title": "Mechanical Keyboard", "price": Decimal("129.00"), "stock": 12, "is_featured": True},
        ],
    },
    {
        "name": "Home & Kitchen",
        "description": "Everyday items for the home",
        "products": [
            {"title": "Mug", "price": Decimal("9.99"), "stock": 60,
             "description": "Stoneware mug, 350ml"},
            {"title": "Chef Knife", "price": Decimal("45.00"), "stock": 18, "is_featured": True},
        ],
    },
    {
        "name": "Books",
        "description": "Fiction and non-fiction",
        "products": [
            {"title": "The Pragmatic Programmer", "price": Decimal("39.95"), "stock": 8},
        ],
    },
]

def seed_catalog(db: Session) -> dict:
    """Create the sample categories and products, skipping categories that already exist"""
    created = {"categories": 0, "products": 0}

    for entry in SAMPLE_CATALOG:
        if db.query(Category).filter(Category.name == entry["name"]).first():
            logger.info(f"Category '{entry['name']}' already present, skipping")
            continue

        category = create_category(
            db, CategoryCreate(name=entry["name"], description=entry["description"])
        )
        created["categories"] += 1

        for product_fields in entry["products"]:
            create_product(db, ProductCreate(category_id=category.id, **product_fields))
            created["products"] += 1

    return created

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()

    db = SessionLocal()
    try:
        counts = seed_catalog(db)
        print(f"Seeded {counts['categories']} categories and {counts['products']} products")
    finally:
        db.close()
