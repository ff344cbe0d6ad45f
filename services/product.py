from sqlalchemy.orm import Session
from models.product import Product
from models.category import Category
from schemas.product import ProductCreate, ProductUpdate
from services.category import get_category
from core.config import settings
from core.exceptions import ResourceNotFoundError
from typing import List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

def list_products(db: Session, category_id: Optional[str] = None, featured: Optional[bool] = None) -> List[Product]:
    """Get all products, optionally narrowed to a category and/or the featured flag"""
    query = db.query(Product)

    if category_id is not None:
        query = query.filter(Product.category_id == category_id)

    if featured is not None:
        query = query.filter(Product.is_featured == featured)

    return query.all()

def get_featured_products(db: Session) -> List[Product]:
    """Get products surfaced on the homepage"""
    return list_products(db, featured=True)

def get_products_by_category(db: Session, category_id: str) -> Tuple[Category, List[Product]]:
    """Get a category and its products; an unknown category raises instead of returning nothing"""
    category = get_category(db, category_id)
    products = db.query(Product).filter(Product.category_id == category.id).all()
    return category, products

def get_product(db: Session, product_id: str) -> Product:
    """Get a product by ID"""
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise ResourceNotFoundError("Product", product_id)
    return product

def create_product(db: Session, product_data: ProductCreate) -> Product:
    """Create a new product in an existing category"""
    get_category(db, product_data.category_id)

    try:
        product = Product(
            title=product_data.title,
            description=product_data.description,
            price=product_data.price,
            stock=product_data.stock,
            is_featured=product_data.is_featured,
            product_image=product_data.product_image or settings.DEFAULT_PRODUCT_IMAGE,
            category_id=product_data.category_id
        )

        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info(f"Product created: {product.title} ({product.id}) in category {product.category_id}")
        return product

    except Exception as e:
        db.rollback()
        logger.error(f"Error creating product: {str(e)}")
        raise

def update_product(db: Session, product_id: str, product_data: ProductUpdate) -> Product:
    """Apply the fields sent in a PUT/PATCH body to a product"""
    product = get_product(db, product_id)
    changes = product_data.changes()

    if "category_id" in changes:
        get_category(db, changes["category_id"])

    if "product_image" in changes and not changes["product_image"]:
        changes["product_image"] = settings.DEFAULT_PRODUCT_IMAGE

    try:
        for field, value in changes.items():
            setattr(product, field, value)

        db.commit()
        db.refresh(product)

        logger.info(f"Product updated: {product.title} ({product.id})")
        return product

    except Exception as e:
        db.rollback()
        logger.error(f"Error updating product: {str(e)}")
        raise

def delete_product(db: Session, product_id: str) -> str:
    """Delete a product"""
    product = get_product(db, product_id)

    try:
        db.delete(product)
        db.commit()

        logger.info(f"Product deleted: {product_id}")
        return product_id

    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting product: {str(e)}")
        raise
