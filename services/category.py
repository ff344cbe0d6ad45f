from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from models.category import Category
from models.product import Product
from schemas.category import CategoryCreate, CategoryUpdate
from core.exceptions import ResourceNotFoundError, ConflictError
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

def list_categories(db: Session) -> List[Category]:
    """Get all categories"""
    return db.query(Category).all()

def find_category(db: Session, category_id: str) -> Optional[Category]:
    """Get a category by ID, or None"""
    return db.query(Category).filter(Category.id == category_id).first()

def get_category(db: Session, category_id: str) -> Category:
    """Get a category by ID, raising when it does not exist"""
    category = find_category(db, category_id)
    if not category:
        raise ResourceNotFoundError("Category", category_id)
    return category

def _ensure_name_available(db: Session, name: str, exclude_id: Optional[str] = None):
    query = db.query(Category).filter(Category.name == name)
    if exclude_id:
        query = query.filter(Category.id != exclude_id)
    if query.first():
        raise ConflictError(
            f"Category '{name}' already exists",
            details={"field": "name"}
        )

def create_category(db: Session, category_data: CategoryCreate) -> Category:
    """Create a new category"""
    _ensure_name_available(db, category_data.name)

    try:
        category = Category(
            name=category_data.name,
            description=category_data.description
        )

        db.add(category)
        db.commit()
        db.refresh(category)

        logger.info(f"Category created: {category.name} ({category.id})")
        return category

    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error creating category: {str(e)}")
        raise ConflictError(f"Category '{category_data.name}' already exists") from e
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating category: {str(e)}")
        raise

def update_category(db: Session, category_id: str, category_data: CategoryUpdate) -> Category:
    """Apply the fields sent in a PUT/PATCH body to a category"""
    category = get_category(db, category_id)
    changes = category_data.changes()

    if "name" in changes:
        _ensure_name_available(db, changes["name"], exclude_id=category_id)

    try:
        for field, value in changes.items():
            setattr(category, field, value)

        db.commit()
        db.refresh(category)

        logger.info(f"Category updated: {category.name} ({category.id})")
        return category

    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error updating category: {str(e)}")
        raise ConflictError(f"Category '{changes.get('name')}' already exists") from e
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating category: {str(e)}")
        raise

def delete_category(db: Session, category_id: str) -> str:
    """Delete a category; categories that still own products are kept"""
    category = get_category(db, category_id)

    product_count = db.query(Product).filter(Product.category_id == category_id).count()
    if product_count:
        raise ConflictError(
            "Category still has products and cannot be deleted",
            details={"id": category_id, "productCount": product_count}
        )

    try:
        db.delete(category)
        db.commit()

        logger.info(f"Category deleted: {category_id}")
        return category_id

    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error deleting category: {str(e)}")
        raise ConflictError("Category still has products and cannot be deleted") from e
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting category: {str(e)}")
        raise
