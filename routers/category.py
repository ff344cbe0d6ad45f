from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database.connection import get_db
from core.response import success_response
from services.category import (
    list_categories,
    get_category,
    create_category,
    update_category,
    delete_category
)
from schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse

router = APIRouter()

def serialize_category(category) -> dict:
    return CategoryResponse.model_validate(category).model_dump(by_alias=True, mode="json")

@router.get("")
def get_categories(db: Session = Depends(get_db)):
    """Get all categories"""
    categories = list_categories(db=db)
    return success_response(data=[serialize_category(c) for c in categories])

@router.get("/{category_id}")
def get_single_category(category_id: str, db: Session = Depends(get_db)):
    """Get a specific category by ID"""
    category = get_category(db=db, category_id=category_id)
    return success_response(data=serialize_category(category))

@router.post("", status_code=status.HTTP_201_CREATED)
def post_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """Create a new category"""
    category = create_category(db=db, category_data=category_data)
    return success_response(
        data=serialize_category(category),
        message="Category created successfully"
    )

@router.put("/{category_id}")
@router.patch("/{category_id}")
def put_category(category_id: str, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    """Update a category; only the fields sent are changed"""
    category = update_category(db=db, category_id=category_id, category_data=category_data)
    return success_response(
        data=serialize_category(category),
        message="Category updated successfully"
    )

@router.delete("/{category_id}")
def remove_category(category_id: str, db: Session = Depends(get_db)):
    """Delete a category that owns no products"""
    deleted_id = delete_category(db=db, category_id=category_id)
    return success_response(
        data={"id": deleted_id},
        message="Category deleted successfully"
    )
