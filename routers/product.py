from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import Optional

from database.connection import get_db
from core.response import success_response
from services.product import (
    list_products,
    get_featured_products,
    get_products_by_category,
    get_product,
    create_product,
    update_product,
    delete_product
)
from schemas.product import ProductCreate, ProductUpdate, ProductResponse, CategoryProductsResponse

router = APIRouter()

def serialize_product(product) -> dict:
    return ProductResponse.model_validate(product).model_dump(by_alias=True, mode="json")

@router.get("")
def get_products(
    category_id: Optional[str] = Query(None, alias="categoryId"),
    featured: Optional[bool] = Query(None),
    db: Session = Depends(get_db)
):
    """Get all products (public endpoint for product catalog)"""
    products = list_products(db=db, category_id=category_id, featured=featured)
    return success_response(data=[serialize_product(p) for p in products])

@router.get("/featured")
def get_featured(db: Session = Depends(get_db)):
    """Get featured products for the homepage"""
    products = get_featured_products(db=db)
    return success_response(data=[serialize_product(p) for p in products])

@router.get("/category/{category_id}")
def get_category_products(category_id: str, db: Session = Depends(get_db)):
    """Get a category's name together with its products"""
    category, products = get_products_by_category(db=db, category_id=category_id)
    payload = CategoryProductsResponse(
        category_id=category.id,
        category_name=category.name,
        products=[ProductResponse.model_validate(p) for p in products]
    )
    return success_response(data=payload.model_dump(by_alias=True, mode="json"))

@router.get("/{product_id}")
def get_single_product(product_id: str, db: Session = Depends(get_db)):
    """Get a specific product by ID"""
    product = get_product(db=db, product_id=product_id)
    return success_response(data=serialize_product(product))

@router.post("", status_code=status.HTTP_201_CREATED)
def post_product(product_data: ProductCreate, db: Session = Depends(get_db)):
    """Create a new product"""
    product = create_product(db=db, product_data=product_data)
    return success_response(
        data=serialize_product(product),
        message="Product created successfully"
    )

@router.put("/{product_id}")
@router.patch("/{product_id}")
def put_product(product_id: str, product_data: ProductUpdate, db: Session = Depends(get_db)):
    """Update a product; only the fields sent are changed"""
    product = update_product(db=db, product_id=product_id, product_data=product_data)
    return success_response(
        data=serialize_product(product),
        message="Product updated successfully"
    )

@router.delete("/{product_id}")
def remove_product(product_id: str, db: Session = Depends(get_db)):
    """Delete a product"""
    deleted_id = delete_product(db=db, product_id=product_id)
    return success_response(
        data={"id": deleted_id},
        message="Product deleted successfully"
    )
