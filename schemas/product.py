from pydantic import Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from schemas.common import CamelModel, PartialUpdate


class ProductCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200, description="Product title")
    description: Optional[str] = Field(None, max_length=2000, description="Product description")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Price must be non-negative")
    stock: int = Field(default=0, ge=0, description="Stock must be non-negative")
    is_featured: bool = Field(default=False, description="Whether the product is featured")
    product_image: Optional[str] = Field(None, max_length=500, description="Product image URL")
    category_id: str = Field(..., min_length=1, description="Owning category id")


class ProductUpdate(PartialUpdate):
    non_nullable = ("title", "price", "stock", "is_featured", "category_id")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    is_featured: Optional[bool] = None
    product_image: Optional[str] = Field(None, max_length=500)
    category_id: Optional[str] = Field(None, min_length=1)


class ProductResponse(CamelModel):
    id: str
    title: str
    description: Optional[str]
    price: float
    stock: int
    is_featured: bool
    product_image: str
    category_id: str
    created_at: datetime
    updated_at: datetime


class CategoryProductsResponse(CamelModel):
    category_id: str
    category_name: str
    products: List[ProductResponse]
