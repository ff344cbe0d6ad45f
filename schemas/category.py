from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from schemas.common import CamelModel, PartialUpdate


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Category display name")
    description: str = Field(default="", max_length=2000, description="Category description")

    @field_validator('description', mode='before')
    @classmethod
    def default_description(cls, v):
        return "" if v is None else v


class CategoryUpdate(PartialUpdate):
    non_nullable = ("name",)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator('description', mode='before')
    @classmethod
    def default_description(cls, v):
        return "" if v is None else v


class CategoryResponse(CamelModel):
    id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
