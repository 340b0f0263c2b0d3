# marketplace_panel/modules/categories/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    parent_id: Optional[str] = Field(None, alias="parentId", description="Categoría padre")

    class Config:
        populate_by_name = True

class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    parent_id: Optional[str] = Field(None, alias="parentId")

    class Config:
        populate_by_name = True
