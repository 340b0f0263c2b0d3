# marketplace_panel/modules/products/schemas.py
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

class ProductStatus(str, Enum):
    """Estados de moderación de un producto"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class ProductFilters(BaseModel):
    status: Optional[ProductStatus] = None
    category: Optional[str] = None
    seller_id: Optional[str] = Field(None, alias="sellerId")
    search: Optional[str] = None

    class Config:
        populate_by_name = True
        use_enum_values = True
