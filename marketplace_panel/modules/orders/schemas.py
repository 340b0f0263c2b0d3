# marketplace_panel/modules/orders/schemas.py
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

class SellerStatus(str, Enum):
    """Estado del ítem visto por el vendedor (distinto del estado de entrega)"""
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"

class OrderFilters(BaseModel):
    status: Optional[str] = None
    buyer_id: Optional[str] = Field(None, alias="buyerId")
    seller_id: Optional[str] = Field(None, alias="sellerId")
    date_from: Optional[str] = Field(None, alias="dateFrom")
    date_to: Optional[str] = Field(None, alias="dateTo")

    class Config:
        populate_by_name = True
