# marketplace_panel/modules/courier/schemas.py
from pydantic import BaseModel, Field, validator
from typing import Any, Dict, List, Optional
from datetime import datetime
from enum import Enum

class DeliveryStatus(str, Enum):
    """Ciclo de vida de entrega de un ítem (visto por el corredor)"""
    PENDING = "Pending"
    PICKED_UP = "Picked Up"
    IN_TRANSIT = "In Transit"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    FAILED_DELIVERY = "Failed Delivery"

    @classmethod
    def parse(cls, value: Any) -> Optional["DeliveryStatus"]:
        """Estado conocido o None si el servidor envía algo fuera del catálogo"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

class DeliveryFilter(str, Enum):
    """Filtros del listado de entregas del corredor"""
    ALL = ""
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    ISSUE_REPORTED = "issueReported"

class UpdatedBy(BaseModel):
    role: str
    user_id: Optional[str] = Field(None, alias="userId")

    class Config:
        populate_by_name = True

class StatusHistoryEntry(BaseModel):
    status: str
    updated_by: UpdatedBy = Field(..., alias="updatedBy")
    updated_at: datetime = Field(..., alias="updatedAt")
    reason: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = 'allow'

class CourierDetails(BaseModel):
    courier_id: Optional[str] = Field(None, alias="courierId")
    tracking_number: Optional[str] = Field(None, alias="trackingNumber")

    class Config:
        populate_by_name = True

class DeliveryItem(BaseModel):
    product_id: Any = Field(None, alias="productId", description="ID o producto poblado")
    quantity: Optional[int] = None
    price: Optional[float] = None
    courier_status: str = Field(DeliveryStatus.PENDING.value, alias="courierStatus")
    seller_status: Optional[str] = Field(None, alias="sellerStatus")
    courier_details: CourierDetails = Field(default_factory=CourierDetails, alias="courierDetails")
    status_history: List[StatusHistoryEntry] = Field(default_factory=list, alias="statusHistory")
    issue_reported: bool = Field(False, alias="issueReported")

    class Config:
        populate_by_name = True
        extra = 'allow'

    @validator('courier_details', pre=True)
    def empty_courier_details(cls, v):
        return v or {}

    @property
    def status(self) -> Optional[DeliveryStatus]:
        return DeliveryStatus.parse(self.courier_status)

    @property
    def product_key(self) -> Optional[str]:
        """ID del producto, esté poblado o no"""
        if isinstance(self.product_id, dict):
            return self.product_id.get("_id")
        return self.product_id

    def history_is_monotonic(self) -> bool:
        stamps = [entry.updated_at for entry in self.status_history]
        return all(a <= b for a, b in zip(stamps, stamps[1:]))

class DeliveryOrder(BaseModel):
    id: str = Field(..., alias="_id")
    item: DeliveryItem
    buyer_id: Any = Field(None, alias="buyerId")
    shipping_address: Optional[Dict[str, Any]] = Field(None, alias="shippingAddress")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        populate_by_name = True
        extra = 'allow'

class StatusUpdateRequest(BaseModel):
    status: DeliveryStatus
    product_id: str = Field(..., alias="productId")
    reason: str = ""

    class Config:
        populate_by_name = True
        use_enum_values = True

class IssueReportRequest(BaseModel):
    product_id: str = Field(..., alias="productId")
    reason: str = Field(..., min_length=1, description="Descripción libre del problema")

    class Config:
        populate_by_name = True

    @validator('reason')
    def reason_not_blank(cls, v):
        if not v.strip():
            raise ValueError("reason must not be blank")
        return v
