# marketplace_panel/modules/couriers/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class CourierCreate(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2)
    phone: Optional[str] = None
    vehicle_type: Optional[str] = Field(None, alias="vehicleType")

    class Config:
        populate_by_name = True

class CourierUpdate(BaseModel):
    """Actualización parcial; solo se envían los campos presentes"""
    name: Optional[str] = Field(None, min_length=2)
    phone: Optional[str] = None
    vehicle_type: Optional[str] = Field(None, alias="vehicleType")
    is_active: Optional[bool] = Field(None, alias="isActive")

    class Config:
        populate_by_name = True
