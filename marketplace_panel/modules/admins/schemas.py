# marketplace_panel/modules/admins/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class AdminCreate(BaseModel):
    """Formulario de alta de administrador"""
    email: str = Field(..., min_length=3, description="Email del administrador")
    password: str = Field(..., min_length=6, description="Contraseña inicial")
    name: str = Field(..., min_length=2, description="Nombre completo")
    phone: Optional[str] = Field(None, description="Teléfono de contacto")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "nuevo@marketplace.com",
                "password": "password123",
                "name": "María García",
                "phone": "+51999888777"
            }
        }
