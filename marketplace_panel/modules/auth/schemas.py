# marketplace_panel/modules/auth/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

class UserLogin(BaseModel):
    """Credenciales para login"""
    email: str = Field(..., description="Email del usuario")
    password: str = Field(..., min_length=6, description="Contraseña del usuario")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "admin@marketplace.com",
                "password": "admin123"
            }
        }

class UserProfile(BaseModel):
    """Perfil cacheado junto a la sesión"""
    id: Optional[str] = Field(None, alias="_id")
    email: str
    name: Optional[str] = None
    role: str

    class Config:
        populate_by_name = True
        extra = 'allow'
