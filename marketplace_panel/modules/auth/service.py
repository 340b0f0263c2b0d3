# marketplace_panel/modules/auth/service.py
import logging
from typing import Any, Dict

from pydantic import ValidationError

from marketplace_panel.core.client import ApiClient
from marketplace_panel.core.errors import ApiError, ErrorKind
from .schemas import UserLogin, UserProfile

logger = logging.getLogger(__name__)

class AuthService:
    """Login/logout del panel; la emisión del token es del servidor"""

    def __init__(self, client: ApiClient):
        self.client = client

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        credentials = UserLogin(email=email, password=password)
        body = await self.client.post("/auth/login", json=credentials.model_dump())

        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise ApiError.build("Invalid login response received.", 500, ErrorKind.UNKNOWN, original_error=body)

        try:
            user = UserProfile.model_validate(body.get("user") or {"email": email, "role": "unknown"})
        except ValidationError:
            raise ApiError.build("Invalid login response received.", 500, ErrorKind.UNKNOWN, original_error=body) from None

        self.client.session.start(token, user.model_dump(by_alias=True))
        logger.info(f"✅ Login exitoso: {user.email}")
        return body

    def logout(self) -> None:
        self.client.session.clear()

    async def get_profile(self) -> Dict[str, Any]:
        return await self.client.get("/auth/profile")
