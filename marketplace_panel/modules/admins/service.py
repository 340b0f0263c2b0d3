# marketplace_panel/modules/admins/service.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import AdminCreate

class AdminService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_admins(self, page: int = 1, limit: Optional[int] = None) -> ListResult:
        return await self.client.get_list("/admin/admins", "admins", page=page, limit=limit)

    async def create_admin(self, payload: Union[AdminCreate, Dict[str, Any]]) -> Dict[str, Any]:
        admin = payload if isinstance(payload, AdminCreate) else AdminCreate.model_validate(payload)
        return await self.client.post("/admin/admins", json=admin.model_dump(exclude_none=True))

    async def delete_admin(self, admin_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/admins/{admin_id}")
