# marketplace_panel/modules/buyers/service.py
from typing import Any, Dict, Optional

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult

class BuyerService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_buyers(self, page: int = 1, limit: Optional[int] = None, search: Optional[str] = None) -> ListResult:
        return await self.client.get_list(
            "/admin/buyers", "buyers", page=page, limit=limit, params={"search": search}
        )

    async def update_buyer_status(self, buyer_id: str, is_active: bool) -> Dict[str, Any]:
        """Bloquear o desbloquear comprador"""
        return await self.client.patch(f"/admin/buyers/{buyer_id}/status", json={"isActive": is_active})

    async def delete_buyer(self, buyer_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/buyers/{buyer_id}")
