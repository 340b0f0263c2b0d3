# marketplace_panel/modules/sellers/service.py
from typing import Any, Dict, Optional

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult

class SellerService:
    """Gestión de vendedores desde el panel de administración"""

    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_sellers(self, page: int = 1, limit: Optional[int] = None) -> ListResult:
        return await self.client.get_list("/admin/sellers", "sellers", page=page, limit=limit)

    async def get_pending_sellers(self, page: int = 1, limit: Optional[int] = None) -> ListResult:
        """Vendedores pendientes de aprobación"""
        return await self.client.get_list("/admin/sellers/pending", "pending sellers", page=page, limit=limit)

    async def approve_seller(self, seller_id: str) -> Dict[str, Any]:
        return await self.client.patch(f"/admin/sellers/{seller_id}/approve")

    async def delete_seller(self, seller_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/sellers/{seller_id}")
