# marketplace_panel/modules/orders/service.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import OrderFilters, SellerStatus

class OrderService:
    """Órdenes vistas desde el panel de administración"""

    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_orders(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Union[OrderFilters, Dict[str, Any], None] = None
    ) -> ListResult:
        if isinstance(filters, dict):
            filters = OrderFilters.model_validate(filters)
        params = filters.model_dump(by_alias=True, exclude_none=True) if filters else None
        return await self.client.get_list("/admin/orders", "orders", page=page, limit=limit, params=params)

    async def get_order(self, order_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/admin/orders/{order_id}")

    async def update_order_status(
        self,
        order_id: str,
        status: Union[SellerStatus, str],
        product_id: Optional[str] = None
    ) -> Dict[str, Any]:
        body = {"status": SellerStatus(status).value}
        if product_id:
            body["productId"] = product_id
        return await self.client.patch(f"/admin/orders/{order_id}/status", json=body)

    async def delete_order(self, order_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/orders/{order_id}")
