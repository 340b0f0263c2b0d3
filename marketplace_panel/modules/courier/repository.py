# marketplace_panel/modules/courier/repository.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import DeliveryFilter, DeliveryStatus, IssueReportRequest, StatusUpdateRequest

class CourierRepository:
    """Endpoints del panel de corredor; devuelve payloads del servidor tal cual"""

    def __init__(self, client: ApiClient):
        self.client = client

    async def get_assigned_orders(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        status: Union[DeliveryFilter, str, None] = None
    ) -> ListResult:
        if isinstance(status, DeliveryFilter):
            status = status.value
        return await self.client.get_list(
            "/courier/orders", "orders", page=page, limit=limit, params={"status": status}
        )

    async def get_order(self, order_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/courier/orders/{order_id}")

    async def update_order_status(
        self,
        order_id: str,
        status: Union[DeliveryStatus, str],
        product_id: str,
        reason: str = ""
    ) -> Dict[str, Any]:
        body = StatusUpdateRequest(status=status, product_id=product_id, reason=reason or "")
        return await self.client.patch(f"/courier/orders/{order_id}/status", json=body.model_dump(by_alias=True))

    async def report_delivery_issue(self, order_id: str, product_id: str, reason: str) -> Dict[str, Any]:
        body = IssueReportRequest(product_id=product_id, reason=reason)
        return await self.client.post(f"/courier/orders/{order_id}/report-issue", json=body.model_dump(by_alias=True))
