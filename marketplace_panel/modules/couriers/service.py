# marketplace_panel/modules/couriers/service.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import CourierCreate, CourierUpdate

class CourierAdminService:
    """Alta, edición y baja de corredores (rol admin)"""

    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_couriers(self, page: int = 1, limit: Optional[int] = None) -> ListResult:
        return await self.client.get_list("/admin/couriers", "couriers", page=page, limit=limit)

    async def create_courier(self, payload: Union[CourierCreate, Dict[str, Any]]) -> Dict[str, Any]:
        courier = payload if isinstance(payload, CourierCreate) else CourierCreate.model_validate(payload)
        return await self.client.post("/admin/couriers", json=courier.model_dump(by_alias=True, exclude_none=True))

    async def update_courier(self, courier_id: str, payload: Union[CourierUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        changes = payload if isinstance(payload, CourierUpdate) else CourierUpdate.model_validate(payload)
        return await self.client.put(
            f"/admin/couriers/{courier_id}",
            json=changes.model_dump(by_alias=True, exclude_none=True)
        )

    async def delete_courier(self, courier_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/couriers/{courier_id}")
