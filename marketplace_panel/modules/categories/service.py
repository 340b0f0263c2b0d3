# marketplace_panel/modules/categories/service.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import CategoryCreate, CategoryUpdate

class CategoryService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_categories(self, page: int = 1, limit: Optional[int] = None) -> ListResult:
        return await self.client.get_list("/admin/categories", "categories", page=page, limit=limit)

    async def create_category(self, payload: Union[CategoryCreate, Dict[str, Any]]) -> Dict[str, Any]:
        category = payload if isinstance(payload, CategoryCreate) else CategoryCreate.model_validate(payload)
        return await self.client.post("/admin/categories", json=category.model_dump(by_alias=True, exclude_none=True))

    async def update_category(self, category_id: str, payload: Union[CategoryUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        changes = payload if isinstance(payload, CategoryUpdate) else CategoryUpdate.model_validate(payload)
        return await self.client.put(
            f"/admin/categories/{category_id}",
            json=changes.model_dump(by_alias=True, exclude_none=True)
        )

    async def delete_category(self, category_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/categories/{category_id}")
