# marketplace_panel/modules/products/service.py
from typing import Any, Dict, Optional, Union

from marketplace_panel.core.client import ApiClient
from marketplace_panel.shared.schemas.common import ListResult
from .schemas import ProductFilters, ProductStatus

class ProductService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_all_products(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Union[ProductFilters, Dict[str, Any], None] = None
    ) -> ListResult:
        if isinstance(filters, dict):
            filters = ProductFilters.model_validate(filters)
        params = filters.model_dump(by_alias=True, exclude_none=True) if filters else None
        return await self.client.get_list("/admin/products", "products", page=page, limit=limit, params=params)

    async def update_product_status(self, product_id: str, status: Union[ProductStatus, str]) -> Dict[str, Any]:
        """Aprobar o rechazar producto"""
        return await self.client.patch(
            f"/admin/products/{product_id}/status",
            json={"status": ProductStatus(status).value}
        )

    async def delete_product(self, product_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/admin/products/{product_id}")
