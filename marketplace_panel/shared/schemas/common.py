# marketplace_panel/shared/schemas/common.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List
import math

class PaginationCursor(BaseModel):
    """Ventana {page, limit, total} sobre una colección paginada del servidor"""
    page: int = Field(1, ge=1, description="Página actual (base 1)")
    limit: int = Field(10, ge=1, description="Elementos por página")
    total: int = Field(0, ge=0, description="Total reportado por el servidor")

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    def is_valid_page(self, page: int) -> bool:
        return 1 <= page <= max(self.pages, 1)

    def go_to(self, page: int) -> bool:
        """Mover a otra página; no-op si está fuera de rango o es la actual"""
        if page == self.page or not self.is_valid_page(page):
            return False
        self.page = page
        return True

    def next_page(self) -> bool:
        return self.go_to(self.page + 1)

    def previous_page(self) -> bool:
        return self.go_to(self.page - 1)

    def reset(self) -> None:
        self.page = 1

    def update_total(self, total: int) -> None:
        self.total = max(total, 0)

class ListResult(BaseModel):
    """Payload del servidor aumentado con el cursor de paginación"""
    data: List[Any]
    pagination: PaginationCursor
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def __len__(self) -> int:
        return len(self.data)
