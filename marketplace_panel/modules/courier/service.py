# marketplace_panel/modules/courier/service.py
import logging
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import ValidationError

from marketplace_panel.config.settings import settings
from marketplace_panel.core.errors import ApiError, ErrorKind
from marketplace_panel.shared.schemas.common import PaginationCursor
from .repository import CourierRepository
from .schemas import DeliveryFilter, DeliveryOrder, DeliveryStatus
from .state_machine import DeliveryStateMachine

logger = logging.getLogger(__name__)

class CourierDeliveryService:
    """
    Flujo de entregas del corredor

    Mantiene el estado del panel "My Deliveries" (órdenes, cursor y filtro).
    Tras cada mutación vuelve a consultar al servidor; el historial de estados
    nunca se sintetiza localmente.
    """

    def __init__(
        self,
        repository: CourierRepository,
        limit: Optional[int] = None,
        state_machine: Type[DeliveryStateMachine] = DeliveryStateMachine
    ):
        self.repository = repository
        self.state_machine = state_machine
        self.orders: List[DeliveryOrder] = []
        self.pagination = PaginationCursor(limit=limit or settings.page_size)
        self.status_filter = DeliveryFilter.ALL

    async def fetch_orders(self) -> List[DeliveryOrder]:
        """Cargar la página actual de órdenes asignadas"""
        result = await self.repository.get_assigned_orders(
            page=self.pagination.page,
            limit=self.pagination.limit,
            status=self.status_filter
        )

        self.orders = [self._parse_order(order) for order in result.data]
        self.pagination.update_total(result.pagination.total or len(result.data))

        logger.info(
            f"📦 {len(self.orders)} órdenes cargadas - página {self.pagination.page}/{self.pagination.pages}"
        )
        return self.orders

    @staticmethod
    def _parse_order(payload: Any) -> DeliveryOrder:
        try:
            return DeliveryOrder.model_validate(payload)
        except ValidationError as e:
            logger.error(f"❌ Orden con forma inválida: {e.errors()[:3]}")
            raise ApiError.build("Invalid order data received.", 500, ErrorKind.UNKNOWN, original_error=payload) from None

    def find_order(self, order_id: str, product_id: Optional[str] = None) -> Optional[DeliveryOrder]:
        """Fila de la orden; cada ítem de una orden llega como una fila propia"""
        return next(
            (o for o in self.orders
             if o.id == order_id and (product_id is None or o.item.product_key == product_id)),
            None
        )

    async def get_order(self, order_id: str) -> DeliveryOrder:
        body = await self.repository.get_order(order_id)
        payload = body.get("data") if isinstance(body, dict) and "data" in body else body
        if not isinstance(payload, dict):
            raise ApiError.build("Invalid order data received.", 500, ErrorKind.UNKNOWN, original_error=body)
        return self._parse_order(payload)

    async def _refresh(self, order_id: str) -> DeliveryOrder:
        order = await self.get_order(order_id)
        await self.fetch_orders()
        return order

    def _current_status(self, order_id: str, product_id: str) -> Optional[str]:
        order = self.find_order(order_id, product_id)
        return order.item.courier_status if order else None

    async def update_status(
        self,
        order_id: str,
        product_id: str,
        new_status: Union[DeliveryStatus, str],
        reason: str = ""
    ) -> DeliveryOrder:
        """Cambiar el estado de entrega y devolver la orden según el servidor"""
        target = self.state_machine.check_transition(self._current_status(order_id, product_id), new_status)

        await self.repository.update_order_status(order_id, target, product_id, reason)
        logger.info(f"🚚 Orden {order_id}: estado actualizado a {target.value}")

        return await self._refresh(order_id)

    async def report_issue(self, order_id: str, product_id: str, reason: str) -> DeliveryOrder:
        """Reportar incidencia; solo permitido en Out for Delivery"""
        reason = self.state_machine.check_issue_report(self._current_status(order_id, product_id), reason)

        await self.repository.report_delivery_issue(order_id, product_id, reason)
        logger.info(f"⚠️ Incidencia reportada en orden {order_id}")

        return await self._refresh(order_id)

    async def change_page(self, page: int) -> bool:
        if not self.pagination.go_to(page):
            return False
        await self.fetch_orders()
        return True

    async def next_page(self) -> bool:
        return await self.change_page(self.pagination.page + 1)

    async def previous_page(self) -> bool:
        return await self.change_page(self.pagination.page - 1)

    async def set_status_filter(self, status: Union[DeliveryFilter, str]) -> List[DeliveryOrder]:
        self.status_filter = DeliveryFilter(status)
        self.pagination.reset()
        return await self.fetch_orders()

    def can_update(self, order: DeliveryOrder) -> bool:
        """El control de estado se deshabilita en estados terminales"""
        return not self.state_machine.is_terminal(order.item.courier_status)

    def can_report_issue(self, order: DeliveryOrder) -> bool:
        return self.state_machine.can_report_issue(order.item.courier_status)

    @staticmethod
    def is_issue_reported(order: DeliveryOrder) -> bool:
        return order.item.issue_reported

    def summary(self) -> Dict[str, Any]:
        """Conteo por estado de la página cargada"""
        counts = {status.value: 0 for status in DeliveryStatus}
        for order in self.orders:
            counts[order.item.courier_status] = counts.get(order.item.courier_status, 0) + 1
        return {
            "total": self.pagination.total,
            "page": self.pagination.page,
            "pages": self.pagination.pages,
            "by_status": counts,
            "issues_reported": len([o for o in self.orders if o.item.issue_reported])
        }
