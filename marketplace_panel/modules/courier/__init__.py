# marketplace_panel/modules/courier/__init__.py
"""
Módulo Courier - Flujo de entregas del corredor

- Consultar órdenes asignadas (paginadas y filtradas por estado)
- Avanzar el estado de entrega según el ciclo permitido
- Reportar incidencias mientras la orden está en reparto
- Historial de estados auditado por el servidor

Arquitectura:
- repository.py: Endpoints del corredor
- state_machine.py: Ciclo de estados y reglas de transición
- service.py: Flujo del panel de entregas
- schemas.py: Modelos de request/response
"""

from .repository import CourierRepository
from .schemas import DeliveryStatus, DeliveryOrder
from .service import CourierDeliveryService
from .state_machine import DeliveryStateMachine

__all__ = [
    "CourierRepository",
    "CourierDeliveryService",
    "DeliveryStateMachine",
    "DeliveryStatus",
    "DeliveryOrder"
]
