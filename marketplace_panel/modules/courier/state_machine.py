# marketplace_panel/modules/courier/state_machine.py
"""
Máquina de estados de entrega

Pending → Picked Up → In Transit → Out for Delivery → {Delivered | Failed Delivery}

Delivered y Failed Delivery son terminales. El servidor sigue siendo la
autoridad; esta validación local evita peticiones que el servidor rechazaría
y produce el mismo error no-grande que un rechazo del servidor.
"""

from typing import Any, Dict, FrozenSet, Optional, Tuple

from marketplace_panel.core.errors import ApiError, ErrorKind
from .schemas import DeliveryStatus


class DeliveryStateMachine:
    ORDER: Tuple[DeliveryStatus, ...] = tuple(DeliveryStatus)

    TRANSITIONS: Dict[DeliveryStatus, FrozenSet[DeliveryStatus]] = {
        DeliveryStatus.PENDING: frozenset({DeliveryStatus.PICKED_UP}),
        DeliveryStatus.PICKED_UP: frozenset({DeliveryStatus.IN_TRANSIT}),
        DeliveryStatus.IN_TRANSIT: frozenset({DeliveryStatus.OUT_FOR_DELIVERY}),
        DeliveryStatus.OUT_FOR_DELIVERY: frozenset({DeliveryStatus.DELIVERED, DeliveryStatus.FAILED_DELIVERY}),
        DeliveryStatus.DELIVERED: frozenset(),
        DeliveryStatus.FAILED_DELIVERY: frozenset(),
    }

    ISSUE_REPORTABLE = DeliveryStatus.OUT_FOR_DELIVERY

    @classmethod
    def is_terminal(cls, status: Any) -> bool:
        parsed = DeliveryStatus.parse(status)
        return parsed is not None and not cls.TRANSITIONS[parsed]

    @classmethod
    def next_states(cls, status: Any) -> Tuple[DeliveryStatus, ...]:
        """Estados alcanzables en un paso, en orden del ciclo"""
        parsed = DeliveryStatus.parse(status)
        if parsed is None:
            return ()
        allowed = cls.TRANSITIONS[parsed]
        return tuple(s for s in cls.ORDER if s in allowed)

    @classmethod
    def can_transition(cls, current: Any, target: Any) -> bool:
        parsed_target = DeliveryStatus.parse(target)
        if parsed_target is None:
            return False
        parsed_current = DeliveryStatus.parse(current)
        if parsed_current is None:
            # Estado desconocido localmente: decide el servidor
            return True
        return parsed_target in cls.TRANSITIONS[parsed_current]

    @classmethod
    def can_report_issue(cls, status: Any) -> bool:
        return DeliveryStatus.parse(status) == cls.ISSUE_REPORTABLE

    @staticmethod
    def _rejected(message: str) -> ApiError:
        return ApiError.build(message, 400, ErrorKind.VALIDATION_FAILURE)

    @classmethod
    def check_transition(cls, current: Optional[Any], target: Any) -> DeliveryStatus:
        """Validar transición; devuelve el estado destino o lanza ApiError"""
        parsed_target = DeliveryStatus.parse(target)
        if parsed_target is None:
            raise cls._rejected(f"Invalid delivery status: {target}")

        parsed_current = DeliveryStatus.parse(current)
        if parsed_current is None:
            return parsed_target

        if cls.is_terminal(parsed_current):
            raise cls._rejected(
                f"Order is already {parsed_current.value}; no further status changes are allowed."
            )

        if parsed_target not in cls.TRANSITIONS[parsed_current]:
            raise cls._rejected(
                f"Cannot change delivery status from {parsed_current.value} to {parsed_target.value}."
            )

        return parsed_target

    @classmethod
    def check_issue_report(cls, current: Optional[Any], reason: Optional[str]) -> str:
        if not reason or not reason.strip():
            raise cls._rejected("A reason is required to report a delivery issue.")

        parsed_current = DeliveryStatus.parse(current)
        if parsed_current is not None and parsed_current != cls.ISSUE_REPORTABLE:
            raise cls._rejected(
                f"Issues can only be reported while the order is {cls.ISSUE_REPORTABLE.value}."
            )

        return reason.strip()
