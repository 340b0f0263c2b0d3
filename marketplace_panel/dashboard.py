# marketplace_panel/dashboard.py
"""
Punto de composición del cliente del panel

Arma la sesión, el cliente de API y los namespaces por entidad. La
redirección al login queda en manos del SessionGuard registrado aquí.
"""

import asyncio
import logging
from typing import Optional

import httpx

from marketplace_panel.config.settings import Settings, settings as default_settings
from marketplace_panel.core.client import ApiClient
from marketplace_panel.core.navigation import MemoryNavigator, Navigator, SessionGuard
from marketplace_panel.core.pipeline import OnlineProbe, SleepFn, always_online
from marketplace_panel.core.session import JsonFileStorage, KeyValueStorage, MemoryStorage, SessionContext
from marketplace_panel.modules.admins import AdminService
from marketplace_panel.modules.auth import AuthService
from marketplace_panel.modules.buyers import BuyerService
from marketplace_panel.modules.categories import CategoryService
from marketplace_panel.modules.courier import CourierDeliveryService, CourierRepository
from marketplace_panel.modules.couriers import CourierAdminService
from marketplace_panel.modules.orders import OrderService
from marketplace_panel.modules.products import ProductService
from marketplace_panel.modules.sellers import SellerService

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> KeyValueStorage:
    if settings.session_file:
        return JsonFileStorage(settings.session_file)
    return MemoryStorage()


class Dashboard:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[KeyValueStorage] = None,
        navigator: Optional[Navigator] = None,
        is_online: OnlineProbe = always_online,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: SleepFn = asyncio.sleep
    ):
        self.settings = settings or default_settings
        self.session = SessionContext(storage if storage is not None else build_storage(self.settings))
        self.navigator = navigator or MemoryNavigator()
        self.guard = SessionGuard(self.navigator, self.settings.login_path)

        self.client = ApiClient(
            self.session,
            settings=self.settings,
            is_online=is_online,
            transport=transport,
            sleep=sleep,
            listeners=[self.guard]
        )

        self.auth = AuthService(self.client)
        self.admins = AdminService(self.client)
        self.sellers = SellerService(self.client)
        self.couriers = CourierAdminService(self.client)
        self.buyers = BuyerService(self.client)
        self.categories = CategoryService(self.client)
        self.products = ProductService(self.client)
        self.orders = OrderService(self.client)
        self.courier = CourierRepository(self.client)

        logger.info(f"🚀 {self.settings.app_name} v{self.settings.version} -> {self.settings.base_url}")

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def deliveries(self, limit: Optional[int] = None) -> CourierDeliveryService:
        """Flujo del panel 'My Deliveries' para el corredor en sesión"""
        return CourierDeliveryService(self.courier, limit=limit or self.settings.page_size)
