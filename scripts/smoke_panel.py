#!/usr/bin/env python3
"""
Prueba manual del cliente contra un API real
Ejecutar desde la raíz del proyecto:
    MARKETPLACE_API_URL=http://localhost:3000/api python scripts/smoke_panel.py
"""

import asyncio
import os

from marketplace_panel import ApiError, Dashboard
from marketplace_panel.config.settings import configure_logging
from marketplace_panel.modules.courier import DeliveryStateMachine

USERS = {
    "admin": {"email": os.getenv("SMOKE_ADMIN_EMAIL", "admin@marketplace.com"),
              "password": os.getenv("SMOKE_ADMIN_PASSWORD", "admin123")},
    "courier": {"email": os.getenv("SMOKE_COURIER_EMAIL", "courier@marketplace.com"),
                "password": os.getenv("SMOKE_COURIER_PASSWORD", "courier123")},
}


class PanelTester:
    def __init__(self):
        self.dashboard = Dashboard()

    async def login(self, role: str) -> bool:
        print(f"🔐 Login como {role}...")
        try:
            await self.dashboard.auth.login(**USERS[role])
            print(f"✅ Login exitoso: {role}")
            return True
        except ApiError as e:
            print(f"❌ Error login {role}: [{e.code}] {e.message}")
            return False

    async def test_admin_listing(self):
        """Listado paginado de administradores"""
        print("\n📋 Test: Listado de administradores")
        try:
            result = await self.dashboard.admins.get_all_admins(page=1)
            cursor = result.pagination
            print(f"✅ {len(result.data)} admins - página {cursor.page}/{cursor.pages} (total {cursor.total})")
        except ApiError as e:
            print(f"❌ [{e.code}] {e.message}{' (global)' if e.is_big_error else ''}")

    async def test_courier_deliveries(self):
        """Entregas asignadas y próximos estados posibles"""
        print("\n🚚 Test: Entregas del corredor")
        deliveries = self.dashboard.deliveries()
        try:
            orders = await deliveries.fetch_orders()
        except ApiError as e:
            print(f"❌ [{e.code}] {e.message}")
            return

        print(f"✅ {len(orders)} órdenes asignadas")
        for order in orders:
            status = order.item.courier_status
            next_states = [s.value for s in DeliveryStateMachine.next_states(status)]
            print(f"   {order.id}: {status} -> {next_states or 'terminal'}")

        print(f"📊 Resumen: {deliveries.summary()}")

    async def run(self):
        print("🚀 Iniciando pruebas del panel")
        print(f"📍 API: {self.dashboard.settings.base_url}")

        if await self.login("admin"):
            await self.test_admin_listing()
            self.dashboard.auth.logout()

        if await self.login("courier"):
            await self.test_courier_deliveries()
            self.dashboard.auth.logout()

        print("\n🏁 Pruebas finalizadas")


if __name__ == "__main__":
    configure_logging()
    asyncio.run(PanelTester().run())
