"""
Fixtures compartidas: settings de prueba, sleep que registra demoras,
transportes simulados y el marketplace falso en memoria.
"""

from typing import Callable, List

import httpx
import pytest

from marketplace_panel.config.settings import Settings
from marketplace_panel.core.client import ApiClient
from marketplace_panel.core.navigation import MemoryNavigator
from marketplace_panel.core.session import MemoryStorage, SessionContext
from marketplace_panel.dashboard import Dashboard

from fake_marketplace import VALID_TOKEN, MarketplaceState, create_fake_marketplace

BASE_URL = "http://testserver/api"


class SleepRecorder:
    """Reemplazo de asyncio.sleep que solo anota la demora pedida"""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class RecordingHandler:
    """Handler para httpx.MockTransport que responde según una función"""

    def __init__(self, respond: Callable[[httpx.Request, int], httpx.Response]):
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request, len(self.requests))

    @property
    def attempts(self) -> int:
        return len(self.requests)


@pytest.fixture
def settings():
    return Settings(api_url=BASE_URL, _env_file=None)


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def session():
    return SessionContext(MemoryStorage())


@pytest.fixture
def make_client(settings, session, sleep):
    """Fábrica de ApiClient sobre un MockTransport"""

    def factory(respond, is_online=lambda: True, listeners=None):
        handler = RecordingHandler(respond)
        client = ApiClient(
            session,
            settings=settings,
            is_online=is_online,
            transport=httpx.MockTransport(handler),
            sleep=sleep,
            listeners=listeners
        )
        return client, handler

    return factory


@pytest.fixture
def marketplace():
    return MarketplaceState()


@pytest.fixture
def online():
    """Bandera de conectividad mutable para simular el modo offline"""
    return {"value": True}


@pytest.fixture
def navigator():
    return MemoryNavigator("/dashboard/deliveries")


@pytest.fixture
def dashboard(settings, marketplace, online, navigator, sleep):
    app = create_fake_marketplace(marketplace)
    board = Dashboard(
        settings=settings,
        storage=MemoryStorage(),
        navigator=navigator,
        is_online=lambda: online["value"],
        transport=httpx.ASGITransport(app=app),
        sleep=sleep
    )
    board.session.start(VALID_TOKEN, {"_id": "courier-1", "email": "courier@example.com", "role": "courier"})
    return board
