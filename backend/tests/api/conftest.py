"""API test fixtures - FastAPI test client over an in-memory DB and fake adapters.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the health check uses the test engine
    - Every adapter dependency resolves to a fake from tests/fakes.py

Design Decisions:
    - Lifespan is not run by ASGITransport; nothing real is constructed
    - Fakes exposed as fixtures so tests reconfigure them before issuing requests
"""

import pytest
from httpx import ASGITransport, AsyncClient

import autoconnect.infrastructure.database as db_module
from autoconnect.api.dependencies import (
    get_llm_client, get_mail_transport, get_payment_gateway, get_vision_client,
)
from autoconnect.infrastructure.database import DatabaseSessionManager, get_db
from autoconnect.main import app
from tests.fakes import FakeGateway, FakeLLM, FakeMailTransport, FakeVision


@pytest.fixture
def fake_vision():
    return FakeVision()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def fake_mail():
    return FakeMailTransport()


@pytest.fixture
async def client(
    test_engine, test_session_factory,
    fake_vision, fake_llm, fake_gateway, fake_mail,
):
    """FastAPI test client with DB and adapter dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_vision_client] = lambda: fake_vision
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    app.dependency_overrides[get_payment_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_mail_transport] = lambda: fake_mail

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
