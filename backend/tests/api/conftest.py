"""API test fixtures: FastAPI test client with the upstream gateway overridden.

Invariants:
    - Every test gets a fresh FakeEmployeeGateway via dependency_overrides
    - The lifespan is not run (ASGITransport), so no real httpx client is built
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.infrastructure.employee_client import get_employee_gateway
from employee_api.main import app
from tests.fakes import FakeEmployeeGateway


@pytest.fixture
def gateway():
    return FakeEmployeeGateway()


@pytest.fixture
async def client(gateway):
    """FastAPI test client with the gateway dependency overridden."""
    app.dependency_overrides[get_employee_gateway] = lambda: gateway

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
