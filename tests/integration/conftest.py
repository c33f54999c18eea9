"""Integration test fixtures: the HTTP app wired to the per-test database."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from leave_engine.api.app import create_app
from leave_engine.api.dependencies import get_clock, get_session_factory
from tests.conftest import TODAY


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_clock] = lambda: (lambda: TODAY)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def employee_id(client: AsyncClient) -> str:
    """Create an employee joined 2024-01-01 with the default balance."""
    response = await client.post(
        "/api/v1/employees/create",
        json={
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "department": "Engineering",
            "joiningDate": "2024-01-01",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]
