"""Pytest fixtures for leave engine tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date
from typing import Any
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from leave_engine.database import create_schema, get_engine, make_session_factory
from leave_engine.models import Employee, LeaveRequest, LeaveStatus
from leave_engine.services import LeaveLifecycleEngine

# Fixed "today" for every rule that compares against the current date
TODAY = date(2025, 8, 1)


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine backed by a fresh SQLite file."""
    engine = get_engine(f"sqlite+aiosqlite:///{tmp_path / 'leave_engine_test.db'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return make_session_factory(engine)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def lifecycle(session: AsyncSession) -> LeaveLifecycleEngine:
    """Lifecycle engine pinned to TODAY."""
    return LeaveLifecycleEngine(session, clock=lambda: TODAY, max_retries=3)


@pytest.fixture
def make_employee(session: AsyncSession) -> Callable[..., Awaitable[Employee]]:
    """Factory creating committed employees."""

    async def _make(**overrides: Any) -> Employee:
        fields: dict[str, Any] = {
            "full_name": "Ada Lovelace",
            "email": f"ada.{uuid4().hex[:8]}@example.com",
            "department": "Engineering",
            "joining_date": date(2024, 1, 1),
            "leave_availability": 40,
        }
        fields.update(overrides)
        employee = Employee(**fields)
        session.add(employee)
        await session.commit()
        return employee

    return _make


@pytest.fixture
def make_leave(session: AsyncSession) -> Callable[..., Awaitable[LeaveRequest]]:
    """Factory inserting leave rows directly, bypassing validation."""

    async def _make(employee: Employee, start: date, end: date, **overrides: Any) -> LeaveRequest:
        fields: dict[str, Any] = {
            "employee_id": employee.id,
            "start_date": start,
            "end_date": end,
            "reason": "Family trip",
            "status": LeaveStatus.PENDING.value,
        }
        fields.update(overrides)
        leave = LeaveRequest(**fields)
        session.add(leave)
        await session.commit()
        return leave

    return _make
