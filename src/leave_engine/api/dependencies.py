"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator, Callable
from datetime import date
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from leave_engine.config import get_settings
from leave_engine.database import init_db
from leave_engine.services import (
    EmployeeService,
    LeaveLifecycleEngine,
    LeaveQueryService,
)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the process-wide session factory."""
    _, factory = init_db()
    return factory


async def get_db_session(
    factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


def get_clock() -> Callable[[], date]:
    """Source of today's date for leave rules."""
    return date.today


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Clock = Annotated[Callable[[], date], Depends(get_clock)]


def get_lifecycle_engine(db: DbSession, clock: Clock) -> LeaveLifecycleEngine:
    """Build a lifecycle engine bound to the request's session."""
    return LeaveLifecycleEngine(
        db, clock=clock, max_retries=get_settings().max_conflict_retries
    )


def get_employee_service(db: DbSession) -> EmployeeService:
    return EmployeeService(db)


def get_query_service(db: DbSession) -> LeaveQueryService:
    return LeaveQueryService(db)


LifecycleEngine = Annotated[LeaveLifecycleEngine, Depends(get_lifecycle_engine)]
Employees = Annotated[EmployeeService, Depends(get_employee_service)]
Queries = Annotated[LeaveQueryService, Depends(get_query_service)]
