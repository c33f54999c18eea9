"""Employee directory - storage and lookup of employee records."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from leave_engine.models import Employee


class EmployeeDirectory:
    """Repository for employee records.

    Holds no business rules. The guarded writes (`deduct_balance`,
    `bump_version`) return False when the row no longer matches the caller's
    read, leaving the retry decision to the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, employee_id: UUID) -> Employee | None:
        """Load an employee by id, bypassing the identity map."""
        result = await self.session.execute(
            select(Employee)
            .where(Employee.id == employee_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> Employee | None:
        """Load an employee by (lower-cased) email."""
        result = await self.session.execute(
            select(Employee).where(Employee.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def insert(self, employee: Employee) -> Employee:
        """Add a new employee and flush so the id and defaults are assigned."""
        self.session.add(employee)
        await self.session.flush()
        return employee

    async def save(self, employee: Employee) -> None:
        """Flush pending changes to an employee."""
        self.session.add(employee)
        await self.session.flush()

    async def deduct_balance(
        self,
        employee_id: UUID,
        days: int,
        expected_version: int,
    ) -> bool:
        """Deduct leave days if the row is unchanged since it was read.

        Returns True if exactly one row was updated.
        """
        result = await self.session.execute(
            update(Employee)
            .where(
                Employee.id == employee_id,
                Employee.version == expected_version,
                Employee.leave_availability >= days,
            )
            .values(
                leave_availability=Employee.leave_availability - days,
                version=Employee.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) == 1

    async def bump_version(self, employee_id: UUID, expected_version: int) -> bool:
        """Claim the employee row for a write, failing if another writer got there first."""
        result = await self.session.execute(
            update(Employee)
            .where(Employee.id == employee_id, Employee.version == expected_version)
            .values(version=Employee.version + 1)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) == 1
