"""Employee service - creation and lookup of employees."""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from leave_engine.config import get_settings
from leave_engine.models import Department, Employee
from leave_engine.repositories import EmployeeDirectory
from leave_engine.services.errors import (
    DuplicateEmailError,
    EmployeeNotFoundError,
    InvalidDepartmentError,
    InvalidLeaveAllowanceError,
)
from leave_engine.services.validator import parse_id

logger = logging.getLogger(__name__)


def parse_department(value: object) -> Department:
    """Match a department case-insensitively against the fixed set."""
    if isinstance(value, Department):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for department in Department:
            if department.value.lower() == wanted:
                return department
    raise InvalidDepartmentError(value, [d.value for d in Department])


class EmployeeService:
    """Creates employees and looks them up for the transport layer."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.directory = EmployeeDirectory(session)

    async def create_employee(
        self,
        full_name: str,
        email: str,
        department: object,
        joining_date: date,
        leave_availability: int | None = None,
    ) -> Employee:
        """Create an employee, enforcing unique email and a valid department.

        Field shape (name pattern, email syntax, lengths) is checked by the
        request schema before this is called.
        """
        dept = parse_department(department)

        if leave_availability is None:
            leave_availability = get_settings().default_leave_allowance
        if isinstance(leave_availability, bool) or not isinstance(leave_availability, int):
            raise InvalidLeaveAllowanceError(leave_availability)
        if leave_availability < 0:
            raise InvalidLeaveAllowanceError(leave_availability)

        normalized_email = email.strip().lower()
        if await self.directory.find_by_email(normalized_email) is not None:
            raise DuplicateEmailError(normalized_email)

        employee = Employee(
            full_name=full_name.strip(),
            email=normalized_email,
            department=dept.value,
            joining_date=joining_date,
            leave_availability=leave_availability,
        )
        try:
            await self.directory.insert(employee)
            await self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent create for the same email
            await self.session.rollback()
            raise DuplicateEmailError(normalized_email) from None
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Employee created with the email: %s", employee.email)
        return employee

    async def get_employee(self, employee_id: UUID | str) -> Employee:
        """Load an employee or raise EmployeeNotFoundError."""
        parsed_id = parse_id(employee_id)
        if parsed_id is None:
            raise EmployeeNotFoundError(employee_id)
        employee = await self.directory.find_by_id(parsed_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee
