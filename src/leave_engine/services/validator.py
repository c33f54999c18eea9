"""Leave request validator.

Rule functions deciding whether a candidate leave request may be created.
They only read from the employee directory and the leave ledger; every
mutation belongs to the lifecycle engine.

Checks run in a fixed order and the first failure wins, since later checks
rely on what earlier ones established (overlap search assumes a valid range,
the balance check assumes the employee exists):

1. presence of every field, reason length
2. start <= end
3. start is not before today
4. employee exists
5. start is not before the employee's joining date
6. no overlap with the employee's pending or approved requests
7. enough balance for the inclusive duration
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from leave_engine.models import MAX_REASON_LENGTH, Employee
from leave_engine.repositories import EmployeeDirectory, LeaveLedger
from leave_engine.services.errors import (
    BeforeJoiningError,
    EmployeeNotFoundError,
    InsufficientBalanceError,
    InvalidRangeError,
    InvalidReasonError,
    MissingFieldError,
    OverlapConflictError,
    PastDateError,
)
from leave_engine.services.state_machine import LeaveStateMachine


@dataclass(frozen=True)
class SubmissionAccepted:
    """Outcome of a successful validation."""

    employee: Employee
    employee_id: UUID
    start_date: date
    end_date: date
    reason: str
    duration: int


def leave_duration(start_date: date, end_date: date) -> int:
    """Inclusive day count of [start_date, end_date]."""
    return (end_date - start_date).days + 1


def _as_date(value: date | datetime) -> date:
    # datetime is a date subclass; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


def check_required_fields(
    employee_id: UUID | str | None,
    start_date: date | None,
    end_date: date | None,
    reason: str | None,
) -> None:
    """Raise MissingFieldError naming every absent or empty field."""
    missing = []
    if employee_id is None or (isinstance(employee_id, str) and not employee_id.strip()):
        missing.append("employeeId")
    if start_date is None:
        missing.append("startDate")
    if end_date is None:
        missing.append("endDate")
    if reason is None or not reason.strip():
        missing.append("reason")
    if missing:
        raise MissingFieldError(missing)
    if len(reason) > MAX_REASON_LENGTH:
        raise InvalidReasonError(MAX_REASON_LENGTH)


def check_date_range(start_date: date, end_date: date, today: date) -> None:
    """Raise if the range is inverted or starts before today."""
    if start_date > end_date:
        raise InvalidRangeError(start_date, end_date)
    if start_date < today:
        raise PastDateError(start_date, today)


def check_employment_window(employee: Employee, start_date: date) -> None:
    """Raise if leave starts before the employee joined."""
    if start_date < employee.joining_date:
        raise BeforeJoiningError(start_date, employee.joining_date)


def check_balance(employee: Employee, duration: int, approving: bool = False) -> None:
    """Raise if the employee's remaining balance does not cover `duration` days."""
    if employee.leave_availability < duration:
        raise InsufficientBalanceError(employee.leave_availability, duration, approving)


def parse_id(value: UUID | str) -> UUID | None:
    """Parse a record id, returning None when it cannot name any row."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except ValueError:
        return None


async def validate_submission(
    directory: EmployeeDirectory,
    ledger: LeaveLedger,
    employee_id: UUID | str | None,
    start_date: date | None,
    end_date: date | None,
    reason: str | None,
    today: date,
) -> SubmissionAccepted:
    """Run every submission check in order.

    Returns SubmissionAccepted carrying the loaded employee and the computed
    duration. Raises the first LeaveError encountered.
    """
    check_required_fields(employee_id, start_date, end_date, reason)
    start = _as_date(start_date)
    end = _as_date(end_date)

    check_date_range(start, end, _as_date(today))

    parsed_id = parse_id(employee_id)
    employee = await directory.find_by_id(parsed_id) if parsed_id is not None else None
    if employee is None:
        raise EmployeeNotFoundError(employee_id)

    check_employment_window(employee, start)

    overlapping = await ledger.find_overlap(
        employee.id, start, end, LeaveStateMachine.ACTIVE
    )
    if overlapping is not None:
        raise OverlapConflictError(overlapping.id)

    duration = leave_duration(start, end)
    check_balance(employee, duration)

    return SubmissionAccepted(
        employee=employee,
        employee_id=employee.id,
        start_date=start,
        end_date=end,
        reason=reason,
        duration=duration,
    )
