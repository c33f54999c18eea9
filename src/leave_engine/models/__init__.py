"""ORM models."""

from leave_engine.models.base import Base, TimestampMixin
from leave_engine.models.employee import Employee
from leave_engine.models.enums import Department, LeaveStatus
from leave_engine.models.leave import MAX_REASON_LENGTH, LeaveRequest

__all__ = [
    "Base",
    "TimestampMixin",
    "Department",
    "Employee",
    "LeaveRequest",
    "LeaveStatus",
    "MAX_REASON_LENGTH",
]
