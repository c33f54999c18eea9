"""Employee model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leave_engine.config import get_settings
from leave_engine.models.base import Base, TimestampMixin
from leave_engine.models.enums import Department

if TYPE_CHECKING:
    from leave_engine.models.leave import LeaveRequest


def _default_allowance() -> int:
    return get_settings().default_leave_allowance


_DEPARTMENTS = ", ".join(f"'{d.value}'" for d in Department)


class Employee(Base, TimestampMixin):
    """Employee record with remaining leave balance.

    `version` is bumped by every guarded write (balance deduction, leave
    submission) so concurrent writers for the same employee can detect a
    stale read.
    """

    __tablename__ = "employee"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    full_name: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
    department: Mapped[str] = mapped_column(String(32), nullable=False)
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)
    leave_availability: Mapped[int] = mapped_column(
        Integer, nullable=False, default=_default_allowance
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint("leave_availability >= 0", name="employee_leave_non_negative"),
        CheckConstraint(f"department IN ({_DEPARTMENTS})", name="employee_department_check"),
    )

    # Relationships
    leave_requests: Mapped[list[LeaveRequest]] = relationship(back_populates="employee")
