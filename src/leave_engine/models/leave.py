"""Leave request model."""

from __future__ import annotations

from datetime import date
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leave_engine.models.base import Base, TimestampMixin
from leave_engine.models.employee import Employee
from leave_engine.models.enums import LeaveStatus

MAX_REASON_LENGTH = 300

_STATUSES = ", ".join(f"'{s.value}'" for s in LeaveStatus)


class LeaveRequest(Base, TimestampMixin):
    """A time-off request covering the inclusive range [start_date, end_date]."""

    __tablename__ = "leave_request"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    employee_id: Mapped[UUID] = mapped_column(
        ForeignKey("employee.id", ondelete="RESTRICT"),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(String(MAX_REASON_LENGTH), nullable=False)
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=LeaveStatus.PENDING.value
    )

    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="leave_request_range_check"),
        CheckConstraint(f"status IN ({_STATUSES})", name="leave_request_status_check"),
        Index("ix_leave_request_employee_range", "employee_id", "start_date", "end_date"),
        Index("ix_leave_request_created_at", "created_at"),
    )

    # Relationships
    employee: Mapped[Employee] = relationship(back_populates="leave_requests")

    @property
    def duration_days(self) -> int:
        """Inclusive number of calendar days covered."""
        return (self.end_date - self.start_date).days + 1
