"""Leave ledger - storage, overlap search and listing of leave requests."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from leave_engine.models import LeaveRequest, LeaveStatus


class LeaveLedger:
    """Repository for leave requests."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, leave_id: UUID) -> LeaveRequest | None:
        """Load a leave request by id, bypassing the identity map."""
        result = await self.session.execute(
            select(LeaveRequest)
            .where(LeaveRequest.id == leave_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_overlap(
        self,
        employee_id: UUID,
        start_date: date,
        end_date: date,
        statuses: Iterable[LeaveStatus],
    ) -> LeaveRequest | None:
        """Find any request of the employee intersecting [start_date, end_date].

        Closed intervals [a, b] and [c, d] intersect iff a <= d and c <= b.
        """
        result = await self.session.execute(
            select(LeaveRequest)
            .where(
                LeaveRequest.employee_id == employee_id,
                LeaveRequest.status.in_([s.value for s in statuses]),
                LeaveRequest.start_date <= end_date,
                LeaveRequest.end_date >= start_date,
            )
            .order_by(LeaveRequest.start_date)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def insert(self, leave: LeaveRequest) -> LeaveRequest:
        """Add a new leave request and flush so the id and defaults are assigned."""
        self.session.add(leave)
        await self.session.flush()
        return leave

    async def save(self, leave: LeaveRequest) -> None:
        """Flush pending changes to a leave request."""
        self.session.add(leave)
        await self.session.flush()

    async def set_status(
        self,
        leave_id: UUID,
        new_status: LeaveStatus,
        expected_status: LeaveStatus,
    ) -> bool:
        """Move a request to `new_status` only if it is still in `expected_status`.

        Returns True if exactly one row was updated.
        """
        result = await self.session.execute(
            update(LeaveRequest)
            .where(
                LeaveRequest.id == leave_id,
                LeaveRequest.status == expected_status.value,
            )
            .values(status=new_status.value)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) == 1

    async def query(
        self,
        status: LeaveStatus | None,
        skip: int,
        limit: int,
    ) -> Sequence[LeaveRequest]:
        """List requests newest first, with their employees loaded."""
        query = (
            select(LeaveRequest)
            .options(selectinload(LeaveRequest.employee))
            .execution_options(populate_existing=True)
        )
        if status is not None:
            query = query.where(LeaveRequest.status == status.value)
        query = query.order_by(LeaveRequest.created_at.desc(), LeaveRequest.id)
        query = query.offset(skip).limit(limit)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self, status: LeaveStatus | None) -> int:
        """Count requests matching the optional status filter."""
        query = select(func.count()).select_from(LeaveRequest)
        if status is not None:
            query = query.where(LeaveRequest.status == status.value)
        return await self.session.scalar(query) or 0
