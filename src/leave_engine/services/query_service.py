"""Read-only paginated listing of leave requests."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from leave_engine.models import LeaveRequest, LeaveStatus
from leave_engine.repositories import LeaveLedger

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 9


@dataclass(frozen=True)
class LeavePage:
    """One page of leave requests with pagination metadata."""

    items: list[LeaveRequest]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed for `total` items."""
        return math.ceil(self.total / self.limit)


def _positive_int(value: object, default: int) -> int:
    # Lenient like a query string: "3" -> 3, anything else -> default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return default
        return parsed if parsed > 0 else default
    return default


def parse_status_filter(value: object) -> LeaveStatus | None:
    """Return the matching status, or None for missing/unknown values."""
    if isinstance(value, LeaveStatus):
        return value
    try:
        return LeaveStatus(value)
    except ValueError:
        return None


class LeaveQueryService:
    """Paginated views over the leave ledger."""

    def __init__(self, session: AsyncSession):
        self.ledger = LeaveLedger(session)

    async def list_leaves(
        self,
        page: object = None,
        limit: object = None,
        status_filter: object = None,
    ) -> LeavePage:
        """List leave requests newest first.

        Invalid or missing `page`/`limit` fall back to 1 and 9; an unknown
        status filter is ignored.
        """
        page_num = _positive_int(page, DEFAULT_PAGE)
        page_size = _positive_int(limit, DEFAULT_LIMIT)
        status = parse_status_filter(status_filter)

        total = await self.ledger.count(status)
        skip = (page_num - 1) * page_size

        # Past the end: skip the query, the offset may not fit a SQL integer
        if skip >= total:
            return LeavePage(items=[], total=total, page=page_num, limit=page_size)

        items = await self.ledger.query(status, skip, min(page_size, total - skip))
        return LeavePage(items=list(items), total=total, page=page_num, limit=page_size)

    async def list_pending(self, page: object = None, limit: object = None) -> LeavePage:
        """List requests awaiting a decision."""
        return await self.list_leaves(page, limit, LeaveStatus.PENDING)
