"""Tests for paginated leave listings."""

from datetime import date, datetime, timedelta, timezone

import pytest

from leave_engine.models import LeaveStatus
from leave_engine.services import LeaveQueryService


@pytest.fixture
def queries(session) -> LeaveQueryService:
    return LeaveQueryService(session)


async def _seed(make_employee, make_leave, count: int, status: LeaveStatus = LeaveStatus.PENDING):
    employee = await make_employee()
    base = datetime(2025, 7, 1, tzinfo=timezone.utc)
    leaves = []
    for i in range(count):
        day = date(2025, 9, 1) + timedelta(days=2 * i)
        leaves.append(
            await make_leave(
                employee,
                day,
                day,
                status=status.value,
                created_at=base + timedelta(minutes=i),
            )
        )
    return leaves


class TestPagination:
    """Page/limit handling."""

    async def test_defaults(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 12)

        page = await queries.list_leaves()

        assert page.page == 1
        assert page.limit == 9
        assert page.total == 12
        assert page.total_pages == 2
        assert len(page.items) == 9

    async def test_second_page_holds_the_oldest(self, queries, make_employee, make_leave):
        leaves = await _seed(make_employee, make_leave, 12)

        page = await queries.list_leaves(page="2", limit="9")

        assert [leave.id for leave in page.items] == [leaves[2].id, leaves[1].id, leaves[0].id]

    async def test_newest_first(self, queries, make_employee, make_leave):
        leaves = await _seed(make_employee, make_leave, 3)

        page = await queries.list_leaves(limit=10)

        assert [leave.id for leave in page.items] == [l.id for l in reversed(leaves)]

    @pytest.mark.parametrize("raw_page,raw_limit", [("0", "-3"), ("abc", ""), (None, None), (-1, 0)])
    async def test_invalid_values_fall_back(self, queries, raw_page, raw_limit):
        page = await queries.list_leaves(page=raw_page, limit=raw_limit)

        assert page.page == 1
        assert page.limit == 9

    async def test_large_limit_is_kept(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 3)

        page = await queries.list_leaves(limit="5000")

        assert page.limit == 5000
        assert page.total_pages == 1
        assert len(page.items) == 3

    @pytest.mark.parametrize(
        "raw_page,raw_limit",
        [("99999999999999999999", None), ("9223372036854775807", "9"), ("2", str(2**70))],
    )
    async def test_offsets_beyond_sql_integers(
        self, queries, make_employee, make_leave, raw_page, raw_limit
    ):
        await _seed(make_employee, make_leave, 2)

        page = await queries.list_leaves(page=raw_page, limit=raw_limit)

        assert page.items == []
        assert page.total == 2

    async def test_huge_limit_on_first_page(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 2)

        page = await queries.list_leaves(limit=str(2**70))

        assert len(page.items) == 2
        assert page.total_pages == 1

    async def test_empty(self, queries):
        page = await queries.list_leaves()

        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    async def test_page_past_the_end(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 2)

        page = await queries.list_leaves(page=5)

        assert page.items == []
        assert page.total == 2


class TestStatusFilter:
    """Optional status filtering."""

    async def test_filters_by_status(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 2, LeaveStatus.PENDING)
        await _seed(make_employee, make_leave, 3, LeaveStatus.APPROVED)

        page = await queries.list_leaves(status_filter="Approved")

        assert page.total == 3
        assert all(leave.status == "Approved" for leave in page.items)

    async def test_unknown_status_is_ignored(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 2, LeaveStatus.PENDING)
        await _seed(make_employee, make_leave, 3, LeaveStatus.REJECTED)

        page = await queries.list_leaves(status_filter="Cancelled")

        assert page.total == 5

    async def test_list_pending(self, queries, make_employee, make_leave):
        await _seed(make_employee, make_leave, 2, LeaveStatus.PENDING)
        await _seed(make_employee, make_leave, 3, LeaveStatus.REJECTED)

        page = await queries.list_pending()

        assert page.total == 2
        assert all(leave.status == "Pending" for leave in page.items)
