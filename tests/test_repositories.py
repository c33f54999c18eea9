"""Tests for the employee directory and leave ledger repositories."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

from leave_engine.models import Employee, LeaveStatus
from leave_engine.repositories import EmployeeDirectory, LeaveLedger


class TestEmployeeDirectory:
    """Lookups and guarded writes on employees."""

    async def test_insert_assigns_defaults(self, session):
        directory = EmployeeDirectory(session)

        employee = await directory.insert(
            Employee(
                full_name="Grace Hopper",
                email="grace@example.com",
                department="Engineering",
                joining_date=date(2024, 3, 1),
            )
        )
        await session.commit()

        assert employee.id is not None
        assert employee.leave_availability == 40
        assert employee.version == 1

    async def test_find_by_email_is_case_insensitive(self, session, make_employee):
        employee = await make_employee(email="grace@example.com")

        found = await EmployeeDirectory(session).find_by_email("  Grace@Example.COM ")

        assert found is not None
        assert found.id == employee.id

    async def test_find_by_id_missing(self, session):
        assert await EmployeeDirectory(session).find_by_id(uuid4()) is None

    async def test_deduct_balance(self, session, make_employee):
        employee = await make_employee(leave_availability=10)
        directory = EmployeeDirectory(session)

        assert await directory.deduct_balance(employee.id, 4, expected_version=1) is True
        await session.commit()

        reloaded = await directory.find_by_id(employee.id)
        assert reloaded.leave_availability == 6
        assert reloaded.version == 2

    async def test_deduct_balance_refuses_stale_version(
        self, session, session_factory, make_employee
    ):
        """A write committed elsewhere after our read makes our deduction miss."""
        employee = await make_employee(leave_availability=10)
        directory = EmployeeDirectory(session)
        read = await directory.find_by_id(employee.id)

        async with session_factory() as other:
            assert await EmployeeDirectory(other).bump_version(employee.id, read.version)
            await other.commit()

        assert await directory.deduct_balance(employee.id, 4, read.version) is False
        await session.commit()

        reloaded = await directory.find_by_id(employee.id)
        assert reloaded.leave_availability == 10
        assert reloaded.version == 2

    async def test_deduct_balance_never_goes_negative(self, session, make_employee):
        employee = await make_employee(leave_availability=3)
        directory = EmployeeDirectory(session)

        assert await directory.deduct_balance(employee.id, 4, expected_version=1) is False
        await session.commit()

        reloaded = await directory.find_by_id(employee.id)
        assert reloaded.leave_availability == 3


class TestLeaveLedger:
    """Overlap search, guarded status writes and listing."""

    async def test_find_overlap_filters_statuses(self, session, make_employee, make_leave):
        employee = await make_employee()
        await make_leave(
            employee,
            date(2025, 8, 10),
            date(2025, 8, 12),
            status=LeaveStatus.REJECTED.value,
        )
        ledger = LeaveLedger(session)

        active = [LeaveStatus.PENDING, LeaveStatus.APPROVED]
        assert await ledger.find_overlap(employee.id, date(2025, 8, 11), date(2025, 8, 11), active) is None

        hit = await ledger.find_overlap(
            employee.id, date(2025, 8, 11), date(2025, 8, 11), [LeaveStatus.REJECTED]
        )
        assert hit is not None

    async def test_set_status_guarded_on_expected(self, session, make_employee, make_leave):
        employee = await make_employee()
        leave = await make_leave(employee, date(2025, 8, 10), date(2025, 8, 12))
        ledger = LeaveLedger(session)

        assert await ledger.set_status(leave.id, LeaveStatus.REJECTED, LeaveStatus.PENDING) is True
        assert await ledger.set_status(leave.id, LeaveStatus.APPROVED, LeaveStatus.PENDING) is False
        await session.commit()

        reloaded = await ledger.find_by_id(leave.id)
        assert reloaded.status == LeaveStatus.REJECTED.value

    async def test_query_newest_first_with_employee(self, session, make_employee, make_leave):
        employee = await make_employee(full_name="Ada Lovelace")
        base = datetime(2025, 7, 1, tzinfo=timezone.utc)
        older = await make_leave(
            employee, date(2025, 8, 1), date(2025, 8, 2), created_at=base
        )
        newer = await make_leave(
            employee, date(2025, 8, 5), date(2025, 8, 6), created_at=base + timedelta(hours=1)
        )
        ledger = LeaveLedger(session)

        items = await ledger.query(None, skip=0, limit=10)

        assert [leave.id for leave in items] == [newer.id, older.id]
        assert items[0].employee.full_name == "Ada Lovelace"
        assert await ledger.count(None) == 2
        assert await ledger.count(LeaveStatus.APPROVED) == 0
