"""Leave lifecycle engine - submission and approval/rejection of leave requests.

The only component allowed to mutate leave or balance state. Each operation
runs in one transaction on the engine's session:

- submit: validate, claim the employee row, insert a Pending request
- transition: check the decision, then for approvals deduct the balance with a
  version-guarded update, then move the request out of Pending with a
  status-guarded update

A guarded write that matches no row means another writer changed the employee
or the request after it was read. The transaction is rolled back and the whole
operation restarts from fresh reads, so a lost race surfaces as the ordinary
rejection (overlap, already processed, insufficient balance).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from leave_engine.config import get_settings
from leave_engine.models import LeaveRequest, LeaveStatus
from leave_engine.repositories import EmployeeDirectory, LeaveLedger
from leave_engine.services.errors import (
    ConcurrentModificationError,
    EmployeeNotFoundError,
    LeaveNotFoundError,
)
from leave_engine.services.state_machine import LeaveStateMachine
from leave_engine.services.validator import (
    check_balance,
    leave_duration,
    parse_id,
    validate_submission,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConcurrencyConflict(Exception):
    """A guarded write matched no row; the operation must restart."""


class LeaveLifecycleEngine:
    """Orchestrates leave submission and status transitions.

    Args:
        session: Session the engine owns for the duration of each operation;
            the engine commits on success and rolls back on any failure.
        clock: Returns today's date. Injected so rules can be tested at a
            fixed date.
        max_retries: Extra attempts after an optimistic conflict. Defaults to
            Settings.max_conflict_retries.
    """

    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], date] = date.today,
        max_retries: int | None = None,
    ):
        self.session = session
        self.directory = EmployeeDirectory(session)
        self.ledger = LeaveLedger(session)
        self.clock = clock
        if max_retries is None:
            max_retries = get_settings().max_conflict_retries
        self.max_retries = max(0, max_retries)

    async def submit(
        self,
        employee_id: UUID | str | None,
        start_date: date | None,
        end_date: date | None,
        reason: str | None,
    ) -> LeaveRequest:
        """Validate and persist a new Pending leave request.

        The balance is not touched; it is only deducted on approval.
        """

        async def attempt() -> LeaveRequest:
            return await self._submit_once(employee_id, start_date, end_date, reason)

        leave = await self._run_with_retry("employee", attempt)
        logger.info(
            "Leave %s submitted for employee %s (%s..%s, %d days)",
            leave.id,
            leave.employee_id,
            leave.start_date,
            leave.end_date,
            leave.duration_days,
        )
        return leave

    async def transition(self, leave_id: UUID | str, new_status: object) -> LeaveRequest:
        """Approve or reject a Pending leave request.

        Raises:
            InvalidStatusError: target is not Approved or Rejected
            LeaveNotFoundError: no such request
            AlreadyProcessedError: request is already Approved or Rejected
            EmployeeNotFoundError: owning employee vanished (approval only)
            InsufficientBalanceError: balance no longer covers it (approval only)
        """
        target = LeaveStateMachine.parse_decision(new_status)
        parsed_id = parse_id(leave_id)
        if parsed_id is None:
            raise LeaveNotFoundError(leave_id)

        async def attempt() -> LeaveRequest:
            return await self._transition_once(parsed_id, target)

        leave = await self._run_with_retry("leave request", attempt)
        logger.info("Leave %s moved to %s", leave.id, leave.status)
        return leave

    async def _submit_once(
        self,
        employee_id: UUID | str | None,
        start_date: date | None,
        end_date: date | None,
        reason: str | None,
    ) -> LeaveRequest:
        accepted = await validate_submission(
            self.directory,
            self.ledger,
            employee_id,
            start_date,
            end_date,
            reason,
            today=self.clock(),
        )

        # Serializes submissions per employee: a concurrent submit that read
        # the same version loses here and re-runs its overlap check.
        claimed = await self.directory.bump_version(
            accepted.employee_id, accepted.employee.version
        )
        if not claimed:
            raise ConcurrencyConflict(f"employee {accepted.employee_id} changed")

        return await self.ledger.insert(
            LeaveRequest(
                employee_id=accepted.employee_id,
                start_date=accepted.start_date,
                end_date=accepted.end_date,
                reason=accepted.reason,
                status=LeaveStatus.PENDING.value,
            )
        )

    async def _transition_once(self, leave_id: UUID, target: LeaveStatus) -> LeaveRequest:
        leave = await self.ledger.find_by_id(leave_id)
        if leave is None:
            raise LeaveNotFoundError(leave_id)

        LeaveStateMachine.validate_transition(leave.status, target)

        if target == LeaveStatus.APPROVED:
            employee = await self.directory.find_by_id(leave.employee_id)
            if employee is None:
                raise EmployeeNotFoundError(leave.employee_id)

            duration = leave_duration(leave.start_date, leave.end_date)
            check_balance(employee, duration, approving=True)

            deducted = await self.directory.deduct_balance(
                employee.id, duration, employee.version
            )
            if not deducted:
                raise ConcurrencyConflict(f"employee {employee.id} changed")

        moved = await self.ledger.set_status(leave.id, target, LeaveStatus.PENDING)
        if not moved:
            raise ConcurrencyConflict(f"leave request {leave.id} changed")

        refreshed = await self.ledger.find_by_id(leave.id)
        if refreshed is None:
            raise LeaveNotFoundError(leave.id)
        return refreshed

    async def _run_with_retry(
        self,
        entity: str,
        operation: Callable[[], Awaitable[T]],
    ) -> T:
        """Run `operation` in a transaction, restarting it on optimistic conflicts."""
        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                result = await operation()
                await self.session.commit()
                return result
            except ConcurrencyConflict as e:
                await self.session.rollback()
                logger.warning(
                    "Optimistic conflict on attempt %d/%d: %s", attempt, attempts, e
                )
            except Exception:
                await self.session.rollback()
                raise

        raise ConcurrentModificationError(entity, attempts)
