"""Leave request state machine with transition validation."""

from __future__ import annotations

from leave_engine.models.enums import LeaveStatus
from leave_engine.services.errors import AlreadyProcessedError, InvalidStatusError


class LeaveStateMachine:
    """State machine for leave request status transitions.

    Allowed transitions:
    - Pending → Approved
    - Pending → Rejected

    Approved and Rejected are terminal.
    """

    # Define valid transitions: {from_status: [allowed_to_statuses]}
    VALID_TRANSITIONS: dict[LeaveStatus, list[LeaveStatus]] = {
        LeaveStatus.PENDING: [LeaveStatus.APPROVED, LeaveStatus.REJECTED],
        LeaveStatus.APPROVED: [],  # Terminal state
        LeaveStatus.REJECTED: [],  # Terminal state
    }

    # Statuses that reserve calendar days for overlap detection
    ACTIVE = frozenset({LeaveStatus.PENDING, LeaveStatus.APPROVED})

    # Statuses a decision may target
    DECISIONS = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED})

    @classmethod
    def parse_decision(cls, value: object) -> LeaveStatus:
        """Coerce a requested target status, raising InvalidStatusError if not a decision."""
        if isinstance(value, LeaveStatus):
            status = value
        else:
            try:
                status = LeaveStatus(value)
            except ValueError:
                raise InvalidStatusError(value) from None
        if status not in cls.DECISIONS:
            raise InvalidStatusError(value)
        return status

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        try:
            allowed = cls.VALID_TRANSITIONS[LeaveStatus(from_status)]
        except ValueError:
            return False
        return to_status in allowed

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """Validate a transition.

        A terminal current status raises AlreadyProcessedError whatever the
        target; a non-decision target raises InvalidStatusError.
        """
        target = cls.parse_decision(to_status)
        if cls.is_terminal(from_status):
            raise AlreadyProcessedError(LeaveStatus(from_status).value)
        if not cls.can_transition(from_status, target):
            raise InvalidStatusError(to_status)

    @classmethod
    def is_terminal(cls, status: str) -> bool:
        """Check whether no further transition is permitted from this status."""
        return not cls.VALID_TRANSITIONS[LeaveStatus(status)]

    @classmethod
    def is_active(cls, status: str) -> bool:
        """Check whether a request in this status blocks its calendar days."""
        return LeaveStatus(status) in cls.ACTIVE

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[LeaveStatus]:
        """Get list of valid next statuses from current status."""
        return list(cls.VALID_TRANSITIONS[LeaveStatus(current_status)])
