"""Rejection taxonomy for leave and employee operations.

Every rejection is a caller-correctable condition. Services raise these and
the HTTP layer translates them once, using `status_code` and `code`.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID


class LeaveError(Exception):
    """Base class for semantic rejections."""

    code: str = "LEAVE_ERROR"
    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFieldError(LeaveError):
    """Raised when a required input is absent or empty."""

    code = "MISSING_FIELD"

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(
            f"All fields (employeeId, startDate, endDate, reason) are required; "
            f"missing: {', '.join(fields)}"
        )


class InvalidReasonError(LeaveError):
    """Raised when the reason text exceeds the allowed length."""

    code = "INVALID_REASON"

    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"Reason cannot exceed {max_length} characters.")


class InvalidRangeError(LeaveError):
    code = "INVALID_RANGE"

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__("Start date cannot be after end date.")


class PastDateError(LeaveError):
    code = "PAST_DATE"

    def __init__(self, start_date: date, today: date):
        self.start_date = start_date
        self.today = today
        super().__init__("Cannot apply for leave in the past.")


class EmployeeNotFoundError(LeaveError):
    code = "EMPLOYEE_NOT_FOUND"
    status_code = 404

    def __init__(self, employee_id: UUID | str):
        self.employee_id = employee_id
        super().__init__("Employee not found.")


class BeforeJoiningError(LeaveError):
    code = "BEFORE_JOINING"

    def __init__(self, start_date: date, joining_date: date):
        self.start_date = start_date
        self.joining_date = joining_date
        super().__init__("Cannot apply for leave before the employee's joining date.")


class OverlapConflictError(LeaveError):
    code = "OVERLAP_CONFLICT"
    status_code = 409

    def __init__(self, existing_leave_id: UUID | None = None):
        self.existing_leave_id = existing_leave_id
        super().__init__("This leave request overlaps with an existing leave.")


class InsufficientBalanceError(LeaveError):
    code = "INSUFFICIENT_BALANCE"

    def __init__(self, available: int, required: int, approving: bool = False):
        self.available = available
        self.required = required
        prefix = "Cannot approve. Employee has insufficient" if approving else "Insufficient"
        super().__init__(
            f"{prefix} leave balance. Available: {available}, Required: {required}"
        )


class InvalidStatusError(LeaveError):
    code = "INVALID_STATUS"

    def __init__(self, status: object):
        self.status = status
        super().__init__("Status is required and must be 'Approved' or 'Rejected'.")


class LeaveNotFoundError(LeaveError):
    code = "LEAVE_NOT_FOUND"
    status_code = 404

    def __init__(self, leave_id: UUID | str):
        self.leave_id = leave_id
        super().__init__("Leave request not found")


class AlreadyProcessedError(LeaveError):
    """Raised when a leave request has already reached a terminal status."""

    code = "ALREADY_PROCESSED"

    def __init__(self, current_status: str):
        self.current_status = current_status
        super().__init__(f"This leave request has already been {current_status}.")


class DuplicateEmailError(LeaveError):
    code = "DUPLICATE_EMAIL"
    status_code = 409

    def __init__(self, email: str):
        self.email = email
        super().__init__("Already employee exists on given email")


class InvalidDepartmentError(LeaveError):
    code = "INVALID_DEPARTMENT"

    def __init__(self, department: object, allowed: list[str]):
        self.department = department
        self.allowed = allowed
        super().__init__(f"Department must be one of: {', '.join(allowed)}")


class InvalidLeaveAllowanceError(LeaveError):
    code = "INVALID_LEAVE_ALLOWANCE"

    def __init__(self, value: object):
        self.value = value
        super().__init__("Leave availability must be a non-negative whole number of days.")


class ConcurrentModificationError(LeaveError):
    """Raised when optimistic retries are exhausted under contention."""

    code = "CONCURRENT_MODIFICATION"
    status_code = 409

    def __init__(self, entity: str, attempts: int):
        self.entity = entity
        self.attempts = attempts
        super().__init__(
            f"Concurrent modification of {entity}; gave up after {attempts} attempts."
        )
