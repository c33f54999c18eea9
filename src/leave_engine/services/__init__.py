"""Leave engine services."""

from leave_engine.services.employee_service import EmployeeService
from leave_engine.services.errors import LeaveError
from leave_engine.services.lifecycle import LeaveLifecycleEngine
from leave_engine.services.query_service import LeavePage, LeaveQueryService
from leave_engine.services.state_machine import LeaveStateMachine
from leave_engine.services.validator import SubmissionAccepted, validate_submission

__all__ = [
    "EmployeeService",
    "LeaveError",
    "LeaveLifecycleEngine",
    "LeavePage",
    "LeaveQueryService",
    "LeaveStateMachine",
    "SubmissionAccepted",
    "validate_submission",
]
