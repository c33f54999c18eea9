"""Repositories for the employee directory and the leave ledger."""

from leave_engine.repositories.employee_directory import EmployeeDirectory
from leave_engine.repositories.leave_ledger import LeaveLedger

__all__ = ["EmployeeDirectory", "LeaveLedger"]
