"""Closed enumerations shared by models, services and schemas."""

from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Leave request status values."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Department(str, Enum):
    """Departments an employee can belong to."""

    ENGINEERING = "Engineering"
    HR = "HR"
    FINANCE = "Finance"
    MARKETING = "Marketing"
    SALES = "Sales"
    OPERATIONS = "Operations"
    SUPPORT = "Support"
