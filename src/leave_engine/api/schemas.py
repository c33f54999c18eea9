"""Pydantic schemas for API request/response models.

Field names are exposed in camelCase (`employeeId`, `startDate`) and accepted
in either camelCase or snake_case.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeCreate(ApiModel):
    """Schema for creating an employee."""

    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(min_length=3, max_length=30, pattern=r"^[A-Za-z\s]+$")
    email: EmailStr
    department: str = Field(min_length=1)
    joining_date: date
    leave_availability: int | None = None

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str) -> str:
        if not 5 <= len(value) <= 254:
            raise ValueError("Email must be between 5 and 254 characters long")
        return value.lower()


class EmployeeResponse(ApiModel):
    """Schema for employee response."""

    id: UUID
    full_name: str
    email: str
    department: str
    joining_date: date
    leave_availability: int
    created_at: datetime
    updated_at: datetime


class EmployeeBrief(ApiModel):
    """Employee fields embedded in leave listings."""

    id: UUID
    full_name: str
    email: str


# ============================================================================
# Leave schemas
# ============================================================================


class LeaveApply(ApiModel):
    """Schema for applying for leave.

    Fields are optional here so a missing one is reported as MISSING_FIELD by
    the validator rather than as a schema error.
    """

    employee_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = None


class LeaveStatusUpdate(ApiModel):
    """Schema for approving or rejecting a leave request."""

    status: str | None = None


class LeaveResponse(ApiModel):
    """Schema for leave request response."""

    id: UUID
    employee_id: UUID
    start_date: date
    end_date: date
    reason: str
    status: str
    duration_days: int
    created_at: datetime
    updated_at: datetime


class LeaveListItem(LeaveResponse):
    """Leave request with its employee, as returned by listings."""

    employee: EmployeeBrief | None = None


class PaginationMeta(ApiModel):
    total_documents: int
    total_pages: int
    current_page: int
    limit: int


class LeaveListResponse(ApiModel):
    """Schema for listing leave requests."""

    items: list[LeaveListItem]
    pagination: PaginationMeta


# ============================================================================
# Errors
# ============================================================================


class ErrorResponse(BaseModel):
    """Error response body."""

    detail: str
    code: str
