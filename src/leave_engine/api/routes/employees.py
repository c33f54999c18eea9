"""Employee API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from leave_engine.api.dependencies import Employees
from leave_engine.api.schemas import EmployeeCreate, EmployeeResponse, ErrorResponse

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post(
    "/create",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_employee(
    employees: Employees,
    payload: EmployeeCreate,
) -> EmployeeResponse:
    """Create a new employee with the default or given leave balance."""
    employee = await employees.create_employee(
        full_name=payload.full_name,
        email=payload.email,
        department=payload.department,
        joining_date=payload.joining_date,
        leave_availability=payload.leave_availability,
    )
    return EmployeeResponse.model_validate(employee)


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(
    employees: Employees,
    employee_id: Annotated[str, Path()],
) -> EmployeeResponse:
    """Get an employee, including the remaining leave balance."""
    employee = await employees.get_employee(employee_id)
    return EmployeeResponse.model_validate(employee)
