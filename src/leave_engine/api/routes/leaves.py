"""Leave request API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from leave_engine.api.dependencies import LifecycleEngine, Queries
from leave_engine.api.schemas import (
    ErrorResponse,
    LeaveApply,
    LeaveListItem,
    LeaveListResponse,
    LeaveResponse,
    LeaveStatusUpdate,
    PaginationMeta,
)
from leave_engine.services import LeavePage

router = APIRouter(prefix="/leaves", tags=["leaves"])


def _to_list_response(page: LeavePage) -> LeaveListResponse:
    return LeaveListResponse(
        items=[LeaveListItem.model_validate(leave) for leave in page.items],
        pagination=PaginationMeta(
            total_documents=page.total,
            total_pages=page.total_pages,
            current_page=page.page,
            limit=page.limit,
        ),
    )


@router.post(
    "/apply-leave",
    response_model=LeaveResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def apply_for_leave(
    engine: LifecycleEngine,
    payload: LeaveApply,
) -> LeaveResponse:
    """Submit a leave request. It starts Pending; no balance is deducted yet."""
    leave = await engine.submit(
        employee_id=payload.employee_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
    )
    return LeaveResponse.model_validate(leave)


@router.get("", response_model=LeaveListResponse)
async def list_leaves(
    queries: Queries,
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> LeaveListResponse:
    """List all leave requests, newest first, optionally filtered by status."""
    result = await queries.list_leaves(page, limit, status_filter)
    return _to_list_response(result)


@router.get("/pending", response_model=LeaveListResponse)
async def list_pending_leaves(
    queries: Queries,
    page: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
) -> LeaveListResponse:
    """List leave requests awaiting a decision (HR approval queue)."""
    result = await queries.list_pending(page, limit)
    return _to_list_response(result)


@router.patch(
    "/{leave_id}",
    response_model=LeaveResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_leave_status(
    engine: LifecycleEngine,
    leave_id: Annotated[str, Path()],
    payload: LeaveStatusUpdate,
) -> LeaveResponse:
    """Approve or reject a pending leave request."""
    leave = await engine.transition(leave_id, payload.status)
    return LeaveResponse.model_validate(leave)
