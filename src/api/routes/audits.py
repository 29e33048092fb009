"""Bulk audit endpoints."""

from celery.result import AsyncResult
from fastapi import APIRouter, status

from api.schemas import (
    AuditQueuedResponse,
    AuditResultResponse,
    AuditStatusResponse,
    BulkAuditRequest,
)
from worker.celery_app import celery_app
from worker.tasks import run_bulk_audit

router = APIRouter(prefix="/audits", tags=["Audits"])


@router.post(
    "",
    response_model=AuditQueuedResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Queue a bulk audit",
    description="Queue an audit of several documents. Returns immediately with the task ID.",
)
async def create_audit(request: BulkAuditRequest) -> AuditQueuedResponse:
    """
    Queue a bulk audit.

    Poll GET /audits/{task_id} for the rows.
    """
    task = run_bulk_audit.delay(request.documents)

    return AuditQueuedResponse(task_id=task.id, total=len(request.documents))


@router.get(
    "/{task_id}",
    response_model=AuditStatusResponse,
    summary="Get bulk audit status",
    description="Get the state of a bulk audit and, once finished, its rows.",
)
async def get_audit(task_id: str) -> AuditStatusResponse:
    """Get a bulk audit by task ID. Unknown IDs report as PENDING."""
    task = AsyncResult(task_id, app=celery_app)

    if not task.ready():
        return AuditStatusResponse(task_id=task_id, state=task.state, ready=False)

    if task.failed():
        return AuditStatusResponse(
            task_id=task_id,
            state=task.state,
            ready=True,
            error=str(task.result),
        )

    return AuditStatusResponse(
        task_id=task_id,
        state=task.state,
        ready=True,
        result=AuditResultResponse.model_validate(task.result),
    )
