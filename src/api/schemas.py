"""Pydantic schemas for API request/response validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from analysis.runner import DocumentPayload
from config import settings


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalyzeRequest(DocumentPayload):
    """Request body for analyzing a single document."""

    checks: dict[str, bool] | None = Field(
        default=None,
        description="Per-request check toggles keyed by check id",
        examples=[{"og_cards": False, "twitter_cards": False}],
    )


class BulkAuditRequest(BaseModel):
    """Request body for queueing a bulk audit."""

    documents: list[dict[str, Any]] = Field(
        ...,
        min_length=1,
        max_length=settings.bulk_audit_max_documents,
        description="Document payloads; malformed ones are reported per row",
    )


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class CheckResultResponse(BaseModel):
    """Outcome of a single check."""

    id: str
    label: str
    description: str
    status: str
    details: dict[str, Any]
    message: str
    fix_hint: str
    weight: float


class SummaryResponse(BaseModel):
    """Status counts over the executed checks."""

    model_config = ConfigDict(populate_by_name=True)

    pass_: int = Field(alias="pass")
    warn: int
    fail: int
    total: int
    faulted: int = 0


class ScoreResponse(BaseModel):
    """Composite score derived from the check weights."""

    score: int
    status: str
    recommendations: list[str]
    breakdown: dict[str, dict[str, Any]]
    weight_total: float
    weighted_achieved: float


class AnalyzeResponse(BaseModel):
    """Full analysis of one document."""

    document_id: int | None
    status: str
    summary: SummaryResponse
    checks: dict[str, CheckResultResponse]
    score: ScoreResponse


class CheckInfoResponse(BaseModel):
    """One entry of the check catalogue."""

    id: str
    label: str
    description: str
    weight: float
    enabled: bool


class CheckListResponse(BaseModel):
    """Response for listing the check catalogue."""

    checks: list[CheckInfoResponse]
    count: int


class AuditQueuedResponse(BaseModel):
    """Response when a bulk audit is successfully queued."""

    task_id: str
    total: int
    status: str = "queued"
    message: str = "Bulk audit queued successfully"


class AuditRowResponse(BaseModel):
    """Summary of one audited document."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: int | None
    status: str
    score: int | None
    pass_: int = Field(default=0, alias="pass")
    warn: int = 0
    fail: int = 0
    error: str | None = None


class AuditResultResponse(BaseModel):
    """Finished bulk audit."""

    total: int
    rows: list[AuditRowResponse]
    summary: dict[str, Any]


class AuditStatusResponse(BaseModel):
    """State of a queued bulk audit."""

    task_id: str
    state: str
    ready: bool
    result: AuditResultResponse | None = None
    error: str | None = None


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str = "lumen"
    version: str = "0.1.0"
