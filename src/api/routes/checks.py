"""Check catalogue endpoint."""

from fastapi import APIRouter

from analysis.runner import AnalysisRunner
from api.schemas import CheckInfoResponse, CheckListResponse

router = APIRouter(prefix="/checks", tags=["Checks"])


@router.get(
    "",
    response_model=CheckListResponse,
    summary="List checks",
    description="List every built-in check with its weight and whether it is enabled.",
)
async def list_checks() -> CheckListResponse:
    """List the check catalogue."""
    checks = [CheckInfoResponse(**entry) for entry in AnalysisRunner().catalogue()]
    return CheckListResponse(checks=checks, count=len(checks))
