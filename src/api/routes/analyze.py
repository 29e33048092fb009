"""Single-document analysis endpoint."""

import logging

from fastapi import APIRouter

from analysis.runner import AnalysisRunner, DocumentPayload
from api.schemas import AnalyzeRequest, AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["Analysis"])


@router.post(
    "",
    response_model=AnalyzeResponse,
    summary="Analyze a document",
    description="Run the enabled checks against one document and return the verdicts and score.",
)
def analyze_document(request: AnalyzeRequest) -> dict:
    """
    Analyze one document synchronously.

    Parsing and the checks are CPU-bound, so this is a plain function and
    FastAPI runs it in its threadpool.
    """
    payload = DocumentPayload.model_validate(request.model_dump(exclude={"checks"}))
    return AnalysisRunner().run(payload, overrides=request.checks)
