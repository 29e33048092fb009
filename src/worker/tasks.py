"""Celery tasks for single-document analysis and bulk audits."""

from typing import Any

from celery.exceptions import SoftTimeLimitExceeded
from celery.utils.log import get_task_logger
from pydantic import ValidationError

from analysis.runner import AnalysisRunner, DocumentPayload
from worker.celery_app import celery_app

logger = get_task_logger(__name__)


@celery_app.task(bind=True, name="worker.tasks.analyze_document")
def analyze_document(self, payload: dict, checks: dict[str, bool] | None = None) -> dict:
    """
    Analyze and score one document.

    Args:
        payload: DocumentPayload fields
        checks: Optional per-request check toggles
    """
    logger.info(f"Analyzing document {payload.get('document_id')}")
    return AnalysisRunner().run(payload, overrides=checks)


@celery_app.task(bind=True, name="worker.tasks.run_bulk_audit")
def run_bulk_audit(self, documents: list[dict]) -> dict:
    """
    Analyze a batch of documents and summarise each one in a row.

    A document that fails validation or analysis becomes an error row; the
    rest of the batch still runs.

    Args:
        documents: DocumentPayload dicts

    Returns:
        Dict with the document count, one row per document and batch totals
    """
    logger.info(f"Starting bulk audit of {len(documents)} documents")

    runner = AnalysisRunner()
    rows = []

    try:
        for index, document in enumerate(documents):
            rows.append(_audit_row(runner, document))

            # Only report progress when running under a worker
            if self.request.id:
                self.update_state(
                    state="PROGRESS",
                    meta={"done": index + 1, "total": len(documents)},
                )
    except SoftTimeLimitExceeded:
        logger.warning(
            f"Bulk audit hit its time limit after {len(rows)} of {len(documents)} documents"
        )
        rows.extend(
            _error_row(_document_id(document), "Audit time limit reached")
            for document in documents[len(rows):]
        )

    summary = _summarize(rows)
    logger.info(
        f"Bulk audit finished: {summary['audited']} audited, {summary['error']} errors, "
        f"average score {summary['average_score']}"
    )

    return {"total": len(rows), "rows": rows, "summary": summary}


def _audit_row(runner: AnalysisRunner, document: Any) -> dict:
    """Analyze one document into a bulk audit row."""
    document_id = _document_id(document)

    try:
        payload = DocumentPayload.model_validate(document)
        result = runner.run(payload)
    except SoftTimeLimitExceeded:
        raise
    except ValidationError as e:
        logger.warning(f"Skipping invalid document {document_id}: {e.error_count()} validation errors")
        return _error_row(document_id, f"Invalid document: {e.errors()[0]['msg']}")
    except Exception as e:
        logger.exception(f"Audit of document {document_id} failed: {e}")
        return _error_row(document_id, str(e))

    summary = result["summary"]
    return {
        "document_id": result["document_id"],
        "status": result["status"],
        "score": result["score"]["score"],
        "pass": summary["pass"],
        "warn": summary["warn"],
        "fail": summary["fail"],
    }


def _document_id(document: Any) -> int | None:
    document_id = document.get("document_id") if isinstance(document, dict) else None
    if not isinstance(document_id, int) or isinstance(document_id, bool):
        return None
    return document_id


def _error_row(document_id: int | None, error: str) -> dict:
    return {
        "document_id": document_id,
        "status": "error",
        "score": None,
        "pass": 0,
        "warn": 0,
        "fail": 0,
        "error": error,
    }


def _summarize(rows: list[dict]) -> dict:
    counts = {"pass": 0, "warn": 0, "fail": 0, "error": 0}
    for row in rows:
        counts[row["status"]] += 1

    scores = [row["score"] for row in rows if row["score"] is not None]
    average = round(sum(scores) / len(scores)) if scores else None

    return {**counts, "audited": len(scores), "average_score": average}
