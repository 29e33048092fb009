"""Builds a Context from a request payload and runs analysis plus scoring."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from analysis.analyzer import Analyzer
from analysis.base import CheckInterface
from analysis.checks import default_checks
from analysis.context import Context
from analysis.registry import CheckHook
from config import Settings, settings as default_settings
from scoring import ScoreEngine

logger = logging.getLogger(__name__)


class DocumentPayload(BaseModel):
    """One document to analyze, with the metadata its editor resolved."""

    document_id: int | None = Field(default=None, description="Caller's id for the document")
    html: str = Field(default="", description="Rendered HTML of the document")
    title: str = Field(default="", description="SEO title; falls back to <title>")
    meta_description: str = Field(
        default="", description='Meta description; falls back to <meta name="description">'
    )
    canonical: str | None = Field(default=None, description='Falls back to <link rel="canonical">')
    robots: str | None = Field(default=None, description='Falls back to <meta name="robots">')
    focus_keyword: str = ""
    secondary_keywords: list[str] = []
    site_url: str | None = Field(
        default=None,
        description="Site home URL used to recognise internal links",
        examples=["https://example.com/"],
    )


class AnalysisRunner:
    """
    Runs one document through the analyzer and the score engine.

    Check toggles, worker count, timeout, site URL and scoring weights come
    from Settings; per-request toggles override the configured ones.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        checks: list[CheckInterface] | None = None,
        hook: CheckHook | None = None,
    ):
        self.settings = settings or default_settings
        self.checks = (
            checks
            if checks is not None
            else default_checks(enable_advanced=self.settings.enable_advanced_checks)
        )
        self.hook = hook
        self.score_engine = ScoreEngine(self.settings.scoring_weights)

    def build_context(self, payload: DocumentPayload) -> Context:
        return Context(
            document_id=payload.document_id,
            html=payload.html,
            title=payload.title,
            meta_description=payload.meta_description,
            canonical=payload.canonical,
            robots=payload.robots,
            focus_keyword=payload.focus_keyword,
            secondary_keywords=payload.secondary_keywords,
            site_url=payload.site_url or self.settings.site_url,
        )

    def check_config(self, overrides: Mapping[str, bool] | None = None) -> dict[str, bool]:
        """Configured check toggles with per-request overrides applied."""
        config = dict(self.settings.analysis_checks)
        config.update(overrides or {})
        return config

    def build_analyzer(self, overrides: Mapping[str, bool] | None = None) -> Analyzer:
        return Analyzer(
            checks=self.checks,
            config=self.check_config(overrides),
            hook=self.hook,
            max_workers=self.settings.analysis_workers,
            check_timeout=self.settings.check_timeout_seconds,
        )

    def run(
        self,
        payload: DocumentPayload | Mapping[str, Any],
        overrides: Mapping[str, bool] | None = None,
    ) -> dict:
        """
        Analyze and score one document.

        Args:
            payload: Document fields, validated into a DocumentPayload
            overrides: Per-request check toggles keyed by check id

        Returns:
            Dict with document_id, status, summary, checks and score

        Raises:
            pydantic.ValidationError: If a mapping payload is malformed
        """
        if not isinstance(payload, DocumentPayload):
            payload = DocumentPayload.model_validate(payload)

        context = self.build_context(payload)
        analysis = self.build_analyzer(overrides).analyze(context)
        score = self.score_engine.calculate(analysis["checks"])

        logger.debug(f"Document {payload.document_id} scored {score['score']} ({score['status']})")

        return {
            "document_id": payload.document_id,
            "status": analysis["status"],
            "summary": analysis["summary"],
            "checks": analysis["checks"],
            "score": score,
        }

    def catalogue(self) -> list[dict]:
        """Every built-in check with its weight and whether it runs by default."""
        basic_ids = {check.id for check in default_checks(enable_advanced=False)}
        config = self.check_config()

        entries = []
        for check in default_checks(enable_advanced=True):
            enabled = bool(config.get(check.id, True))
            if check.id not in basic_ids and not self.settings.enable_advanced_checks:
                enabled = False
            entries.append(
                {
                    "id": check.id,
                    "label": check.label,
                    "description": check.description,
                    "weight": check.weight,
                    "enabled": enabled,
                }
            )
        return entries
