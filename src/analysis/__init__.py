"""Lumen content analysis engine."""

from analysis.analyzer import Analyzer
from analysis.base import CheckInterface
from analysis.checks import default_checks
from analysis.context import Context, Heading
from analysis.intent import Intent, IntentDetection, SearchIntentDetector
from analysis.registry import CheckRegistry
from analysis.result import Result, Status

__all__ = [
    "Analyzer",
    "CheckInterface",
    "CheckRegistry",
    "Context",
    "Heading",
    "Intent",
    "IntentDetection",
    "Result",
    "SearchIntentDetector",
    "Status",
    "default_checks",
]
