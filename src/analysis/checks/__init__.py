"""Built-in check catalogue."""

from analysis.base import CheckInterface
from analysis.checks.content import AiOptimizedContentCheck, InternalLinksCheck, SearchIntentCheck
from analysis.checks.headings import H1PresenceCheck, HeadingsStructureCheck
from analysis.checks.media import ImageAltCheck
from analysis.checks.metadata import (
    CanonicalCheck,
    MetaDescriptionCheck,
    RobotsIndexabilityCheck,
    TitleLengthCheck,
)
from analysis.checks.schema import FaqSchemaCheck, HowToSchemaCheck, SchemaPresetsCheck
from analysis.checks.social import OgCardsCheck, TwitterCardsCheck


def default_checks(enable_advanced: bool = True) -> list[CheckInterface]:
    """
    Return the built-in checks in catalogue order.

    Args:
        enable_advanced: Include the structured-data and content checks,
            which read the whole body, after the metadata checks

    Returns:
        Fresh check instances
    """
    checks: list[CheckInterface] = [
        TitleLengthCheck(),
        MetaDescriptionCheck(),
        H1PresenceCheck(),
        HeadingsStructureCheck(),
        ImageAltCheck(),
        CanonicalCheck(),
        RobotsIndexabilityCheck(),
        OgCardsCheck(),
        TwitterCardsCheck(),
    ]

    if enable_advanced:
        checks += [
            SchemaPresetsCheck(),
            InternalLinksCheck(),
            FaqSchemaCheck(),
            HowToSchemaCheck(),
            AiOptimizedContentCheck(),
            SearchIntentCheck(),
        ]

    return checks


__all__ = [
    "default_checks",
    "AiOptimizedContentCheck",
    "CanonicalCheck",
    "FaqSchemaCheck",
    "H1PresenceCheck",
    "HeadingsStructureCheck",
    "HowToSchemaCheck",
    "ImageAltCheck",
    "InternalLinksCheck",
    "MetaDescriptionCheck",
    "OgCardsCheck",
    "RobotsIndexabilityCheck",
    "SchemaPresetsCheck",
    "SearchIntentCheck",
    "TitleLengthCheck",
    "TwitterCardsCheck",
]
