"""Structured data (schema.org JSON-LD) checks."""

import logging
import re

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.jsonld import JsonLdBlock, collect_entities, collect_types, decode_blocks
from analysis.result import Result, Status

logger = logging.getLogger(__name__)

MIN_ENTRIES = 3


def _decoded_blocks(context: Context) -> tuple[list[JsonLdBlock], int]:
    """Decode every JSON-LD block; return the good ones and the invalid count."""
    blocks = decode_blocks(context.json_ld_blocks())
    valid = [block for block in blocks if block.ok]
    invalid = len(blocks) - len(valid)
    if invalid:
        logger.debug(f"Skipped {invalid} invalid JSON-LD block(s) in document {context.document_id}")
    return valid, invalid


def _lowercase_types(blocks: list[JsonLdBlock]) -> list[str]:
    """Deduplicated lowercase @type values across blocks, first-seen order."""
    seen = {}
    for block in blocks:
        for type_name in collect_types(block.data):
            seen.setdefault(type_name.lower(), None)
    return list(seen)


class SchemaPresetsCheck(CheckInterface):
    """Organization, WebSite and BlogPosting presets in the JSON-LD."""

    EXPECTED = {
        "organization": "Organization",
        "website": "WebSite",
        "blogposting": "BlogPosting",
    }

    weight = 0.12

    @property
    def id(self) -> str:
        return "schema_presets"

    @property
    def label(self) -> str:
        return "Schema presets"

    @property
    def description(self) -> str:
        return (
            "Checks for schema.org Organization, WebSite and BlogPosting markup, "
            "including speakable support for voice assistants."
        )

    def run(self, context: Context) -> Result:
        blocks, invalid = _decoded_blocks(context)
        types = _lowercase_types(blocks)
        has_speakable = any('"speakable"' in block.raw for block in blocks)

        found = [name for key, name in self.EXPECTED.items() if key in types]
        missing = [name for key, name in self.EXPECTED.items() if key not in types]

        details = {
            "found": found,
            "missing": missing,
            "types": types,
            "invalid_blocks": invalid,
            "has_speakable": has_speakable,
        }

        if not found:
            return self.result(
                Status.FAIL,
                details,
                "Add schema.org JSON-LD for Organization, WebSite and BlogPosting.",
            )

        if not missing:
            message = "Schema.org presets detected."
            if has_speakable:
                message += " Speakable markup is included."
            return self.result(Status.PASS, details, message)

        message = f"Add the missing schema types for richer snippets: {', '.join(missing)}."
        if "blogposting" in types and not has_speakable:
            message += " Consider adding speakable markup for voice search."
        return self.result(Status.WARN, details, message)


class _EntitySchemaCheck(CheckInterface):
    """
    A schema type whose quality is measured by its nested entities
    (FAQPage -> Question, HowTo -> HowToStep). When the schema is absent,
    a keyword heuristic over the text decides whether suggesting it makes
    sense.
    """

    container_type: str = ""
    property_name: str = ""
    entity_type: str = ""
    entity_label: str = ""
    indicators: tuple[str, ...] = ()

    suggestion: str = ""

    # details key for the "content looks like it applies" flag
    applicable_key: str = "might_benefit"

    def looks_applicable(self, text: str) -> bool:
        """Whether any indicator occurs in `text` as a whole word or phrase."""
        text = text.lower()
        return any(
            re.search(rf"(?<!\w){re.escape(indicator)}(?!\w)", text) for indicator in self.indicators
        )

    def run(self, context: Context) -> Result:
        blocks, invalid = _decoded_blocks(context)
        types = _lowercase_types(blocks)
        has_schema = self.container_type.lower() in types
        flag = f"has_{self.container_type.lower()}"

        if not has_schema:
            applicable = self.looks_applicable(context.plain_text())
            details = {
                flag: False,
                self.entity_label: 0,
                self.applicable_key: applicable,
                "invalid_blocks": invalid,
            }
            if applicable:
                details["recommendation"] = f"add_{self.container_type.lower()}_schema"
                return self.result(Status.WARN, details, self.suggestion)

            details["note"] = "not_applicable"
            return self.result(
                Status.PASS,
                details,
                f"{self.container_type} schema is not needed for this content.",
            )

        count = 0
        for block in blocks:
            count += len(
                collect_entities(block.data, self.container_type, self.property_name, self.entity_type)
            )

        details = {flag: True, self.entity_label: count, "invalid_blocks": invalid}

        if count < MIN_ENTRIES:
            details["recommendation"] = f"add_more_{self.entity_label}"
            return self.result(
                Status.WARN,
                details,
                f"{self.container_type} schema found with only {count} {self.entity_label}. "
                f"Add at least {MIN_ENTRIES}.",
            )

        details["optimization"] = "optimal_for_ai"
        return self.result(
            Status.PASS,
            details,
            f"{self.container_type} schema found with {count} {self.entity_label}.",
        )


class FaqSchemaCheck(_EntitySchemaCheck):
    container_type = "FAQPage"
    property_name = "mainEntity"
    entity_type = "Question"
    entity_label = "questions"
    applicable_key = "might_benefit"
    suggestion = (
        "The content contains questions. Consider adding FAQPage schema "
        "so answers can surface directly in search."
    )
    indicators = (
        "frequently asked",
        "faq",
        "question",
        "questions",
        "answer",
        "domanda",
        "risposta",
        "domande frequenti",
        "vuoi sapere",
        "chiedi",
        "curiosità",
        "dubbio",
        "perché",
        "come mai",
        "quando",
        "dove",
        "chi",
        "cosa",
    )

    weight = 0.10

    @property
    def id(self) -> str:
        return "faq_schema"

    @property
    def label(self) -> str:
        return "FAQ schema"

    @property
    def description(self) -> str:
        return "Checks for FAQPage markup, which helps content surface in AI overviews."


class HowToSchemaCheck(_EntitySchemaCheck):
    container_type = "HowTo"
    property_name = "step"
    entity_type = "HowToStep"
    entity_label = "steps"
    applicable_key = "is_guide"
    suggestion = (
        "This content looks like a guide. Add HowTo schema to improve "
        'visibility for "how to" queries.'
    )
    indicators = (
        "how to",
        "step-by-step",
        "step 1",
        "first step",
        "tutorial",
        "instructions",
        "come fare",
        "guida a",
        "passo 1",
        "primo passo",
        "procedura",
        "istruzioni",
    )

    weight = 0.08

    @property
    def id(self) -> str:
        return "howto_schema"

    @property
    def label(self) -> str:
        return "HowTo schema"

    @property
    def description(self) -> str:
        return "Checks for HowTo markup on guides and tutorials."
