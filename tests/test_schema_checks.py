"""Tests for the structured data checks."""

import json

import pytest

from analysis.analyzer import Analyzer
from analysis.checks import FaqSchemaCheck, HowToSchemaCheck, SchemaPresetsCheck
from analysis.context import Context
from analysis.result import Status


def json_ld(*payloads) -> str:
    return "".join(
        f'<script type="application/ld+json">{payload if isinstance(payload, str) else json.dumps(payload)}</script>'
        for payload in payloads
    )


def faq(questions: int) -> dict:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {"@type": "Question", "name": f"Q{i}", "acceptedAnswer": {"@type": "Answer", "text": "A"}}
            for i in range(questions)
        ],
    }


# =============================================================================
# Presets
# =============================================================================


def test_presets_missing_fail():
    result = SchemaPresetsCheck().run(Context(html="<p>No markup</p>"))

    assert result.status is Status.FAIL
    assert result.details["found"] == []


def test_presets_partial_warn():
    html = json_ld({"@graph": [{"@type": "Organization"}, {"@type": ["WebSite", "Thing"]}]})

    result = SchemaPresetsCheck().run(Context(html=html))

    assert result.status is Status.WARN
    assert result.details["found"] == ["Organization", "WebSite"]
    assert result.details["missing"] == ["BlogPosting"]


def test_presets_all_found_pass(article_context):
    result = SchemaPresetsCheck().run(article_context)

    assert result.status is Status.PASS
    assert result.details["has_speakable"] is True
    assert result.details["missing"] == []


def test_presets_skip_invalid_blocks():
    html = json_ld("{not json", {"@type": "organization"})

    result = SchemaPresetsCheck().run(Context(html=html))

    assert result.details["invalid_blocks"] == 1
    assert result.details["found"] == ["Organization"]
    assert result.status is Status.WARN


# =============================================================================
# FAQ
# =============================================================================


def test_faq_with_enough_questions_passes():
    result = FaqSchemaCheck().run(Context(html=json_ld(faq(3))))

    assert result.status is Status.PASS
    assert result.details["questions"] == 3
    assert result.details["has_faqpage"] is True


def test_faq_with_few_questions_warns():
    result = FaqSchemaCheck().run(Context(html=json_ld(faq(2))))

    assert result.status is Status.WARN
    assert result.details["questions"] == 2


def test_faq_main_entity_may_be_a_single_object():
    payload = {"@type": "FAQPage", "mainEntity": {"@type": "Question", "name": "Only one"}}

    result = FaqSchemaCheck().run(Context(html=json_ld(payload)))

    assert result.details["questions"] == 1


def test_faq_suggested_when_content_has_questions():
    html = "<h2>Frequently asked questions</h2><p>Here is the answer.</p>"

    result = FaqSchemaCheck().run(Context(html=html))

    assert result.status is Status.WARN
    assert result.details["might_benefit"] is True


def test_faq_not_needed_for_plain_content():
    result = FaqSchemaCheck().run(Context(html="<p>Opening hours are nine to five.</p>"))

    assert result.status is Status.PASS
    assert result.details["note"] == "not_applicable"


# =============================================================================
# HowTo
# =============================================================================


def test_howto_step_types_match_case_insensitively():
    payload = {
        "@type": "HowTo",
        "step": [{"@type": "howtostep", "text": str(i)} for i in range(4)],
    }

    result = HowToSchemaCheck().run(Context(html=json_ld(payload)))

    assert result.status is Status.PASS
    assert result.details["steps"] == 4


def test_howto_suggested_for_guides():
    html = "<h1>How to bake bread</h1><p>Step 1: mix the flour.</p>"

    result = HowToSchemaCheck().run(Context(html=html))

    assert result.status is Status.WARN
    assert result.details["is_guide"] is True


# =============================================================================
# Pathological markup
# =============================================================================


DEEP_BLOCK = "[" * 100000


def test_deeply_nested_block_counts_as_invalid():
    presets = {"@graph": [{"@type": "Organization"}, {"@type": "WebSite"}, {"@type": "BlogPosting"}]}
    context = Context(html=json_ld(presets, DEEP_BLOCK))

    result = SchemaPresetsCheck().run(context)

    assert result.status is Status.PASS
    assert result.details["invalid_blocks"] == 1


def test_deeply_nested_block_does_not_break_entity_checks():
    context = Context(html=json_ld(faq(3), DEEP_BLOCK))

    assert FaqSchemaCheck().run(context).status is Status.PASS
    assert HowToSchemaCheck().run(context).details["has_howto"] is False


def test_deeply_nested_block_does_not_fault_analysis(article_html):
    context = Context(html=article_html.replace("</body>", json_ld(DEEP_BLOCK) + "</body>"))

    analysis = Analyzer().analyze(context)

    assert analysis["summary"]["faulted"] == 0
    assert analysis["checks"]["schema_presets"]["status"] == "pass"


# =============================================================================
# Indicator matching
# =============================================================================


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Which machine fits a small office?", False),
        ("Chi siamo e dove trovarci", True),
        ("Perché scegliere una guida?", True),
        ("Frequently asked about our plans", True),
        ("The answers are in the manual", False),
    ],
)
def test_faq_indicators_match_whole_words(text, expected):
    assert FaqSchemaCheck().looks_applicable(text) is expected


def test_howto_indicators_match_whole_phrases():
    check = HowToSchemaCheck()

    assert check.looks_applicable("Step 1: preheat the oven")
    assert not check.looks_applicable("Step 10 of the pipeline")
    assert not check.looks_applicable("Follow the procedural rules")
