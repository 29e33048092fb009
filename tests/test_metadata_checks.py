"""Tests for title, meta description, canonical and robots checks."""

import pytest

from analysis.checks import (
    CanonicalCheck,
    MetaDescriptionCheck,
    RobotsIndexabilityCheck,
    TitleLengthCheck,
)
from analysis.context import Context
from analysis.result import Status
from analysis.text import contains_keyword_words


@pytest.mark.parametrize(
    "length, expected",
    [
        (0, Status.FAIL),
        (13, Status.FAIL),
        (34, Status.FAIL),
        (35, Status.WARN),
        (49, Status.WARN),
        (50, Status.PASS),
        (57, Status.PASS),
        (60, Status.PASS),
        (61, Status.WARN),
        (78, Status.WARN),
        (79, Status.FAIL),
    ],
)
def test_title_length_thresholds(length, expected):
    result = TitleLengthCheck().run(Context(title="x" * length))

    assert result.status is expected
    assert result.details["length"] == length


def test_title_missing_keyword_warns():
    title = "A perfectly sized title that talks about something else"
    check = TitleLengthCheck()

    result = check.run(Context(title=title, focus_keyword="content audit"))

    assert result.status is Status.WARN
    assert result.details["has_keyword"] is False
    assert "content audit" in result.message


def test_title_with_keyword_passes():
    title = "Content audit checklist: how to review every page you own"

    result = TitleLengthCheck().run(Context(title=title, focus_keyword="Content Audit"))

    assert result.status is Status.PASS
    assert result.details["has_keyword"] is True
    assert result.weight == pytest.approx(0.10)


def test_title_falls_back_to_title_element():
    result = TitleLengthCheck().run(Context(html="<title>Short</title>"))

    assert result.details["length"] == 5
    assert result.status is Status.FAIL


def test_meta_description_missing_fails():
    result = MetaDescriptionCheck().run(Context(html="<p>body</p>"))

    assert result.status is Status.FAIL
    assert result.details["length"] == 0


def test_meta_description_in_range_with_keyword_passes():
    description = "content audit " + "a" * 116

    result = MetaDescriptionCheck().run(
        Context(meta_description=description, focus_keyword="content audit")
    )

    assert result.details["length"] == 130
    assert result.status is Status.PASS


def test_meta_description_short_warns():
    result = MetaDescriptionCheck().run(Context(meta_description="Too short."))

    assert result.status is Status.WARN


def test_meta_description_uses_meta_tag():
    html = f'<meta name="description" content="{"b" * 140}">'

    result = MetaDescriptionCheck().run(Context(html=html))

    assert result.status is Status.PASS
    assert result.details["length"] == 140


def test_keyword_words_match_in_any_order():
    assert contains_keyword_words("We audit the content of your site", "content audit")
    assert contains_keyword_words("Book a B & B in Rome", "B&B Rome")
    assert contains_keyword_words("Guida al bed and breakfast", "guida per il bed")
    assert not contains_keyword_words("We audit your site", "content audit")
    assert not contains_keyword_words("anything", "  ")


@pytest.mark.parametrize(
    "canonical, expected",
    [
        (None, Status.FAIL),
        ("", Status.FAIL),
        ("/relative/path", Status.FAIL),
        ("https://exa mple.com/", Status.FAIL),
        ("mailto:someone@example.com", Status.FAIL),
        ("ftp://example.com/post", Status.FAIL),
        ("https://example.com/post", Status.PASS),
    ],
)
def test_canonical(canonical, expected):
    result = CanonicalCheck().run(Context(canonical=canonical))

    assert result.status is expected


def test_canonical_from_link_tag():
    html = '<link rel="canonical" href="https://example.com/post">'

    result = CanonicalCheck().run(Context(html=html))

    assert result.status is Status.PASS
    assert result.details["canonical"] == "https://example.com/post"


@pytest.mark.parametrize(
    "robots, expected",
    [
        (None, Status.WARN),
        ("noindex, follow", Status.FAIL),
        ("index, nofollow", Status.WARN),
        ("INDEX,FOLLOW", Status.PASS),
    ],
)
def test_robots(robots, expected):
    result = RobotsIndexabilityCheck().run(Context(robots=robots))

    assert result.status is expected


def test_robots_tokens_in_details():
    result = RobotsIndexabilityCheck().run(Context(robots="Index, NoFollow"))

    assert result.details["tokens"] == ["index", "nofollow"]
