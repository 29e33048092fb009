"""Tests for the weighted score engine."""

import pytest

from scoring import ScoreEngine


def entry(status, weight=0.1, label="", fix_hint="") -> dict:
    return {"status": status, "weight": weight, "label": label, "fix_hint": fix_hint}


def test_all_pass_is_green():
    result = ScoreEngine().calculate({"a": entry("pass"), "b": entry("pass", 0.5)})

    assert result["score"] == 100
    assert result["status"] == "green"
    assert result["recommendations"] == []


def test_all_fail_is_red():
    result = ScoreEngine().calculate({"a": entry("fail"), "b": entry("fail")})

    assert result["score"] == 0
    assert result["status"] == "red"


def test_warning_earns_half():
    result = ScoreEngine().calculate(
        {"a": entry("pass"), "b": entry("warn", label="Title length", fix_hint="Make it longer.")}
    )

    assert result["score"] == 75
    assert result["status"] == "yellow"
    assert result["recommendations"] == ["Title length: Make it longer."]
    assert result["breakdown"]["b"]["multiplier"] == 0.5
    assert result["weight_total"] == pytest.approx(0.2)
    assert result["weighted_achieved"] == pytest.approx(0.15)


def test_configured_multipliers():
    result = ScoreEngine({"a": 3}).calculate({"a": entry("pass"), "b": entry("fail")})

    assert result["score"] == 75
    assert result["breakdown"]["a"]["weight"] == pytest.approx(0.3)


@pytest.mark.parametrize(
    "configured, applied",
    [(50, 10.0), (-1, 0.0), ("2.5", 2.5), ("heavy", 1.0), (None, 1.0)],
)
def test_multipliers_are_clamped(configured, applied):
    engine = ScoreEngine({"a": configured})

    result = engine.calculate({"a": entry("pass", 0.1)})

    assert result["breakdown"]["a"]["weight"] == pytest.approx(0.1 * applied)


def test_check_weight_is_clamped():
    result = ScoreEngine().calculate({"a": entry("pass", 7), "b": entry("fail", "x")})

    assert result["breakdown"]["a"]["weight"] == 1.0
    assert result["breakdown"]["b"]["weight"] == 0.0
    assert result["score"] == 100


def test_zero_total_weight_scores_zero():
    result = ScoreEngine({"a": 0}).calculate({"a": entry("pass")})

    assert result["score"] == 0
    assert result["status"] == "red"


def test_status_edge_cases():
    result = ScoreEngine().calculate(
        {
            "unknown": entry("skipped"),
            "missing": {"weight": 0.1},
            "junk": "not a mapping",
        }
    )

    assert result["breakdown"]["unknown"]["multiplier"] == 0.0
    assert result["breakdown"]["missing"]["status"] == "warn"
    assert "junk" not in result["breakdown"]
    assert result["score"] == 25


def test_recommendation_fallbacks():
    result = ScoreEngine().calculate({"og_cards": entry("fail")})

    assert result["recommendations"] == [
        "og_cards: Review this area to resolve outstanding warnings."
    ]


@pytest.mark.parametrize("score, color", [(80, "green"), (79, "yellow"), (60, "yellow"), (59, "red")])
def test_colors(score, color):
    assert ScoreEngine().color_from_score(score) == color
