"""Tests for the Result value."""

import pytest

from analysis.result import Result, Status


def test_details_are_read_only():
    result = Result(Status.PASS, {"count": 1})

    with pytest.raises(TypeError):
        result.details["count"] = 2


def test_details_are_copied_on_construction():
    missing = ["og:title"]

    result = Result(Status.WARN, {"missing": missing})
    missing.append("og:image")

    assert result.details["missing"] == ["og:title"]


def test_to_dict_does_not_expose_stored_details():
    result = Result(Status.WARN, {"missing": ["og:title"]})

    result.to_dict()["details"]["missing"].append("og:image")

    assert result.details["missing"] == ["og:title"]
    assert result.to_dict()["details"] == {"missing": ["og:title"]}
