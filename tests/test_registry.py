"""Tests for check selection."""

from analysis.context import Context
from analysis.registry import CheckRegistry
from conftest import StubCheck


def ids(checks) -> list[str]:
    return [check.id for check in checks]


def test_config_disables_checks():
    a, b = StubCheck("a"), StubCheck("b")

    enabled = CheckRegistry.filter_enabled_checks([a, b], Context(), {"a": True, "b": False})

    assert enabled == [a]


def test_empty_config_keeps_catalogue_order():
    checks = [StubCheck("a"), StubCheck("b"), StubCheck("c")]

    assert CheckRegistry.filter_enabled_checks(checks, Context(), {}) == checks
    assert CheckRegistry.filter_enabled_checks(checks, Context()) == checks


def test_unknown_config_ids_are_ignored():
    checks = [StubCheck("a"), StubCheck("b")]

    enabled = CheckRegistry.filter_enabled_checks(checks, Context(), {"zzz": False, "b": True})

    assert ids(enabled) == ["a", "b"]


def test_duplicate_ids_keep_first():
    first, second = StubCheck("a"), StubCheck("a")

    enabled = CheckRegistry.filter_enabled_checks([first, StubCheck("b"), second], Context())

    assert ids(enabled) == ["a", "b"]
    assert enabled[0] is first


def test_hook_receives_enabled_ids_and_context():
    seen = {}
    context = Context(document_id=7)

    def hook(enabled_ids, ctx):
        seen["ids"] = list(enabled_ids)
        seen["context"] = ctx
        return [check_id for check_id in enabled_ids if check_id != "a"]

    enabled = CheckRegistry.filter_enabled_checks(
        [StubCheck("a"), StubCheck("b"), StubCheck("c")], context, {"c": False}, hook=hook
    )

    assert seen == {"ids": ["a", "b"], "context": context}
    assert ids(enabled) == ["b"]


def test_hook_can_reenable_but_not_reorder_or_invent():
    checks = [StubCheck("a"), StubCheck("b")]

    enabled = CheckRegistry.filter_enabled_checks(
        checks, Context(), {"b": False}, hook=lambda enabled_ids, ctx: ["b", "a", "ghost"]
    )

    assert ids(enabled) == ["a", "b"]


def test_hook_returning_non_list_is_ignored():
    checks = [StubCheck("a"), StubCheck("b")]

    enabled = CheckRegistry.filter_enabled_checks(checks, Context(), hook=lambda enabled_ids, ctx: None)

    assert enabled == checks
