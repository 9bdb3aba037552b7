from __future__ import annotations

from baseline_checker.diagnostics import (
    DIAGNOSTIC_SOURCE,
    clear_diagnostics,
    issue_to_diagnostic,
    update_diagnostics,
)


def test_issue_maps_to_zero_based_range(checker) -> None:
    issue = checker.check_text("\n  webkitRequestAnimationFrame(draw);")[0]
    diagnostic = issue_to_diagnostic(issue)
    assert (diagnostic.start_line, diagnostic.start_column, diagnostic.end_column) == (1, 2, 29)
    assert diagnostic.message == "webkitRequestAnimationFrame is not Baseline-supported. Use requestAnimationFrame"
    assert diagnostic.code == "deprecated"
    assert diagnostic.severity == "warning"
    assert diagnostic.source == DIAGNOSTIC_SOURCE


def test_update_replaces_and_clears(checker) -> None:
    collection = {}
    issues = checker.check_text("document.execCommand('copy');\nnew webkitAudioContext();")
    assert len(update_diagnostics(collection, "file:///a.js", issues)) == 2
    assert len(collection["file:///a.js"]) == 2

    update_diagnostics(collection, "file:///a.js", issues[:1])
    assert len(collection["file:///a.js"]) == 1

    assert update_diagnostics(collection, "file:///a.js", []) == []
    assert "file:///a.js" not in collection


def test_clear_diagnostics_on_close(checker) -> None:
    collection = {}
    update_diagnostics(collection, "doc", checker.check_text("const u = new webkitURL(href);"))
    assert "doc" in collection
    clear_diagnostics(collection, "doc")
    clear_diagnostics(collection, "doc")
    assert collection == {}
