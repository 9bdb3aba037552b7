from __future__ import annotations

from baseline_checker.issue import ApiStatus, Issue, ScanResult
from baseline_checker.reporter import ReportGenerator

from app.report_formatter import MAX_CRITICAL_LISTED, format_markdown_report, format_markdown_summary
from app.templates import render_html_report


def _issue(api: str, line: int, file_path: str = "src/app.js", type_: ApiStatus = ApiStatus.DEPRECATED) -> Issue:
    return Issue(
        file_path=file_path,
        line=line,
        column=0,
        api=api,
        type=type_,
        description=f"{api} is not Baseline-supported",
        suggestion="Use a standard API",
        browser_support="Limited browser support",
        context=f"<b>{api}()</b>",
    )


def _result(issues) -> ScanResult:
    files = {i.file_path for i in issues}
    return ScanResult(files_scanned=4, files_with_issues=len(files), issues=list(issues), timestamp="2026-01-01T00:00:00+00:00")


def test_summary_all_clear() -> None:
    md = format_markdown_summary(_result([]))
    assert md.startswith("## ✅ Baseline Scan Results")
    assert "- **Files scanned**: 4" in md
    assert "- **Issues found**: 0" in md


def test_summary_lists_first_critical_issues() -> None:
    issues = [_issue(f"legacy{n}", n) for n in range(MAX_CRITICAL_LISTED + 2)]
    issues.append(_issue("api.USB", 20, "src/usb.js", ApiStatus.NON_BASELINE))
    md = format_markdown_summary(_result(issues))
    assert md.startswith("## ⚠️ Baseline Scan Results")
    assert "Found **8 issues** across **2 files**." in md
    assert "- **deprecated**: 7 issues" in md
    assert "- **non-baseline**: 1 issues" in md
    assert f"### 🚨 Critical Issues ({MAX_CRITICAL_LISTED + 2})" in md
    assert "`legacy4`" in md
    assert "`legacy5`" not in md
    assert "*... and 2 more critical issues*" in md


def test_markdown_report_groups_by_file() -> None:
    md = format_markdown_report("upload.js", _result([_issue("webkitURL", 3), _issue("api.USB", 9, "src/usb.js")]))
    assert md.startswith("# Baseline scan: upload.js")
    assert "### src/app.js (1)" in md
    assert "### src/usb.js (1)" in md


def test_html_report_escapes_source() -> None:
    page = render_html_report(_result([_issue("webkitURL", 3)]))
    assert "&lt;b&gt;webkitURL()&lt;/b&gt;" in page
    assert "<b>webkitURL()</b>" not in page
    assert "2026-01-01T00:00:00+00:00" in page
    assert "{css}" not in page


def test_html_report_tab_ids_are_unique() -> None:
    page = render_html_report(_result([_issue("webkitURL", 1, "src/a-b.js"), _issue("webkitURL", 2, "src/a_b.js")]))
    assert 'id="tab_0_src_a_b_js"' in page
    assert 'id="tab_1_src_a_b_js"' in page
    assert "showTab(event, 'tab_1_src_a_b_js')" in page


def test_html_report_all_clear() -> None:
    assert "All Clear!" in render_html_report(_result([]))


def test_text_report() -> None:
    text = ReportGenerator.generate_text_report(
        _result([_issue("webkitURL", 3), _issue("api.USB", 9, type_=ApiStatus.NON_BASELINE)])
    )
    assert "DEPRECATED (1):" in text
    assert "NON-BASELINE (1):" in text
    assert "src/app.js:3:0: webkitURL" in text
    assert "1 deprecated, 1 non-baseline" in text
    assert "No non-Baseline APIs detected in 4 file(s)" in ReportGenerator.generate_text_report(_result([]))


def test_group_by_file_keeps_discovery_order() -> None:
    issues = [_issue("a", 1, "b.js"), _issue("b", 1, "a.js"), _issue("c", 2, "b.js")]
    groups = ReportGenerator.group_by_file(issues)
    assert list(groups) == ["b.js", "a.js"]
    assert [i.api for i in groups["b.js"]] == ["a", "c"]
