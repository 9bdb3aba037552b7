"""Template rendering utilities."""

from ..ai_status import get_ai_status
from deps import Dict, List, Optional, Path, html, re

from baseline_checker.issue import Issue, ScanResult
from baseline_checker.reporter import ReportGenerator

TEMPLATES_DIR = Path(__file__).parent


def _render_ai_status_banner() -> str:
    """Generate AI status banner HTML."""
    status = get_ai_status()
    esc = html.escape

    if status["available"]:
        icon = "✓"
        cls = "available"
        msg = f"AI suggestions available (model: {esc(status['model'])})"
    else:
        icon = "⚠"
        cls = "unavailable"
        reason = esc(status["reason"])
        if not status["api_key_set"]:
            msg = f"AI unavailable: {reason}. Set OPENAI_API_KEY in .env"
        else:
            msg = f"AI unavailable: {reason}"

    return f'<div class="ai-status {cls}"><span class="ai-status-icon">{icon}</span><span class="ai-status-text">{msg}</span></div>'


def load_template(name: str) -> str:
    """Load a template file."""
    path = TEMPLATES_DIR / name
    return path.read_text(encoding="utf-8")


def load_css(name: str = "styles.css") -> str:
    """Load a CSS file."""
    return load_template(name)


def render_template(template_name: str, omit_global_ai_banner: bool = False, **kwargs) -> str:
    """Render a template with the given variables."""
    template = load_template(template_name)
    css = load_css()
    base = load_template("base.html")
    content = template.format(**kwargs)
    # Use string replacement for base template to avoid CSS brace conflicts
    title_val = html.escape(kwargs.get("title", "Baseline API Checker"))
    ai_banner = "" if omit_global_ai_banner else _render_ai_status_banner()
    result = base.replace("{title}", title_val).replace("{css}", css).replace("{ai_status_banner}", ai_banner).replace("{content}", content)
    return result


def render_homepage(error: Optional[str] = None, code: str = "", kind: str = "script", ai_suggestions: bool = False) -> str:
    """Home page with the paste-in form."""
    error_block = f'<div class="form-error">{html.escape(error)}</div>' if error else ""
    return render_template(
        "root.html",
        title="Baseline API Checker",
        error_block=error_block,
        code=html.escape(code),
        script_selected=" selected" if kind != "markup" else "",
        markup_selected=" selected" if kind == "markup" else "",
        ai_checked=" checked" if ai_suggestions else "",
    )


def _issue_block_html(i: Issue) -> str:
    esc = html.escape
    ai_block = ""
    if i.ai_suggestion is not None:
        ai_block = f"""
    <div class="ai-suggestion">
      <div><strong>Alternative:</strong> {esc(i.ai_suggestion.alternative)}</div>
      <div><strong>Why:</strong> {esc(i.ai_suggestion.explanation)}</div>
      <pre>{esc(i.ai_suggestion.code_example)}</pre>
      <div><strong>Browser support:</strong> {esc(i.ai_suggestion.browser_support)}</div>
    </div>"""
    return f"""
  <div class="issue {esc(i.type.value)}">
    <div class="issue-meta">Line {i.line}, Column {i.column} · {esc(i.type.value)}</div>
    <div class="issue-msg">{esc(i.api)}: {esc(i.description)}</div>
    <div class="issue-code">Code: {esc(i.context)}</div>
    <div class="issue-fix">Fix: {esc(i.suggestion)} ({esc(i.browser_support)})</div>{ai_block}
  </div>"""


def render_review_results(
    source_label: str,
    result: ScanResult,
    code: str,
    kind: str,
    ai_suggestions: bool,
) -> str:
    """Results page for a pasted-in scan."""
    issues_block = "".join(_issue_block_html(i) for i in result.issues)
    return render_template(
        "results.html",
        title=f"Results: {source_label}",
        issue_count=len(result.issues),
        source_label=html.escape(source_label),
        issues_block=issues_block or "<p>No non-Baseline APIs detected.</p>",
        code=html.escape(code, quote=True),
        kind=html.escape(kind),
        ai_suggestions="true" if ai_suggestions else "",
    )


def _tab_id(index: int, file_path: str) -> str:
    return f"tab_{index}_" + re.sub(r"[^a-zA-Z0-9]", "_", file_path)


def _report_issue_html(i: Issue) -> str:
    esc = html.escape
    ai_block = ""
    if i.ai_suggestion is not None:
        ai_block = f"""
            <div class="ai-suggestion">
                <div class="ai-title">🤖 AI-Powered Suggestion</div>
                <div><strong>Alternative:</strong> {esc(i.ai_suggestion.alternative)}</div>
                <div><strong>Explanation:</strong> {esc(i.ai_suggestion.explanation)}</div>
                <div class="code-block">{esc(i.ai_suggestion.code_example)}</div>
                <div><strong>Browser Support:</strong> {esc(i.ai_suggestion.browser_support)}</div>
            </div>"""
    return f"""
    <div class="issue">
        <div class="issue-header">
            <span class="issue-title">{esc(i.api)}</span>
            <span class="issue-badge badge-{esc(i.type.value)}">{esc(i.type.value)}</span>
        </div>
        <div class="issue-content">
            <div class="issue-meta">
                <div><div class="meta-label">Location</div><div>Line {i.line}, Column {i.column}</div></div>
                <div><div class="meta-label">Browser Support</div><div>{esc(i.browser_support)}</div></div>
                <div><div class="meta-label">Suggestion</div><div>{esc(i.suggestion)}</div></div>
            </div>
            <div class="meta-label">Code Context:</div>
            <div class="code-block">{esc(i.context)}</div>{ai_block}
        </div>
    </div>"""


def _stat_card(value: int, label: str, cls: str) -> str:
    return f'<div class="stat-card"><div class="stat-number {cls}">{value}</div><div class="stat-label">{label}</div></div>'


def render_html_report(result: ScanResult) -> str:
    """Standalone HTML report: stats, issues by type, issues grouped per file."""
    esc = html.escape
    by_type = ReportGenerator.generate_summary(result.issues)
    by_file: Dict[str, List[Issue]] = ReportGenerator.group_by_file(result.issues)
    has_issues = bool(result.issues)

    parts = ['<div class="stats">']
    parts.append(_stat_card(result.files_scanned, "Files Scanned", "success" if result.files_scanned else "warning"))
    parts.append(_stat_card(len(result.issues), "Issues Found", "warning" if has_issues else "success"))
    parts.append(_stat_card(result.files_with_issues, "Files with Issues", "warning" if result.files_with_issues else "success"))
    parts.append(_stat_card(len(by_type), "Issue Types", "error" if has_issues else "success"))
    parts.append("</div>")

    if not has_issues:
        parts.append(
            '<div class="section"><div class="section-content all-clear">'
            "<h2 class=\"success\">All Clear!</h2>"
            "<p>No non-Baseline APIs detected in your codebase.</p></div></div>"
        )
    else:
        parts.append('<div class="section"><div class="section-header"><h2>📊 Issues by Type</h2></div><div class="section-content">')
        for issue_type, count in by_type.items():
            parts.append(
                f'<div class="type-row"><span class="issue-badge badge-{esc(issue_type)}">{esc(issue_type)}</span>'
                f"<span>{count} issues</span></div>"
            )
        parts.append("</div></div>")

        parts.append('<div class="section"><div class="section-header"><h2>📁 Issues by File</h2></div><div class="section-content">')
        parts.append('<div class="tabs">')
        for index, file_path in enumerate(by_file):
            active = " active" if index == 0 else ""
            parts.append(
                f'<button class="tab{active}" onclick="showTab(event, \'{_tab_id(index, file_path)}\')">{esc(file_path)}</button>'
            )
        parts.append("</div>")
        for index, (file_path, issues) in enumerate(by_file.items()):
            active = " active" if index == 0 else ""
            parts.append(f'<div class="tab-content{active}" id="{_tab_id(index, file_path)}">')
            parts.extend(_report_issue_html(i) for i in issues)
            parts.append("</div>")
        parts.append("</div></div>")

    page = load_template("report.html")
    return (
        page.replace("{css}", load_css("report.css"))
        .replace("{timestamp}", esc(result.timestamp))
        .replace("{body}", "\n".join(parts))
    )
