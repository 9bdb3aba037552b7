"""Format scan results as a Markdown summary (for PR comments and downloads)."""

from deps import List, Path

from baseline_checker.issue import ApiStatus, Issue, ScanResult
from baseline_checker.reporter import ReportGenerator

CRITICAL_TYPES = (ApiStatus.DEPRECATED, ApiStatus.UNSAFE)
MAX_CRITICAL_LISTED = 5


def _issue_block_md(i: Issue) -> List[str]:
    """One issue as Markdown: `api` · file:line · type, then description, code, fix."""
    lines = []
    lines.append(f"**`{i.api}` · {Path(i.file_path).name}:{i.line} · {i.type.value}**")
    lines.append("")
    lines.append(i.description)
    lines.append("")
    lines.append("- **Code:**")
    lines.append("```")
    lines.append(i.context)
    lines.append("```")
    lines.append(f"- **Fix:** {i.suggestion}")
    lines.append(f"- **Browser support:** {i.browser_support}")
    if i.ai_suggestion is not None:
        lines.append(f"- **Alternative:** {i.ai_suggestion.alternative}")
        lines.append(f"- **Why:** {i.ai_suggestion.explanation}")
        lines.append("```js")
        lines.append(i.ai_suggestion.code_example)
        lines.append("```")
    lines.append("")
    return lines


def format_markdown_summary(result: ScanResult) -> str:
    """Short Markdown summary of a scan: counts, types and the first critical issues."""
    if not result.issues:
        return "\n".join([
            "## ✅ Baseline Scan Results",
            "",
            "**All clear!** No non-Baseline APIs detected in your codebase.",
            "",
            f"- **Files scanned**: {result.files_scanned}",
            "- **Issues found**: 0",
            "- **Status**: 🟢 Baseline compliant",
        ])

    by_type = ReportGenerator.generate_summary(result.issues)
    critical = [i for i in result.issues if i.type in CRITICAL_TYPES]

    lines = []
    lines.append("## ⚠️ Baseline Scan Results")
    lines.append("")
    lines.append(f"Found **{len(result.issues)} issues** across **{result.files_with_issues} files**.")
    lines.append("")
    lines.append("### 📊 Summary")
    lines.append(f"- **Files scanned**: {result.files_scanned}")
    lines.append(f"- **Total issues**: {len(result.issues)}")
    lines.append(f"- **Files with issues**: {result.files_with_issues}")
    lines.append("")
    lines.append("### 🏷️ Issues by Type")
    for issue_type, count in by_type.items():
        lines.append(f"- **{issue_type}**: {count} issues")
    lines.append("")

    if critical:
        lines.append(f"### 🚨 Critical Issues ({len(critical)})")
        lines.append("")
        for i in critical[:MAX_CRITICAL_LISTED]:
            lines.append(f"- `{i.api}` in {i.file_path}:{i.line} - {i.description}")
        if len(critical) > MAX_CRITICAL_LISTED:
            lines.append("")
            lines.append(f"*... and {len(critical) - MAX_CRITICAL_LISTED} more critical issues*")
        lines.append("")

    lines.append("### 💡 Next Steps")
    lines.append("1. Review the full HTML report for detailed information")
    lines.append("2. Prioritize fixing deprecated and unsafe APIs")
    lines.append("3. Consider using AI-powered suggestions for modern alternatives")
    return "\n".join(lines)


def format_markdown_report(source_label: str, result: ScanResult) -> str:
    """Full Markdown report: summary followed by every issue, grouped by file."""
    lines = [f"# Baseline scan: {source_label}", "", f"Generated: {result.timestamp}", ""]
    lines.append(format_markdown_summary(result))
    lines.append("")
    if result.issues:
        lines.append("## Issues")
        lines.append("")
        for file_path, issues in ReportGenerator.group_by_file(result.issues).items():
            lines.append(f"### {file_path} ({len(issues)})")
            lines.append("")
            for i in issues:
                lines.extend(_issue_block_md(i))
    return "\n".join(lines)
