"""
Report generation for the Baseline API checker.
"""

from typing import Dict, List

from .issue import ApiStatus, Issue, ScanResult


class ReportGenerator:
    """Generate plain-text reports from scan results."""

    @staticmethod
    def generate_text_report(result: ScanResult) -> str:
        """Generate a text report."""
        if not result.issues:
            return f"\n✓ No non-Baseline APIs detected in {result.files_scanned} file(s)\n"

        report = [f"\n{'='*80}"]
        report.append("Baseline API Compatibility Report")
        report.append(f"{'='*80}\n")

        deprecated = [i for i in result.issues if i.type == ApiStatus.DEPRECATED]
        non_baseline = [i for i in result.issues if i.type != ApiStatus.DEPRECATED]

        for title, issues in (("DEPRECATED", deprecated), ("NON-BASELINE", non_baseline)):
            if not issues:
                continue
            report.append(f"{title} ({len(issues)}):")
            report.append("-" * 80)
            for issue in issues:
                report.append(f"  {issue.file_path}:{issue.line}:{issue.column}: {issue.api}")
                report.append(f"    {issue.description}")
                report.append(f"    Code: {issue.context}")
                report.append(f"    Fix: {issue.suggestion}")
                report.append(f"    Support: {issue.browser_support}\n")

        report.append(
            f"\nSummary: {len(result.issues)} issue(s) in {result.files_with_issues} of "
            f"{result.files_scanned} file(s) ({len(deprecated)} deprecated, {len(non_baseline)} non-baseline)"
        )
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def generate_summary(issues: List[Issue]) -> Dict[str, int]:
        """Generate a summary count by issue type."""
        summary = {}
        for issue in issues:
            summary[issue.type.value] = summary.get(issue.type.value, 0) + 1
        return summary

    @staticmethod
    def group_by_file(issues: List[Issue]) -> Dict[str, List[Issue]]:
        """Group issues by the file they were found in, preserving discovery order."""
        groups: Dict[str, List[Issue]] = {}
        for issue in issues:
            groups.setdefault(issue.file_path, []).append(issue)
        return groups
