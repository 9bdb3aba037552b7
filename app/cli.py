"""Command line entry point: CI scans and the HTTP server."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_host, get_port
from .logging_config import configure_logging
from .report_formatter import format_markdown_summary
from .services import AIService, CheckerService
from .templates import render_html_report

from baseline_checker.reporter import ReportGenerator

logger = logging.getLogger("baseline_checker.cli")

HTML_REPORT_NAME = "baseline-scan-report.html"
MARKDOWN_SUMMARY_NAME = "baseline-scan-summary.md"

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baseline-checker",
        description="Detect deprecated and non-Baseline web APIs in JS/TS/HTML sources.",
    )
    parser.add_argument("--log-level", default="", help="Logging level (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan a file or directory")
    scan.add_argument("path", nargs="?", default="./src", help="File or directory to scan (default: ./src)")
    scan.add_argument("--fail-on-issues", action="store_true", help="Exit with status 1 when issues are found")
    scan.add_argument("--report", action="store_true", help="Write HTML report and Markdown summary")
    scan.add_argument("--ai-suggestions", action="store_true", help="Attach replacement suggestions to issues")
    scan.add_argument("--output-dir", default=".", help="Directory for generated reports (default: .)")
    scan.add_argument("--text", action="store_true", help="Print the plain-text report to stdout")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: PORT or 8000)")
    return parser


def run_scan(args: argparse.Namespace) -> int:
    """Scan, optionally enrich and write reports. Returns the process exit code."""
    scan_path = Path(args.path)
    logger.info("Starting Baseline scan on: %s", scan_path)

    result = CheckerService().analyze_path(scan_path)

    if args.ai_suggestions and result.issues:
        logger.info("Getting AI-powered suggestions for %d issue(s)...", len(result.issues))
        AIService().enrich(result.issues)

    if args.report:
        out_dir = Path(args.output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / HTML_REPORT_NAME).write_text(render_html_report(result), encoding="utf-8")
        logger.info("HTML report generated: %s", out_dir / HTML_REPORT_NAME)
        (out_dir / MARKDOWN_SUMMARY_NAME).write_text(format_markdown_summary(result), encoding="utf-8")
        logger.info("Markdown summary generated: %s", out_dir / MARKDOWN_SUMMARY_NAME)

    if args.text:
        print(ReportGenerator.generate_text_report(result))

    logger.info("Files scanned: %d", result.files_scanned)
    logger.info("Issues found: %d", len(result.issues))
    logger.info("Files with issues: %d", result.files_with_issues)

    if not result.issues:
        logger.info("No non-Baseline APIs detected")
        return EXIT_OK

    logger.warning("Found %d non-Baseline API usage(s)", len(result.issues))
    for issue_type, count in ReportGenerator.generate_summary(result.issues).items():
        logger.info("  %s: %d", issue_type, count)
    if args.fail_on_issues:
        logger.error("Build failed: found %d non-Baseline API usage(s)", len(result.issues))
        return EXIT_ISSUES
    return EXIT_OK


def run_server(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("app.main:app", host=args.host or get_host(), port=args.port or get_port())
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper())
    try:
        if args.command == "serve":
            return run_server(args)
        return run_scan(args)
    except Exception as e:
        logger.exception("Action failed: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
