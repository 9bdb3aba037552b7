"""Checker service: wraps baseline_checker and maps to API models."""

from deps import Optional, Path
from ..config import get_web_features_path
from ..schemas import AISuggestionOut, IssueOut, ScanResponse

from baseline_checker.issue import Issue, ScanResult, SourceUnit, UnitKind
from baseline_checker.knowledge_base import CompatibilityKnowledgeBase
from baseline_checker.main_checker import BaselineChecker
from baseline_checker.reporter import ReportGenerator


def _issue_to_out(i: Issue) -> IssueOut:
    ai = None
    if i.ai_suggestion is not None:
        ai = AISuggestionOut(
            alternative=i.ai_suggestion.alternative,
            explanation=i.ai_suggestion.explanation,
            code_example=i.ai_suggestion.code_example,
            browser_support=i.ai_suggestion.browser_support,
        )
    return IssueOut(
        file_path=i.file_path,
        line=i.line,
        column=i.column,
        api=i.api,
        type=i.type.value,
        description=i.description,
        suggestion=i.suggestion,
        browser_support=i.browser_support,
        context=i.context,
        ai_suggestion=ai,
    )


def result_to_response(result: ScanResult) -> ScanResponse:
    """Map a ScanResult to its API model."""
    return ScanResponse(
        files_scanned=result.files_scanned,
        files_with_issues=result.files_with_issues,
        issues=[_issue_to_out(i) for i in result.issues],
        timestamp=result.timestamp,
        summary=ReportGenerator.generate_summary(result.issues),
    )


class CheckerService:
    """Wraps BaselineChecker for use by the API and CLI.

    Checkers hold per-scan state, so each call builds its own; only the
    read-only knowledge base is shared between concurrent requests.
    """

    def __init__(self, knowledge_base: Optional[CompatibilityKnowledgeBase] = None):
        if knowledge_base is None:
            knowledge_base = CompatibilityKnowledgeBase(dataset_path=get_web_features_path())
        self.knowledge_base = knowledge_base

    def analyze_code(self, code: str, kind: str = "script", filename: str = "input") -> ScanResult:
        """Scan pasted text as one unit."""
        unit = SourceUnit(identifier=filename or "input", text=code, kind=UnitKind(kind))
        return BaselineChecker(self.knowledge_base).check_units([unit])

    def analyze_path(self, path: Path) -> ScanResult:
        """Scan a file, or every source file under a folder."""
        return BaselineChecker(self.knowledge_base).check_directory(path)