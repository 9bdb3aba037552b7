"""
Editor diagnostics built from issues.

Diagnostic sets are kept per document in a mapping owned by the caller, so an
editor integration decides when to refresh or drop them.
"""

from dataclasses import dataclass
from typing import List, MutableMapping

from .issue import Issue

DIAGNOSTIC_SOURCE = "Baseline Advisor"


@dataclass(frozen=True)
class Diagnostic:
    """Zero-based, single-line editor range with a message."""
    start_line: int
    start_column: int
    end_column: int
    message: str
    code: str
    severity: str = "warning"
    source: str = DIAGNOSTIC_SOURCE


DiagnosticCollection = MutableMapping[str, List[Diagnostic]]


def issue_to_diagnostic(issue: Issue) -> Diagnostic:
    """Map an issue to a diagnostic spanning the API name."""
    return Diagnostic(
        start_line=issue.line - 1,
        start_column=issue.column,
        end_column=issue.column + len(issue.api),
        message=f"{issue.api} is not Baseline-supported. {issue.suggestion}",
        code=issue.type.value,
    )


def update_diagnostics(collection: DiagnosticCollection, document_id: str, issues: List[Issue]) -> List[Diagnostic]:
    """Replace the diagnostics of one document; no issues clears its entry."""
    diagnostics = [issue_to_diagnostic(i) for i in issues]
    if diagnostics:
        collection[document_id] = diagnostics
    else:
        collection.pop(document_id, None)
    return diagnostics


def clear_diagnostics(collection: DiagnosticCollection, document_id: str) -> None:
    """Drop the diagnostics of a closed document."""
    collection.pop(document_id, None)
