"""
Issue data models for the Baseline API checker.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ApiStatus(Enum):
    """Compatibility status of a known-problematic API."""
    DEPRECATED = "deprecated"
    NON_BASELINE = "non-baseline"
    UNSAFE = "unsafe"


class UnitKind(Enum):
    """Content kind of a source unit."""
    SCRIPT = "script"
    MARKUP = "markup"


@dataclass
class AISuggestion:
    """Richer replacement advice attached to an issue by the enrichment pass."""
    alternative: str
    explanation: str
    code_example: str
    browser_support: str


@dataclass
class Issue:
    """One detected usage of a non-Baseline or deprecated API."""
    file_path: str
    line: int
    column: int
    api: str
    type: ApiStatus
    description: str
    suggestion: str
    browser_support: str
    context: str
    ai_suggestion: Optional[AISuggestion] = None


@dataclass
class SourceUnit:
    """A unit of source handed to a scan session.

    When ``text`` is None the content is read from ``path`` at scan time.
    """
    identifier: str
    text: Optional[str] = None
    kind: UnitKind = UnitKind.SCRIPT
    path: Optional[Path] = None


@dataclass
class ScanResult:
    """Aggregate over one scan session."""
    files_scanned: int = 0
    files_with_issues: int = 0
    issues: List[Issue] = field(default_factory=list)
    timestamp: str = ""
    cancelled: bool = False
