"""
Main checker class that drives a scan session over many source units.
"""

import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .checkers import MarkupChecker, ScriptChecker
from .issue import Issue, ScanResult, SourceUnit, UnitKind
from .knowledge_base import CompatibilityKnowledgeBase
from .utils import collect_source_files, detect_kind

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class BaselineChecker:
    """Main checker class for non-Baseline API usage.

    Holds per-scan state; use one instance per thread.
    """

    def __init__(self, knowledge_base: Optional[CompatibilityKnowledgeBase] = None):
        self.knowledge_base = knowledge_base or CompatibilityKnowledgeBase()
        self.script_checker = ScriptChecker(self.knowledge_base)
        self.markup_checker = MarkupChecker(self.knowledge_base)

    def check_text(self, text: str, kind: UnitKind = UnitKind.SCRIPT, identifier: str = "input") -> List[Issue]:
        """Scan one unit of text. Parse failures degrade to regex matching, never raise."""
        if kind == UnitKind.MARKUP:
            return self.markup_checker.check(identifier, text)
        return self.script_checker.check(identifier, text)

    def check_unit(self, unit: SourceUnit) -> List[Issue]:
        """Scan a source unit, reading it from disk when it carries no text."""
        text = unit.text
        if text is None:
            if unit.path is None:
                raise ValueError(f"Source unit {unit.identifier} has neither text nor path")
            text = Path(unit.path).read_text(encoding="utf-8")
        return self.check_text(text, unit.kind, unit.identifier)

    def check_units(
        self,
        units: Iterable[SourceUnit],
        cancel_event: Optional[threading.Event] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanResult:
        """Scan units in order and aggregate their issues.

        A unit that fails to scan is logged and skipped; it still counts as
        scanned. Cancellation is honoured between units only.
        """
        units = list(units)
        result = ScanResult(timestamp=datetime.now(timezone.utc).isoformat())
        for index, unit in enumerate(units):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Scan cancelled after %d of %d units", index, len(units))
                result.cancelled = True
                break
            if on_progress is not None:
                on_progress(index, len(units), unit.identifier)
            result.files_scanned += 1
            try:
                issues = self.check_unit(unit)
            except Exception as e:
                logger.warning("Error scanning %s: %s", unit.identifier, e)
                continue
            if issues:
                result.files_with_issues += 1
                result.issues.extend(issues)
        return result

    def check_files(
        self,
        file_paths: Iterable[Path],
        cancel_event: Optional[threading.Event] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanResult:
        """Scan files from disk; HTML files are treated as markup."""
        units = [
            SourceUnit(identifier=str(p), kind=detect_kind(Path(p)), path=Path(p))
            for p in file_paths
        ]
        return self.check_units(units, cancel_event=cancel_event, on_progress=on_progress)

    def check_directory(
        self,
        root: Path,
        cancel_event: Optional[threading.Event] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanResult:
        """Scan every source file under ``root``."""
        files = collect_source_files(root)
        logger.info("Found %d source file(s) under %s", len(files), root)
        return self.check_files(files, cancel_event=cancel_event, on_progress=on_progress)
