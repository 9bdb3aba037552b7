"""
Base checker class for non-Baseline API usage.
"""

from typing import List, Optional

from .issue import ApiStatus, Issue
from .knowledge_base import CompatibilityDescriptor, CompatibilityKnowledgeBase
from .utils import line_context

DEFAULT_SUGGESTION = "Consider using a Baseline-supported alternative"
DEFAULT_BROWSER_SUPPORT = "Limited browser support"


class BaseChecker:
    """Base class for all checkers."""

    def __init__(self, knowledge_base: CompatibilityKnowledgeBase):
        self.knowledge_base = knowledge_base
        self.issues: List[Issue] = []
        self.file_path: str = ""
        self.text: str = ""
        self.lines: List[str] = []

    def check(self, file_path: str, text: str) -> List[Issue]:
        """Run checks on one unit of source text reported under ``file_path``."""
        self.file_path = file_path
        self.text = text
        self.lines = text.split("\n")
        self.issues = []
        self._run_checks()
        return self.issues

    def scan(self, text: str, file_path: str = "input") -> List[Issue]:
        """Scan raw text; ``file_path`` identifies un-persisted text in reports."""
        return self.check(file_path, text)

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _add_issue(
        self,
        line_num: int,
        col: int,
        api: str,
        descriptor: CompatibilityDescriptor,
        context: Optional[str] = None,
    ):
        """Add an issue for ``api`` using the descriptor's text (or the defaults)."""
        issue_type = ApiStatus.DEPRECATED if descriptor.status == ApiStatus.DEPRECATED else ApiStatus.NON_BASELINE
        if context is None:
            context = line_context(self.lines, line_num)
        self.issues.append(
            Issue(
                file_path=self.file_path,
                line=line_num,
                column=col,
                api=api,
                type=issue_type,
                description=descriptor.description or f"{api} is not Baseline-supported",
                suggestion=descriptor.suggestion or DEFAULT_SUGGESTION,
                browser_support=descriptor.browser_support or DEFAULT_BROWSER_SUPPORT,
                context=context,
            )
        )
