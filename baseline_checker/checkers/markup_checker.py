"""
HTML checks: scan inline script blocks and map issues back to document lines.
"""

import re

from ..checker_base import BaseChecker
from ..knowledge_base import CompatibilityKnowledgeBase
from .script_checker import ScriptChecker

SCRIPT_BLOCK_PATTERN = re.compile(r"<script[^>]*>([\s\S]*?)</script>", re.IGNORECASE)


class MarkupChecker(BaseChecker):
    """Detects non-Baseline API usage inside inline <script> blocks."""

    def __init__(self, knowledge_base: CompatibilityKnowledgeBase):
        super().__init__(knowledge_base)
        self.script_checker = ScriptChecker(knowledge_base)

    def _run_checks(self):
        """Scan each script block in document order, offsetting lines to the document."""
        for match in SCRIPT_BLOCK_PATTERN.finditer(self.text):
            line_offset = self.text.count("\n", 0, match.start(1))
            for issue in self.script_checker.check(self.file_path, match.group(1)):
                issue.line += line_offset
                self.issues.append(issue)
