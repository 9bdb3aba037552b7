"""
JavaScript checks: tree-sitter AST matching with a line-based regex fallback.
"""

import logging
import re
from typing import Any, Iterator, Optional, Tuple

import tree_sitter_javascript
from tree_sitter import Language, Parser

from ..checker_base import BaseChecker
from ..knowledge_base import CompatibilityDescriptor
from ..resolver import resolve_identifier, strip_global_qualifier

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

# Callee field of each call-like node.
CALLEE_FIELDS = {"call_expression": "function", "new_expression": "constructor"}


def parse_source(text: str) -> Any:
    """Parse ``text`` (ES2022+, JSX) and return the syntax tree.

    The tree is returned even when the source has errors; check
    ``tree.root_node.has_error``. Builds a fresh parser per call.
    """
    return Parser(JS_LANGUAGE).parse(text.encode("utf-8"))


def walk(root: Any) -> Iterator[Any]:
    """Yield every named node under ``root`` in pre-order (source order)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


class ScriptChecker(BaseChecker):
    """Detects non-Baseline API usage in JavaScript source."""

    def _run_checks(self):
        """Run AST checks, falling back to regex matching if the source does not parse."""
        tree = parse_source(self.text)
        if tree.root_node.has_error:
            logger.debug("Parse failed for %s; using regex fallback", self.file_path)
            self._check_with_regex()
            return
        self._check_ast(tree.root_node)

    def _check_ast(self, root: Any):
        """Match member accesses and bare call/new callees against the knowledge base."""
        for node in walk(root):
            if node.type == "member_expression":
                target = node
            elif node.type in CALLEE_FIELDS:
                target = node.child_by_field_name(CALLEE_FIELDS[node.type])
                # Member callees are reported through their member_expression.
                if target is None or target.type != "identifier":
                    continue
            else:
                continue
            name = resolve_identifier(target)
            if name is None:
                continue
            match = self._match(name)
            if match is None:
                continue
            api, descriptor = match
            row, byte_col = node.start_point
            self._add_issue(row + 1, self._char_column(row, byte_col), api, descriptor)

    def _char_column(self, row: int, byte_col: int) -> int:
        """Convert a UTF-8 byte column to a character column."""
        line = self.lines[row] if row < len(self.lines) else ""
        return len(line.encode("utf-8")[:byte_col].decode("utf-8", errors="ignore"))

    def _match(self, name: str) -> Optional[Tuple[str, CompatibilityDescriptor]]:
        """Look up ``name``, then ``name`` without a window/self/globalThis qualifier."""
        descriptor = self.knowledge_base.lookup(name)
        if descriptor is not None:
            return name, descriptor
        unqualified = strip_global_qualifier(name)
        if unqualified is not None:
            descriptor = self.knowledge_base.lookup(unqualified)
            if descriptor is not None:
                return unqualified, descriptor
        return None

    def _check_with_regex(self):
        """Word-boundary literal search for every known API, line by line.

        Cannot tell code from comments or string literals.
        """
        patterns = [
            (api, descriptor, re.compile(r"\b" + re.escape(api) + r"\b"))
            for api, descriptor in self.knowledge_base
        ]
        for i, line in enumerate(self.lines, 1):
            for api, descriptor, pattern in patterns:
                for m in pattern.finditer(line):
                    self._add_issue(i, m.start(), api, descriptor, context=line.strip())
