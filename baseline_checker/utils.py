"""
Utility functions for the Baseline API checker.
"""

import os
from pathlib import Path
from typing import List

from .issue import UnitKind

# Extensions of files worth scanning.
SOURCE_EXTENSIONS = {".js", ".jsx", ".ts", ".tsx", ".html", ".htm"}
MARKUP_EXTENSIONS = {".html", ".htm"}

# Directories that never contain first-party source.
EXCLUDE_DIRS = {"node_modules", "dist", "build", ".git"}


def line_context(lines: List[str], line_num: int) -> str:
    """Trimmed text of 1-based ``line_num``, or an empty string if out of range."""
    if 1 <= line_num <= len(lines):
        return lines[line_num - 1].strip()
    return ""


def detect_kind(file_path: Path) -> UnitKind:
    """Detect whether a file holds markup or script from its extension."""
    if file_path.suffix.lower() in MARKUP_EXTENSIONS:
        return UnitKind.MARKUP
    return UnitKind.SCRIPT


def collect_source_files(root: Path) -> List[Path]:
    """Collect scannable source files under ``root``, skipping build and vendor folders.

    A file path is returned as-is; a missing path yields an empty list.
    """
    root = Path(root)
    if root.is_file():
        return [root]
    if not root.is_dir():
        return []

    source_files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
        for name in sorted(filenames):
            if Path(name).suffix.lower() in SOURCE_EXTENSIONS:
                source_files.append(Path(dirpath) / name)
    return source_files
