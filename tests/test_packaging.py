from __future__ import annotations

import re
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_long_description_is_project_readme() -> None:
    pyproject = (REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    match = re.search(r'^readme = "([^"]+)"$', pyproject, re.MULTILINE)
    assert match is not None
    assert match.group(1) == "README.md"
    assert (REPO_ROOT / match.group(1)).is_file()
