from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Keep `import app...`, `import baseline_checker...` and `import deps` working from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture(autouse=True)
def _no_ai_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests never reach the network; enrichment uses the static table unless a test fakes the client.
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    from app.ai_status import reset_ai_status_cache

    reset_ai_status_cache()


@pytest.fixture(scope="session")
def knowledge_base():
    from baseline_checker.knowledge_base import CompatibilityKnowledgeBase

    return CompatibilityKnowledgeBase()


@pytest.fixture
def checker(knowledge_base):
    from baseline_checker.main_checker import BaselineChecker

    return BaselineChecker(knowledge_base)
