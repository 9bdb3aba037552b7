"""Pydantic request/response models."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# --- Request ---


class ScanRequest(BaseModel):
    """Unified request: either pasted code (with its kind) or file_path."""

    code: Optional[str] = Field(default=None, description="Source text to scan")
    kind: Literal["script", "markup"] = Field(default="script", description="script (JS/TS) or markup (HTML)")
    filename: str = Field(default="input", description="Identifier used for the pasted text in reports")
    file_path: Optional[str] = Field(default=None, description="Absolute path to a file or folder on the server")


# --- Issue (response) ---


class AISuggestionOut(BaseModel):
    """Richer suggestion attached by the enrichment pass."""

    alternative: str
    explanation: str
    code_example: str
    browser_support: str


class IssueOut(BaseModel):
    """Single non-Baseline API usage."""

    file_path: str = Field(..., description="File (or pasted-text identifier) the issue belongs to")
    line: int = Field(..., description="1-based line")
    column: int = Field(..., description="0-based column")
    api: str
    type: str = Field(..., description="deprecated or non-baseline")
    description: str
    suggestion: str
    browser_support: str
    context: str = Field(..., description="Trimmed source line")
    ai_suggestion: Optional[AISuggestionOut] = None


# --- Responses ---


class ScanResponse(BaseModel):
    """Response for POST /check (no AI) and POST /analyze (with AI suggestions)."""

    files_scanned: int = 0
    files_with_issues: int = 0
    issues: List[IssueOut] = Field(default_factory=list)
    timestamp: str = ""
    summary: Dict[str, int] = Field(default_factory=dict, description="Issue counts by type")


class AIStatusResponse(BaseModel):
    """Availability of the remote suggestion provider."""

    available: bool
    reason: str
    api_key_set: bool
    model: str
