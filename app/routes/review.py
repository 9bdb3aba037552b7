"""Review routes (form-based paste-in scan and report download)."""

from deps import (
    APIRouter,
    Form,
    HTMLResponse,
    Optional,
    Path,
    Response,
    re,
)
from ..report_formatter import format_markdown_report
from ..services import AIService
from ..templates import render_homepage, render_html_report, render_review_results
from ..utils import checker_svc

from baseline_checker.issue import ScanResult

router = APIRouter()
ai_svc = AIService()

KINDS = ("script", "markup")


def _safe_report_basename(label: str) -> str:
    """Build a readable, filesystem-safe base name for the report (no extension)."""
    if not (label or "").strip():
        return "baseline-scan-report"
    stem = Path(label.replace("\\", "/").strip()).stem or "report"
    safe = re.sub(r"[^\w\-]", "_", stem)[:80].strip("_")
    return safe or "baseline-scan-report"


def _scan_form(code: str, kind: str, ai_suggestions: bool) -> ScanResult:
    result = checker_svc.analyze_code(code, kind, filename="input")
    if ai_suggestions:
        ai_svc.enrich(result.issues)
    return result


def _parse_form(code: str, kind: str, ai_suggestions: Optional[str]):
    """Normalize form fields. Returns (code, kind, ai, error)."""
    code = code or ""
    kind = (kind or "script").strip().lower()
    ai = (ai_suggestions or "").strip().lower() in ("true", "on", "1", "yes")
    if not code.strip():
        return code, kind, ai, "Paste some source to scan."
    if kind not in KINDS:
        return code, kind, ai, f"Unknown content kind: {kind}"
    return code, kind, ai, None


@router.post("/review", response_class=HTMLResponse)
def review_post(
    code: str = Form(default=""),
    kind: str = Form(default="script"),
    ai_suggestions: Optional[str] = Form(default=None),
) -> str:
    """Scan pasted source and render results."""
    code, kind, ai, error = _parse_form(code, kind, ai_suggestions)
    if error:
        return render_homepage(error=error, code=code, kind=kind if kind in KINDS else "script", ai_suggestions=ai)
    result = _scan_form(code, kind, ai)
    return render_review_results("pasted " + kind, result, code, kind, ai)


@router.post("/review/report")
def review_report(
    code: str = Form(default=""),
    kind: str = Form(default="script"),
    ai_suggestions: Optional[str] = Form(default=None),
    format: str = Form(default="markdown"),
    label: str = Form(default=""),
) -> Response:
    """Scan pasted source and return a downloadable Markdown or HTML report."""
    code, kind, ai, error = _parse_form(code, kind, ai_suggestions)
    if error:
        return HTMLResponse(render_homepage(error=error, code=code), status_code=400)
    result = _scan_form(code, kind, ai)
    basename = _safe_report_basename(label)
    if (format or "").strip().lower() == "html":
        body = render_html_report(result)
        media_type = "text/html; charset=utf-8"
        filename = f"{basename}.html"
    else:
        body = format_markdown_report(label or f"pasted {kind}", result)
        media_type = "text/markdown; charset=utf-8"
        filename = f"{basename}.md"
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
