"""Utility functions for the API."""

from deps import HTTPException, Path
from .schemas import ScanRequest
from .services import CheckerService

from baseline_checker.issue import ScanResult

checker_svc = CheckerService()


def run_scan(req: ScanRequest) -> ScanResult:
    """Run the scanner on pasted code or on a server-side file or folder."""
    if req.file_path:
        p = Path(req.file_path)
        if not p.is_absolute():
            raise HTTPException(400, "file_path must be absolute")
        if not p.exists():
            raise HTTPException(404, f"File not found: {req.file_path}")
        return checker_svc.analyze_path(p)
    if req.code is not None:
        return checker_svc.analyze_code(req.code, req.kind, filename=req.filename or "input")
    raise HTTPException(
        400,
        "Provide either code (with kind) or file_path.",
    )
