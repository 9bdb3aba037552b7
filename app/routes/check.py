"""Check route (scan only)."""

from fastapi import APIRouter

from ..schemas import ScanRequest, ScanResponse
from ..services.checker import result_to_response
from ..utils import run_scan

router = APIRouter()


@router.post("/check", response_model=ScanResponse)
def check(req: ScanRequest) -> ScanResponse:
    """Scan only. No AI suggestions."""
    return result_to_response(run_scan(req))
