"""Analyze route (scan plus AI suggestions)."""

from fastapi import APIRouter

from ..schemas import ScanRequest, ScanResponse
from ..services import AIService
from ..services.checker import result_to_response
from ..utils import run_scan

router = APIRouter()
ai_svc = AIService()


@router.post("/analyze", response_model=ScanResponse)
def analyze(req: ScanRequest) -> ScanResponse:
    """Full analysis: scan, then attach a suggestion to every issue."""
    result = run_scan(req)
    ai_svc.enrich(result.issues)
    return result_to_response(result)
