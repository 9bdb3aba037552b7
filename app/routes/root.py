"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..templates import render_homepage

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: paste-in form."""
    return render_homepage()
