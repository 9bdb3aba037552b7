"""FastAPI app: /, /health, /ai-status, /check, /analyze, /review."""

from deps import CORSMiddleware, FastAPI

from .logging_config import configure_logging
from .routes import analyze_router, check_router, health_router, review_router, root_router
from .startup import validate_config

app = FastAPI(
    title="Baseline API Checker",
    description="Detects deprecated and non-Baseline web APIs, with optional AI replacement suggestions.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(check_router)
app.include_router(analyze_router)
app.include_router(review_router)


@app.on_event("startup")
def _startup() -> None:
    """Configure logging and warn about missing configuration."""
    configure_logging()
    validate_config()
