"""Configuration from environment."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_AI_MODEL = "gpt-4"
DEFAULT_AI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_AI_TIMEOUT = 20.0


def get_ai_api_key() -> str:
    """Chat-completion API key (empty disables remote suggestions)."""
    return os.environ.get("OPENAI_API_KEY", "").strip()


def get_ai_model() -> str:
    """Chat-completion model. Default: gpt-4."""
    return os.environ.get("BASELINE_AI_MODEL", DEFAULT_AI_MODEL).strip() or DEFAULT_AI_MODEL


def get_ai_base_url() -> str:
    """OpenAI-compatible endpoint base URL."""
    return os.environ.get("BASELINE_AI_BASE_URL", DEFAULT_AI_BASE_URL).strip() or DEFAULT_AI_BASE_URL


def get_ai_timeout() -> float:
    """Seconds to wait for one suggestion before falling back."""
    try:
        timeout = float(os.environ.get("BASELINE_AI_TIMEOUT", DEFAULT_AI_TIMEOUT))
    except ValueError:
        return DEFAULT_AI_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_AI_TIMEOUT


def get_web_features_path() -> Optional[Path]:
    """Optional path to a web-features data.json replacing the bundled dataset."""
    value = os.environ.get("BASELINE_WEB_FEATURES_PATH", "").strip()
    return Path(value) if value else None


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000
