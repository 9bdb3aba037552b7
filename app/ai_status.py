"""Suggestion provider status for the web UI and /ai-status."""

import logging
import time
from typing import Any, Dict, Optional

from openai import OpenAI

from .config import get_ai_api_key, get_ai_base_url, get_ai_model

logger = logging.getLogger(__name__)

CACHE_TTL = 30.0  # seconds
PROBE_TIMEOUT = 5.0

_status_cache: Optional[Dict[str, Any]] = None
_cache_timestamp: float = 0


def reset_ai_status_cache() -> None:
    global _status_cache, _cache_timestamp
    _status_cache = None
    _cache_timestamp = 0


def _key_problem(key: str) -> Optional[str]:
    """Reason a configured key cannot work, without calling the provider."""
    if len(key) < 10:
        return "OPENAI_API_KEY appears invalid (too short)"
    if key.startswith("your_api_key"):
        return "OPENAI_API_KEY not configured (still using placeholder)"
    return None


def _probe(key: str, model: str) -> str:
    """Send a one-token completion. Returns an empty string on success, else the reason."""
    try:
        OpenAI(api_key=key, base_url=get_ai_base_url(), max_retries=0).chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": "test"}],
            max_tokens=1,
            timeout=PROBE_TIMEOUT,
        )
    except Exception as e:
        msg = str(e)
        logger.info("Suggestion provider probe failed: %s", msg[:200])
        if "401" in msg or "Unauthorized" in msg or "Invalid" in msg:
            return "OPENAI_API_KEY is invalid or expired"
        if "timeout" in msg.lower() or "timed out" in msg.lower():
            return "API request timed out (check network)"
        return f"API test failed: {msg[:100]}"
    return ""


def get_ai_status() -> Dict[str, Any]:
    """Availability of remote suggestions. Only a real probe result is cached."""
    global _status_cache, _cache_timestamp

    if _status_cache and (time.time() - _cache_timestamp) < CACHE_TTL:
        return _status_cache

    model = get_ai_model()
    key = get_ai_api_key()
    if not key:
        return {
            "available": False,
            "reason": "OPENAI_API_KEY not set; using static suggestions",
            "api_key_set": False,
            "model": model,
        }

    problem = _key_problem(key)
    if problem:
        return {"available": False, "reason": problem, "api_key_set": True, "model": model}

    problem = _probe(key, model)
    _status_cache = {
        "available": not problem,
        "reason": problem or "AI suggestions available",
        "api_key_set": True,
        "model": model,
    }
    _cache_timestamp = time.time()
    return _status_cache
