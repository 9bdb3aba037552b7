"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from .config import get_ai_api_key, get_web_features_path

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Validate config at startup and warn if .env, OPENAI_API_KEY or the dataset override is missing."""
    env_file = Path(".env")
    env_exists = env_file.exists()
    key_set = bool(get_ai_api_key())
    if not env_exists and not key_set:
        logger.warning(".env file not found. AI suggestions will use the static fallback table.")
        logger.warning("Create .env and set OPENAI_API_KEY for AI suggestions.")
    elif not key_set:
        logger.warning("OPENAI_API_KEY not set. AI suggestions will use the static fallback table.")
    dataset = get_web_features_path()
    if dataset is not None and not dataset.is_file():
        logger.warning("BASELINE_WEB_FEATURES_PATH %s does not exist; using override table only.", dataset)
