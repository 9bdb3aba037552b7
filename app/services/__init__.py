"""Services for checker and AI integration."""

from .checker import CheckerService
from .ai import AIService

__all__ = ["CheckerService", "AIService"]
