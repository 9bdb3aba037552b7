"""
Checkers package for non-Baseline API usage.
"""

from .markup_checker import MarkupChecker
from .script_checker import ScriptChecker

__all__ = [
    'MarkupChecker',
    'ScriptChecker',
]
