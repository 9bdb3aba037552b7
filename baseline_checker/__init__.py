"""
Baseline API checker: detects deprecated and non-Baseline web-platform APIs.
"""

from .issue import AISuggestion, ApiStatus, Issue, ScanResult, SourceUnit, UnitKind
from .knowledge_base import CompatibilityDescriptor, CompatibilityKnowledgeBase
from .main_checker import BaselineChecker

__all__ = [
    'AISuggestion',
    'ApiStatus',
    'BaselineChecker',
    'CompatibilityDescriptor',
    'CompatibilityKnowledgeBase',
    'Issue',
    'ScanResult',
    'SourceUnit',
    'UnitKind',
]
