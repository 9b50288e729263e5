"""Source adapters for parsing different programming languages.

This module provides the base classes for implementing language-specific
front-ends that produce declaration events and knowledge bases.
"""

from daolint.adapters.base import DeclarationUnit, KnowledgeBase, SourceAdapter
from daolint.adapters.java import JavaAdapter

__all__ = [
    "DeclarationUnit",
    "JavaAdapter",
    "KnowledgeBase",
    "SourceAdapter",
]
