"""Java source adapter submodule.

This module provides the Java adapter for turning Java source code
into declaration events and a codebase knowledge base.
"""

from daolint.adapters.java.adapter import JavaAdapter
from daolint.adapters.java.events import JavaEventEmitter
from daolint.adapters.java.scanner import JavaScanner

__all__ = ["JavaAdapter", "JavaEventEmitter", "JavaScanner"]
