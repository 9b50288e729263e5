"""Services layer for daolint business logic.

This module provides high-level services for running conformance checks
over source trees.
"""

from daolint.services.analyzer_service import AnalyzerService, CheckResult

__all__ = ["AnalyzerService", "CheckResult"]
