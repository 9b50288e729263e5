"""Analyzer service for checking DAO naming conventions over a source tree.

This module provides the AnalyzerService for orchestrating the source
adapter's knowledge scan, per-class classification and report building.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from daolint.adapters import JavaAdapter, KnowledgeBase, SourceAdapter
from daolint.adapters.base import DeclarationUnit
from daolint.core.config import DaolintConfig, get_config
from daolint.core.models import CheckReport, ClassificationResult, DaoReport
from daolint.engine import DeclarationWalker, TypeOracle

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Result of a conformance check run."""

    source_path: str
    files_scanned: int = 0
    enumerators_count: int = 0
    supertypes_count: int = 0
    reports: list[DaoReport] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every file could be analyzed."""
        return len(self.errors) == 0

    @property
    def classes_checked(self) -> int:
        return len(self.reports)

    @property
    def conforming_count(self) -> int:
        return sum(len(r.conforming) for r in self.reports)

    @property
    def violation_count(self) -> int:
        return sum(len(r.non_conforming) for r in self.reports)

    def to_report(self, entity_suffix: str) -> CheckReport:
        """Build the serializable root report."""
        return CheckReport(entity_suffix=entity_suffix, reports=list(self.reports))


class AnalyzerService:
    """Service for checking DAO classes of a source tree.

    Runs the adapter's knowledge scan once, then classifies every selected
    top-level type with its own walker against the shared, read-only
    knowledge base.
    """

    def __init__(
        self,
        config: DaolintConfig | None = None,
        adapter: SourceAdapter | None = None,
    ) -> None:
        """Initialize analyzer service.

        Args:
            config: Settings to use (the cached global config by default).
            adapter: Source adapter (a JavaAdapter by default).
        """
        self._config = config or get_config()
        self._adapter = adapter or JavaAdapter(self._config.source_glob)

    @property
    def config(self) -> DaolintConfig:
        return self._config

    def build_knowledge_base(
        self, source_path: Path, extra_paths: Sequence[Path] = ()
    ) -> KnowledgeBase:
        """Scan the source tree and any extra roots for enumerators and supertypes.

        Args:
            source_path: Root directory of source code.
            extra_paths: Further roots whose types are known but not checked.

        Returns:
            The merged knowledge base.
        """
        return self._adapter.build_knowledge_base([source_path, *extra_paths])

    def is_dao_class(self, class_name: str) -> bool:
        """Check whether a top-level type should be classified."""
        if not self._config.dao_only:
            return True
        return class_name.endswith(self._config.entity_suffix)

    def classify_unit(
        self, unit: DeclarationUnit, knowledge: KnowledgeBase
    ) -> ClassificationResult:
        """Classify one top-level type with a fresh walker.

        Args:
            unit: Declaration events of the type.
            knowledge: Read-only knowledge base.

        Returns:
            Conforming and non-conforming signature keys.
        """
        oracle = TypeOracle(
            knowledge,
            trivial_types=self._config.trivial_types,
            transitive_supertypes=self._config.transitive_supertypes,
        )
        walker = DeclarationWalker(entity_suffix=self._config.entity_suffix, oracle=oracle)
        return walker.walk(unit.events)

    def check(
        self,
        source_path: Path,
        extra_paths: Sequence[Path] = (),
        knowledge: KnowledgeBase | None = None,
    ) -> CheckResult:
        """Check every DAO class under a source path.

        Files that cannot be read are logged, recorded as errors and skipped;
        the run continues with the remaining files.

        Args:
            source_path: Root directory (or single file) of source code.
            extra_paths: Further roots for the knowledge scan.
            knowledge: Pre-built knowledge base; scanned when omitted.

        Returns:
            CheckResult with one report per classified class.
        """
        result = CheckResult(source_path=str(source_path))

        if not source_path.exists():
            result.errors.append(f"Source path does not exist: {source_path}")
            return result

        if knowledge is None:
            knowledge = self.build_knowledge_base(source_path, extra_paths)
        result.enumerators_count = len(knowledge.enumerators)
        result.supertypes_count = len(knowledge.supertypes)

        for file_path in self._adapter.iter_source_files(source_path):
            result.files_scanned += 1
            try:
                units = self._adapter.extract_declarations(file_path, source_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to parse {file_path}: {e}")
                result.errors.append(f"{file_path}: {e}")
                continue

            for unit in units:
                if not self.is_dao_class(unit.class_name):
                    logger.debug(f"Skipping {unit.class_name}: not a DAO class")
                    continue
                classification = self.classify_unit(unit, knowledge)
                result.reports.append(
                    DaoReport.from_result(classification, file_path=unit.file_path)
                )

        return result
