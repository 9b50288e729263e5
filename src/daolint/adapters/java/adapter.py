"""Java source adapter using tree-sitter-java.

This module implements the SourceAdapter interface for Java source code,
using tree-sitter for parsing and a two-phase approach: a knowledge scan
over the whole codebase, then declaration extraction per file.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser

from daolint.adapters.base import DeclarationUnit, KnowledgeBase, SourceAdapter
from daolint.adapters.java.events import JavaEventEmitter
from daolint.adapters.java.scanner import JavaScanner
from daolint.core.models import LanguageType


class JavaAdapter(SourceAdapter):
    """Java source adapter using tree-sitter.

    Implements two-phase parsing:
    - Phase 1: Scan all files to collect enumerators and supertypes
    - Phase 2: Emit declaration events for each top-level type
    """

    def __init__(self, source_glob: str = "*.java") -> None:
        """Initialize the Java adapter.

        Args:
            source_glob: Glob pattern selecting source files
        """
        super().__init__(source_glob)
        self._language = Language(tsjava.language())
        self._parser = Parser(self._language)
        self._scanner = JavaScanner(self._parser, source_glob)
        self._emitter = JavaEventEmitter(self._parser)

    @property
    def language_type(self) -> LanguageType:
        """Return Java as the supported language type."""
        return LanguageType.JAVA

    def build_knowledge_base(self, source_paths: Sequence[Path]) -> KnowledgeBase:
        """Phase 1: Scan all Java files under the given roots.

        Args:
            source_paths: Root directories (or single files) of Java source code

        Returns:
            KnowledgeBase with every enumerator and supertype found
        """
        return self._scanner.scan_directories(source_paths)

    def scan_source(self, source: str | bytes) -> KnowledgeBase:
        """Build a knowledge base from a single piece of source text."""
        content = source.encode("utf-8") if isinstance(source, str) else source
        knowledge = KnowledgeBase()
        self._scanner.scan_source(content, knowledge)
        return knowledge

    def extract_declarations(
        self, file_path: Path, source_root: Path
    ) -> list[DeclarationUnit]:
        """Phase 2: Emit declaration events for each top-level type of a file.

        Args:
            file_path: Java file to parse
            source_root: Root directory for relative path calculation

        Returns:
            One DeclarationUnit per top-level type, in source order
        """
        content = file_path.read_text(encoding="utf-8").encode("utf-8")
        if source_root.is_dir():
            relative = file_path.relative_to(source_root).as_posix()
        else:
            relative = file_path.name
        return self.parse_source(content, relative)

    def parse_source(self, source: str | bytes, file_path: str = "<string>") -> list[DeclarationUnit]:
        """Emit declaration units for a piece of Java source text.

        Args:
            source: Java source code
            file_path: Name recorded on the returned units

        Returns:
            One DeclarationUnit per top-level type, in source order
        """
        content = source.encode("utf-8") if isinstance(source, str) else source
        return [
            DeclarationUnit(file_path=file_path, class_name=name, events=events)
            for name, events in self._emitter.emit_source(content)
        ]
