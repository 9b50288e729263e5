"""Java scanner for Phase 1 knowledge base construction.

This module scans Java source files to collect every enum type and the
directly declared supertypes of every type.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tree_sitter import Node, Parser

from daolint.adapters.base import KnowledgeBase
from daolint.adapters.java.ast_utils import TYPE_DECLARATIONS, JavaAstUtils

logger = logging.getLogger(__name__)


class JavaScanner:
    """Phase 1: Scan Java files to build the knowledge base.

    Registers enums (including nested ones) by simple name and the
    extends/implements names of classes, interfaces, enums and records.
    """

    def __init__(self, parser: Parser, source_glob: str = "*.java") -> None:
        """Initialize the scanner.

        Args:
            parser: Configured tree-sitter parser for Java
            source_glob: Glob pattern selecting source files
        """
        self._parser = parser
        self._source_glob = source_glob

    def scan_directories(self, source_paths: Sequence[Path]) -> KnowledgeBase:
        """Scan all Java files under several roots.

        Args:
            source_paths: Root directories (or single files) of Java source code

        Returns:
            KnowledgeBase containing all enumerators and supertypes
        """
        knowledge = KnowledgeBase()
        for source_path in source_paths:
            self.scan_directory(source_path, knowledge)
        return knowledge

    def scan_directory(
        self, source_path: Path, knowledge: KnowledgeBase | None = None
    ) -> KnowledgeBase:
        """Scan all Java files under one root.

        Files that cannot be read or decoded are logged and skipped.

        Args:
            source_path: Root directory (or single file) of Java source code
            knowledge: Knowledge base to populate (a new one by default)

        Returns:
            The populated knowledge base
        """
        if knowledge is None:
            knowledge = KnowledgeBase()

        files = [source_path] if source_path.is_file() else sorted(source_path.rglob(self._source_glob))
        for java_file in files:
            try:
                self.scan_source(java_file.read_bytes(), knowledge)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to scan {java_file}: {e}")

        return knowledge

    def scan_source(self, content: bytes, knowledge: KnowledgeBase) -> None:
        """Scan the content of a single Java file.

        Args:
            content: Source file content
            knowledge: Knowledge base to populate
        """
        tree = self._parser.parse(content)
        self._scan_type_declarations(tree.root_node, content, knowledge)

    def _scan_type_declarations(
        self, node: Node, content: bytes, knowledge: KnowledgeBase
    ) -> None:
        """Scan for type declarations anywhere below a node.

        Nested and local types can appear anywhere below a declaration, so
        every node is visited, using an explicit stack rather than recursion.

        Args:
            node: Root of the subtree to scan
            content: Source file content
            knowledge: Knowledge base to populate
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type in TYPE_DECLARATIONS:
                name_node = current.child_by_field_name("name")
                if name_node is not None:
                    type_name = JavaAstUtils.get_node_text(name_node, content)
                    if current.type == "enum_declaration":
                        knowledge.add_enumerator(type_name)
                    supertypes = JavaAstUtils.extract_supertypes(current, content)
                    if supertypes:
                        knowledge.add_supertypes(type_name, supertypes)
            stack.extend(child for child in current.named_children if child.named_child_count)
