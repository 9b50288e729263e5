"""Base classes for source front-ends.

This module defines the SourceAdapter abstract interface for implementing
language-specific front-ends, along with the KnowledgeBase collected by
their definition scan.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from daolint.core.models import DeclarationEvent, LanguageType


class KnowledgeBase(BaseModel):
    """Codebase-wide facts used while classifying types.

    Populated by a full definition scan before any DAO is classified and
    treated as read-only afterwards, so one instance can be shared by
    every classification.
    """

    enumerators: set[str] = Field(
        default_factory=set, description="Simple names of enum types"
    )
    supertypes: dict[str, set[str]] = Field(
        default_factory=dict,
        description="simple type name -> directly declared supertype names",
    )

    def add_enumerator(self, name: str) -> None:
        """Register an enum type by simple name."""
        self.enumerators.add(name)

    def add_supertypes(self, type_name: str, supertypes: Sequence[str]) -> None:
        """Register the direct extends/implements names of a type."""
        if type_name not in self.supertypes:
            self.supertypes[type_name] = set()
        self.supertypes[type_name].update(supertypes)

    def is_enumerator(self, name: str) -> bool:
        return name in self.enumerators

    def get_supertypes(self, type_name: str) -> set[str]:
        """Get the direct supertypes of a type, or an empty set."""
        return self.supertypes.get(type_name, set())

    def is_subtype_of(self, type_name: str, supertype: str, transitive: bool = False) -> bool:
        """Check whether a type declares the given supertype.

        Args:
            type_name: Simple name of the candidate subtype
            supertype: Simple name of the expected supertype
            transitive: Follow supertypes of supertypes when True; otherwise
                only the directly declared supertypes are looked at.

        Returns:
            True if the supertype was found
        """
        direct = self.get_supertypes(type_name)
        if supertype in direct or not transitive:
            return supertype in direct

        visited = {type_name}
        queue = deque(direct)
        while queue:
            current = queue.popleft()
            if current == supertype:
                return True
            if current in visited:
                continue
            visited.add(current)
            queue.extend(self.get_supertypes(current) - visited)
        return False

    def merge(self, other: KnowledgeBase) -> KnowledgeBase:
        """Return a new knowledge base holding the facts of both."""
        merged = KnowledgeBase(enumerators=self.enumerators | other.enumerators)
        for source in (self, other):
            for type_name, supertypes in source.supertypes.items():
                merged.add_supertypes(type_name, sorted(supertypes))
        return merged


class DeclarationUnit(BaseModel):
    """Declaration events of one top-level type in one source file."""

    file_path: str = Field(..., description="Source file, relative to the scan root")
    class_name: str = Field(..., description="Simple name of the top-level type")
    events: list[DeclarationEvent] = Field(default_factory=list)


class SourceAdapter(ABC):
    """Abstract base class for language-specific front-ends.

    Implements a two-phase strategy:
    - Phase 1 (Knowledge Scan): Scan all files to collect enumerators and
      supertypes into a KnowledgeBase
    - Phase 2 (Declaration Extraction): Turn each file into declaration
      events for the classification engine

    Subclasses must implement the abstract methods for their specific language.
    """

    def __init__(self, source_glob: str) -> None:
        """Initialize the adapter.

        Args:
            source_glob: Glob pattern selecting source files under a root
        """
        self.source_glob = source_glob

    @property
    @abstractmethod
    def language_type(self) -> LanguageType:
        """Return the supported language type."""
        ...

    @abstractmethod
    def build_knowledge_base(self, source_paths: Sequence[Path]) -> KnowledgeBase:
        """Phase 1: Scan all files under the given roots.

        Args:
            source_paths: Root directories (or single files) to scan

        Returns:
            KnowledgeBase with every enumerator and supertype found
        """
        ...

    @abstractmethod
    def extract_declarations(
        self, file_path: Path, source_root: Path
    ) -> list[DeclarationUnit]:
        """Phase 2: Emit declaration events for each top-level type of a file.

        Args:
            file_path: Source file to parse
            source_root: Root directory for relative path calculation

        Returns:
            One DeclarationUnit per top-level type, in source order

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        ...

    def iter_source_files(self, source_path: Path) -> Iterator[Path]:
        """Yield the source files under a root in a stable order.

        A path that is itself a file is yielded as-is.
        """
        if source_path.is_file():
            yield source_path
            return
        yield from sorted(source_path.rglob(self.source_glob))
