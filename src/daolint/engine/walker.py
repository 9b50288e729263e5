"""Declaration walker.

Consumes the declaration events of one DAO class, keeps track of class
nesting and forwards every eligible method to the verdict engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from daolint.adapters.base import KnowledgeBase
from daolint.core.config import TRIVIAL_TYPES
from daolint.core.models import (
    ClassClosed,
    ClassificationResult,
    ClassOpened,
    ClassScope,
    DeclarationEvent,
    MethodDeclaration,
    MethodDeclared,
    TypeReference,
    Visibility,
)
from daolint.engine.oracle import TypeOracle
from daolint.engine.verdict import ResultSets, VerdictEngine

logger = logging.getLogger(__name__)


def derive_entity_name(class_name: str, suffix: str = "DAO") -> str:
    """Strip the conventional suffix from a class name.

    A class named exactly like the suffix, or not ending with it, keeps
    its full name so the entity name is never empty.

    Args:
        class_name: Simple class name, e.g. "InvoiceDAO"
        suffix: Convention token, e.g. "DAO"

    Returns:
        The entity name, e.g. "Invoice"
    """
    if suffix and class_name.endswith(suffix) and len(class_name) > len(suffix):
        return class_name[: -len(suffix)]
    return class_name


class DeclarationWalker:
    """Drives classification of one DAO class from its declaration events.

    The first class opened is the DAO class. Every class opened after it
    (nested or anonymous) is opaque: methods declared inside it are never
    classified. Each walker owns its scope stack and result sets; the
    knowledge base is only read.
    """

    def __init__(
        self,
        knowledge: KnowledgeBase | None = None,
        entity_suffix: str = "DAO",
        trivial_types: Iterable[str] = TRIVIAL_TYPES,
        transitive_supertypes: bool = False,
        oracle: TypeOracle | None = None,
    ) -> None:
        """Initialize the walker.

        Args:
            knowledge: Enumerators and supertypes (empty by default)
            entity_suffix: Suffix stripped from the class name
            trivial_types: Names of primitive/value types
            transitive_supertypes: Follow supertypes beyond one level
            oracle: Pre-built oracle, overrides the three arguments above
        """
        self._oracle = oracle or TypeOracle(
            knowledge or KnowledgeBase(),
            trivial_types=trivial_types,
            transitive_supertypes=transitive_supertypes,
        )
        self._suffix = entity_suffix
        self._scopes: list[ClassScope] = []
        self._results = ResultSets()
        self._engine: VerdictEngine | None = None
        self.class_name: str | None = None
        self.entity_name: str | None = None

    @property
    def depth(self) -> int:
        """Number of currently open class bodies."""
        return len(self._scopes)

    @property
    def result(self) -> ClassificationResult:
        """Read-only snapshot of the result sets."""
        return self._results.snapshot(self.class_name, self.entity_name)

    def on_class_open(
        self,
        name: str,
        is_anonymous: bool = False,
        is_nested: bool = False,
        type_variable_bounds: Mapping[str, TypeReference] | None = None,
    ) -> None:
        """A class body starts."""
        if self._engine is None:
            self.class_name = name
            self.entity_name = derive_entity_name(name, self._suffix)
            self._engine = VerdictEngine(
                self._oracle,
                self.entity_name,
                class_bounds=type_variable_bounds,
                results=self._results,
            )
            self._scopes.append(ClassScope(name=name, is_top_level_dao_class=True))
            logger.debug(f"Classifying {name} against entity {self.entity_name}")
            return

        if not (is_anonymous or is_nested):
            logger.debug(f"Class {name} opened after {self.class_name}, treating as opaque")
        self._scopes.append(ClassScope(name=name, is_opaque=True))

    def on_class_close(self) -> None:
        """The innermost open class body ends."""
        if not self._scopes:
            logger.debug("Ignoring class close without a matching open")
            return
        self._scopes.pop()

    def on_method_declaration(
        self,
        name: str,
        visibility: Visibility,
        return_type: TypeReference | None,
        parameters: Sequence[TypeReference] = (),
        type_variable_bounds: Mapping[str, TypeReference] | None = None,
        modifiers: Iterable[str] = (),
        type_variables: Iterable[str] = (),
    ) -> None:
        """A method or constructor is declared."""
        self.on_method(
            MethodDeclaration(
                name=name,
                modifiers=frozenset(modifiers),
                visibility=visibility,
                return_type=return_type,
                parameters=tuple(parameters),
                type_variable_bounds=dict(type_variable_bounds or {}),
                type_variables=frozenset(type_variables) | frozenset(type_variable_bounds or ()),
            )
        )

    def on_method(self, declaration: MethodDeclaration) -> None:
        """Forward an eligible method to the verdict engine."""
        if self._engine is None or not self._scopes:
            logger.debug(f"Ignoring {declaration.name}: declared outside a class")
            return
        if self._scopes[-1].is_opaque:
            logger.debug(f"Ignoring {declaration.name}: inside {self._scopes[-1].name}")
            return
        if declaration.visibility != Visibility.PUBLIC:
            logger.debug(f"Ignoring {declaration.name}: {declaration.visibility.value}")
            return
        if declaration.name == self.class_name:
            logger.debug(f"Ignoring constructor {declaration.name}")
            return
        self._engine.judge(declaration)

    def handle(self, event: DeclarationEvent) -> None:
        """Dispatch a single declaration event."""
        if isinstance(event, ClassOpened):
            self.on_class_open(
                event.name, event.anonymous, event.nested, event.type_variable_bounds
            )
        elif isinstance(event, ClassClosed):
            self.on_class_close()
        elif isinstance(event, MethodDeclared):
            self.on_method(event.declaration)

    def walk(self, events: Iterable[DeclarationEvent]) -> ClassificationResult:
        """Consume a whole event stream and return the result snapshot."""
        for event in events:
            self.handle(event)
        return self.result


def classify_events(
    events: Iterable[DeclarationEvent],
    knowledge: KnowledgeBase | None = None,
    entity_suffix: str = "DAO",
    trivial_types: Iterable[str] = TRIVIAL_TYPES,
    transitive_supertypes: bool = False,
) -> ClassificationResult:
    """Classify one DAO class from its events with a fresh walker.

    Args:
        events: Declaration events of a single top-level class
        knowledge: Enumerators and supertypes (empty by default)
        entity_suffix: Suffix stripped from the class name
        trivial_types: Names of primitive/value types
        transitive_supertypes: Follow supertypes beyond one level

    Returns:
        Conforming and non-conforming signature keys
    """
    walker = DeclarationWalker(
        knowledge,
        entity_suffix=entity_suffix,
        trivial_types=trivial_types,
        transitive_supertypes=transitive_supertypes,
    )
    return walker.walk(events)
