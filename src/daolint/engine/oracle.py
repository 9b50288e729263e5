"""Type matching oracle.

Classifies a single type reference against an entity name:

- MATCH: the type is tied to the entity (parameterized type, enumerator,
  name containing the entity, registered subtype of the entity)
- TRIVIAL: a whitelisted primitive/value type with no entity semantics
- MISMATCH: anything else
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from daolint.adapters.base import KnowledgeBase
from daolint.core.config import TRIVIAL_TYPES
from daolint.core.models import TypeMatch, TypeReference

logger = logging.getLogger(__name__)


def classify_type(
    type_ref: TypeReference,
    entity_name: str,
    knowledge: KnowledgeBase,
    type_variable_bounds: Mapping[str, TypeReference] | None = None,
    trivial_types: Iterable[str] = TRIVIAL_TYPES,
    transitive_supertypes: bool = False,
) -> TypeMatch:
    """Classify one type reference.

    Rules are applied in order and the first one that applies wins:
    1. A bare type variable with a declared bound is replaced by its bound
    2. A parameterized type is a MATCH (type arguments are not inspected)
    3. A registered enumerator is a MATCH
    4. A name equal to or containing the entity name is a MATCH
    5. A registered subtype of the entity is a MATCH
    6. A whitelisted primitive/value type is TRIVIAL
    7. Anything else is a MISMATCH

    Args:
        type_ref: Type reference as written in source
        entity_name: Entity implied by the DAO class name
        knowledge: Enumerators and supertypes of the codebase
        type_variable_bounds: Type variable name -> declared upper bound
        trivial_types: Names of primitive/value types
        transitive_supertypes: Follow supertypes beyond one level

    Returns:
        The TypeMatch for the reference
    """
    bounds = type_variable_bounds or {}
    trivial = trivial_types if isinstance(trivial_types, (set, frozenset)) else set(trivial_types)

    seen: set[str] = set()
    current = type_ref
    while not current.is_parameterized and current.simple_name in bounds:
        name = current.simple_name
        if name in seen:
            logger.debug(f"Cyclic type variable bound for {type_ref.text}")
            return TypeMatch.MISMATCH
        seen.add(name)
        current = bounds[name]

    if current.is_parameterized:
        return TypeMatch.MATCH

    simple_name = current.simple_name
    if knowledge.is_enumerator(simple_name):
        return TypeMatch.MATCH
    if entity_name in simple_name:
        return TypeMatch.MATCH
    if knowledge.is_subtype_of(simple_name, entity_name, transitive=transitive_supertypes):
        return TypeMatch.MATCH
    if simple_name in trivial:
        return TypeMatch.TRIVIAL
    return TypeMatch.MISMATCH


class TypeOracle:
    """Type classifier bound to one knowledge base and whitelist.

    Holds no mutable state, so a single oracle may be shared by concurrent
    classifications.
    """

    def __init__(
        self,
        knowledge: KnowledgeBase,
        trivial_types: Iterable[str] = TRIVIAL_TYPES,
        transitive_supertypes: bool = False,
    ) -> None:
        """Initialize the oracle.

        Args:
            knowledge: Enumerators and supertypes of the codebase
            trivial_types: Names of primitive/value types
            transitive_supertypes: Follow supertypes beyond one level
        """
        self._knowledge = knowledge
        self._trivial_types = frozenset(trivial_types)
        self._transitive = transitive_supertypes

    @property
    def knowledge(self) -> KnowledgeBase:
        return self._knowledge

    @property
    def trivial_types(self) -> frozenset[str]:
        return self._trivial_types

    def classify(
        self,
        type_ref: TypeReference,
        entity_name: str,
        type_variable_bounds: Mapping[str, TypeReference] | None = None,
    ) -> TypeMatch:
        """Classify a type reference against an entity name."""
        return classify_type(
            type_ref,
            entity_name,
            self._knowledge,
            type_variable_bounds,
            self._trivial_types,
            self._transitive,
        )
