"""Verdict engine.

Decides whether a DAO method conforms to the naming convention and records
its signature key into one of two disjoint result sets.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from daolint.core.models import (
    ClassificationResult,
    MethodDeclaration,
    TypeMatch,
    TypeReference,
    Verdict,
)
from daolint.engine.oracle import TypeOracle
from daolint.engine.signature import build_key

logger = logging.getLogger(__name__)


def classify_method(
    declaration: MethodDeclaration,
    entity_name: str,
    oracle: TypeOracle,
    class_bounds: Mapping[str, TypeReference] | None = None,
) -> Verdict:
    """Apply the two-tier rule to one method declaration.

    A non-void return type is trusted unless it is a MISMATCH; a mismatching
    return type is redeemed only by a parameter that is an explicit MATCH.
    A void method conforms unless one of its parameters is a MISMATCH.

    Args:
        declaration: The method to classify
        entity_name: Entity implied by the DAO class name
        oracle: Type classifier
        class_bounds: Class-level type variable bounds; type variables the
            method declares itself shadow them

    Returns:
        CONFORMING or NON_CONFORMING
    """
    # A method-level type variable hides the class-level one of the same
    # name, whether or not the method gives it a bound.
    hidden = declaration.type_variables.union(declaration.type_variable_bounds)
    bounds = {k: v for k, v in (class_bounds or {}).items() if k not in hidden}
    bounds.update(declaration.type_variable_bounds)

    def matches(type_ref: TypeReference) -> TypeMatch:
        return oracle.classify(type_ref, entity_name, bounds)

    if declaration.return_type is not None:
        if matches(declaration.return_type) is not TypeMatch.MISMATCH:
            return Verdict.CONFORMING
        if any(matches(p) is TypeMatch.MATCH for p in declaration.parameters):
            return Verdict.CONFORMING
        return Verdict.NON_CONFORMING

    if any(matches(p) is TypeMatch.MISMATCH for p in declaration.parameters):
        return Verdict.NON_CONFORMING
    return Verdict.CONFORMING


class ResultSets:
    """Mutable conforming/non-conforming key sets of one traversal.

    A key is kept in exactly one set. Recording the same key twice with
    the same verdict is a no-op; if verdicts disagree the key stays
    non-conforming.
    """

    def __init__(self) -> None:
        self.conforming: set[str] = set()
        self.non_conforming: set[str] = set()

    def record(self, key: str, verdict: Verdict) -> None:
        if verdict is Verdict.NON_CONFORMING:
            self.conforming.discard(key)
            self.non_conforming.add(key)
        elif key in self.non_conforming:
            logger.debug(f"Conflicting verdicts for {key}, keeping non-conforming")
        else:
            self.conforming.add(key)

    def snapshot(
        self, class_name: str | None = None, entity_name: str | None = None
    ) -> ClassificationResult:
        """Freeze the current sets into a ClassificationResult."""
        return ClassificationResult(
            class_name=class_name,
            entity_name=entity_name,
            conforming=frozenset(self.conforming),
            non_conforming=frozenset(self.non_conforming),
        )


class VerdictEngine:
    """Classifies methods of one DAO class and accumulates their keys."""

    def __init__(
        self,
        oracle: TypeOracle,
        entity_name: str,
        class_bounds: Mapping[str, TypeReference] | None = None,
        results: ResultSets | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            oracle: Type classifier
            entity_name: Entity implied by the DAO class name
            class_bounds: Class-level type variable bounds
            results: Result sets to record into (fresh sets by default)
        """
        self._oracle = oracle
        self.entity_name = entity_name
        self._class_bounds = dict(class_bounds or {})
        self.results = results if results is not None else ResultSets()

    def judge(self, declaration: MethodDeclaration) -> Verdict:
        """Classify a method and record its signature key.

        Args:
            declaration: The method to classify

        Returns:
            The verdict recorded for the method
        """
        verdict = classify_method(
            declaration, self.entity_name, self._oracle, self._class_bounds
        )
        key = build_key(declaration.name, declaration.parameters)
        self.results.record(key, verdict)
        logger.debug(f"{key}: {verdict.value}")
        return verdict
