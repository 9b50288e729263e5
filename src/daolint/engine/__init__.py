"""Classification engine: type oracle, signature keys, verdicts and walker."""

from daolint.engine.oracle import TypeOracle, classify_type
from daolint.engine.signature import KeyFormatError, build_key, parse_key
from daolint.engine.verdict import ResultSets, VerdictEngine, classify_method
from daolint.engine.walker import DeclarationWalker, classify_events, derive_entity_name

__all__ = [
    "DeclarationWalker",
    "KeyFormatError",
    "ResultSets",
    "TypeOracle",
    "VerdictEngine",
    "build_key",
    "classify_events",
    "classify_method",
    "classify_type",
    "derive_entity_name",
    "parse_key",
]
