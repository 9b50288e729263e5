"""Signature keys for DAO methods.

A signature key identifies one overload of a method by its name, its arity
and the parameter types exactly as written in source:

    getAll/0
    getAll/2[int,List<Invoice>]

Parameter types are never resolved or canonicalized beyond whitespace
removal, so ``T`` stays ``T`` and ``List<Invoice>`` stays ``List<Invoice>``.
"""

from __future__ import annotations

from collections.abc import Iterable

from daolint.core.models import TypeReference, split_type_arguments


class KeyFormatError(ValueError):
    """Raised when a string is not a well-formed signature key."""


def _type_text(param: TypeReference | str) -> str:
    if isinstance(param, TypeReference):
        return param.text
    return "".join(param.split())


def build_key(name: str, parameters: Iterable[TypeReference | str] = ()) -> str:
    """Build the overload-safe signature key of a method.

    Args:
        name: Simple method name
        parameters: Parameter type references in declaration order

    Returns:
        "name/0" without parameters, "name/N[T1,...,TN]" otherwise
    """
    types = [_type_text(p) for p in parameters]
    if not types:
        return f"{name}/0"
    return f"{name}/{len(types)}[{','.join(types)}]"


def parse_key(key: str) -> tuple[str, int, list[str]]:
    """Split a signature key back into name, arity and parameter texts.

    Args:
        key: A key produced by build_key()

    Returns:
        Tuple of (name, arity, parameter type texts)

    Raises:
        KeyFormatError: If the key is malformed or its arity does not match
            the number of listed parameter types.
    """
    name, sep, rest = key.partition("/")
    if not sep or not name:
        raise KeyFormatError(f"Missing method name or '/' in key: {key!r}")

    if "[" in rest:
        arity_text, _, types_text = rest.partition("[")
        if not types_text.endswith("]"):
            raise KeyFormatError(f"Unterminated parameter list in key: {key!r}")
        types = split_type_arguments(types_text[:-1])
        if not types:
            raise KeyFormatError(f"Empty parameter list in key: {key!r}")
    else:
        arity_text, types = rest, []

    if not arity_text.isdigit():
        raise KeyFormatError(f"Invalid arity in key: {key!r}")
    arity = int(arity_text)

    if arity != len(types) or any(not t for t in types):
        raise KeyFormatError(
            f"Arity {arity} does not match {len(types)} parameter types in key: {key!r}"
        )
    return name, arity, types
