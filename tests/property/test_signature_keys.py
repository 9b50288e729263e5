"""Property tests for signature keys.

For any method name and parameter list:
- parse_key() recovers the name, arity and parameter texts of build_key()
- keys differ whenever the parameter texts differ
"""

from __future__ import annotations

from hypothesis import assume, given, strategies as st

from daolint.core.models import TypeReference
from daolint.engine.signature import build_key, parse_key

simple_type = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,6}", fullmatch=True)


@st.composite
def type_text(draw: st.DrawFn) -> str:
    """Generate a simple, generic or array type text."""
    base = draw(simple_type)
    shape = draw(st.sampled_from(["plain", "generic", "array", "varargs"]))
    if shape == "generic":
        args = draw(st.lists(simple_type, min_size=1, max_size=3))
        return f"{base}<{','.join(args)}>"
    if shape == "array":
        return f"{base}[]"
    if shape == "varargs":
        return f"{base}..."
    return base


method_name = st.from_regex(r"[a-z][a-zA-Z0-9_]{0,10}", fullmatch=True)


class TestSignatureKeys:
    """Properties of build_key() and parse_key()."""

    @given(name=method_name, params=st.lists(type_text(), max_size=4))
    def test_parse_inverts_build(self, name: str, params: list[str]) -> None:
        key = build_key(name, [TypeReference(p) for p in params])
        assert parse_key(key) == (name, len(params), params)

    @given(
        name=method_name,
        first=st.lists(type_text(), min_size=1, max_size=3),
        second=st.lists(type_text(), min_size=1, max_size=3),
    )
    def test_overloads_distinct(self, name: str, first: list[str], second: list[str]) -> None:
        assume(first != second)
        assert build_key(name, first) != build_key(name, second)
