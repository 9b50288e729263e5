"""Data models for DAO method conformance checking.

This module defines the value objects exchanged between the parsing
front-end, the classification engine and the reporting layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class LanguageType(str, Enum):
    """Supported programming languages."""

    JAVA = "java"


class Visibility(str, Enum):
    """Visibility/access modifier."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE = "package"  # Java default


class TypeMatch(str, Enum):
    """Outcome of matching a single type reference against an entity."""

    MATCH = "match"
    TRIVIAL = "trivial"
    MISMATCH = "mismatch"


class Verdict(str, Enum):
    """Classification bucket for a DAO method."""

    CONFORMING = "conforming"
    NON_CONFORMING = "non_conforming"


def split_type_arguments(text: str) -> list[str]:
    """Split a comma separated type list on top-level commas only.

    Args:
        text: Text such as "A,Map<B,C>,D"

    Returns:
        The top-level items, e.g. ["A", "Map<B,C>", "D"]
    """
    items: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif ch == "," and depth == 0:
            items.append(text[start:i])
            start = i + 1
    tail = text[start:]
    if tail or items:
        items.append(tail)
    return items


class TypeReference(BaseModel):
    """A type as written in source, e.g. "Invoice", "List<Invoice>" or "T".

    The text is stored without whitespace so that the same type written
    with different spacing yields the same reference.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Type text as written")

    def __init__(self, text: str | None = None, **data: object) -> None:
        if text is not None:
            data["text"] = text
        if isinstance(data.get("text"), str):
            data["text"] = "".join(data["text"].split())  # type: ignore[union-attr]
        super().__init__(**data)

    def __str__(self) -> str:
        return self.text

    @property
    def is_parameterized(self) -> bool:
        """Whether the reference carries generic type arguments."""
        return "<" in self.text

    @property
    def base_name(self) -> str:
        """Text before the first generic bracket."""
        return self.text.split("<", 1)[0]

    @property
    def is_array(self) -> bool:
        return self.text.endswith("[]") or self.text.endswith("...")

    @property
    def simple_name(self) -> str:
        """Unqualified element name, without generics or array suffixes."""
        name = self.base_name
        while name.endswith("[]"):
            name = name[:-2]
        if name.endswith("..."):
            name = name[:-3]
        return name.rsplit(".", 1)[-1]

    @property
    def type_arguments(self) -> list[TypeReference]:
        """Top-level type arguments of the outermost generic bracket."""
        if not self.is_parameterized:
            return []
        inner = self.text[self.text.index("<") + 1 : self.text.rindex(">")]
        return [TypeReference(arg) for arg in split_type_arguments(inner) if arg]


class MethodDeclaration(BaseModel):
    """A method as reported by the parsing front-end."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Simple method name")
    modifiers: frozenset[str] = Field(default_factory=frozenset)
    visibility: Visibility = Visibility.PACKAGE
    return_type: TypeReference | None = Field(None, description="None for void")
    parameters: tuple[TypeReference, ...] = Field(default_factory=tuple)
    type_variable_bounds: dict[str, TypeReference] = Field(
        default_factory=dict,
        description="Method-level type variable -> declared upper bound",
    )
    type_variables: frozenset[str] = Field(
        default_factory=frozenset,
        description="Type variables the method declares, bounded or not",
    )

    @property
    def is_void(self) -> bool:
        return self.return_type is None


class ClassScope(BaseModel):
    """One frame of the class nesting stack."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_top_level_dao_class: bool = False
    is_opaque: bool = False


class ClassOpened(BaseModel):
    """A class body (named, nested or anonymous) starts."""

    kind: Literal["class_open"] = "class_open"
    name: str
    anonymous: bool = False
    nested: bool = False
    type_variable_bounds: dict[str, TypeReference] = Field(default_factory=dict)


class ClassClosed(BaseModel):
    """The innermost open class body ends."""

    kind: Literal["class_close"] = "class_close"


class MethodDeclared(BaseModel):
    """A method or constructor declaration was found."""

    kind: Literal["method"] = "method"
    declaration: MethodDeclaration


DeclarationEvent = Annotated[
    Union[ClassOpened, ClassClosed, MethodDeclared],
    Field(discriminator="kind"),
]


class ClassificationResult(BaseModel):
    """Read-only snapshot of one DAO class traversal."""

    model_config = ConfigDict(frozen=True)

    class_name: str | None = None
    entity_name: str | None = None
    conforming: frozenset[str] = Field(default_factory=frozenset)
    non_conforming: frozenset[str] = Field(default_factory=frozenset)


class DaoReport(BaseModel):
    """Serializable per-class report."""

    file_path: str | None = Field(None, description="Source file, relative to the scan root")
    class_name: str
    entity_name: str
    conforming: list[str] = Field(default_factory=list)
    non_conforming: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls, result: ClassificationResult, file_path: str | None = None
    ) -> DaoReport:
        """Build a report with deterministically ordered keys."""
        return cls(
            file_path=file_path,
            class_name=result.class_name or "",
            entity_name=result.entity_name or "",
            conforming=sorted(result.conforming),
            non_conforming=sorted(result.non_conforming),
        )


class CheckReport(BaseModel):
    """Root document of a conformance check run."""

    version: str = "1.0"
    language_type: LanguageType = LanguageType.JAVA
    entity_suffix: str = "DAO"
    reports: list[DaoReport] = Field(default_factory=list)

    @property
    def violation_count(self) -> int:
        return sum(len(r.non_conforming) for r in self.reports)
