"""Java AST utility functions.

This module provides utility functions for extracting information
from tree-sitter AST nodes for Java source code.
"""

from __future__ import annotations

from tree_sitter import Node

from daolint.core.models import TypeReference, Visibility

TYPE_DECLARATIONS = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
    "annotation_type_declaration",
)

# Members of these bodies are implicitly public
IMPLICITLY_PUBLIC_DECLARATIONS = (
    "interface_declaration",
    "annotation_type_declaration",
)

TYPE_NODES = (
    "type_identifier",
    "generic_type",
    "scoped_type_identifier",
    "array_type",
    "integral_type",
    "floating_point_type",
    "boolean_type",
)


class JavaAstUtils:
    """Java AST utility functions for tree-sitter nodes."""

    @staticmethod
    def get_node_text(node: Node, content: bytes) -> str:
        """Get the text content of a node.

        Args:
            node: The AST node
            content: Source file content

        Returns:
            The text content of the node
        """
        return content[node.start_byte:node.end_byte].decode("utf-8")

    @staticmethod
    def get_type_reference(type_node: Node, content: bytes) -> TypeReference | None:
        """Build a type reference from a type node.

        Args:
            type_node: The type AST node
            content: Source file content

        Returns:
            The type as written (whitespace removed), or None for void
        """
        if type_node.type == "void_type":
            return None
        return TypeReference(JavaAstUtils.get_node_text(type_node, content))

    @staticmethod
    def get_simple_type_name(type_node: Node, content: bytes) -> str:
        """Unqualified type name without generics, e.g. "Invoice"."""
        return TypeReference(JavaAstUtils.get_node_text(type_node, content)).simple_name

    @staticmethod
    def extract_modifiers(node: Node, content: bytes) -> list[str]:
        """Extract modifiers from a declaration node.

        Args:
            node: The declaration AST node
            content: Source file content (unused but kept for consistency)

        Returns:
            List of modifier strings
        """
        modifiers: list[str] = []
        for child in node.children:
            if child.type == "modifiers":
                for mod in child.children:
                    if mod.type in (
                        "public", "private", "protected", "static", "final",
                        "abstract", "synchronized", "native", "default",
                    ):
                        modifiers.append(mod.type)
        return modifiers

    @staticmethod
    def get_visibility(modifiers: list[str], implicitly_public: bool = False) -> Visibility:
        """Determine visibility from modifiers.

        Args:
            modifiers: List of modifier strings
            implicitly_public: True for members of an interface body

        Returns:
            Visibility enum value
        """
        if "public" in modifiers:
            return Visibility.PUBLIC
        elif "private" in modifiers:
            return Visibility.PRIVATE
        elif "protected" in modifiers:
            return Visibility.PROTECTED
        return Visibility.PUBLIC if implicitly_public else Visibility.PACKAGE

    @staticmethod
    def extract_type_parameters(
        node: Node, content: bytes
    ) -> list[tuple[str, TypeReference | None]]:
        """Extract the type parameters a declaration introduces.

        For "<T extends Invoice & Serializable, U>" this returns
        [("T", TypeReference("Invoice")), ("U", None)]; only the first of
        several bounds is kept.

        Args:
            node: A class, interface, method or constructor declaration
            content: Source file content

        Returns:
            (type variable name, first bound or None) pairs in declaration order
        """
        params: list[tuple[str, TypeReference | None]] = []
        for child in node.children:
            if child.type != "type_parameters":
                continue
            for param in child.named_children:
                if param.type != "type_parameter":
                    continue
                name: str | None = None
                bound: TypeReference | None = None
                for part in param.named_children:
                    if part.type in ("type_identifier", "identifier") and name is None:
                        name = JavaAstUtils.get_node_text(part, content)
                    elif part.type == "type_bound":
                        types = [c for c in part.named_children if c.type in TYPE_NODES]
                        if types:
                            bound = JavaAstUtils.get_type_reference(types[0], content)
                if name:
                    params.append((name, bound))
        return params

    @staticmethod
    def extract_type_parameter_bounds(node: Node, content: bytes) -> dict[str, TypeReference]:
        """Map each bounded type variable of a declaration to its first bound."""
        return {
            name: bound
            for name, bound in JavaAstUtils.extract_type_parameters(node, content)
            if bound is not None
        }

    @staticmethod
    def extract_parameter_types(callable_node: Node, content: bytes) -> list[TypeReference]:
        """Extract parameter types of a method or constructor in order.

        Varargs keep their "..." suffix and C-style array declarators
        ("int x[]") are folded into the type.

        Args:
            callable_node: The method/constructor declaration node
            content: Source file content

        Returns:
            Parameter type references as written
        """
        params_node = callable_node.child_by_field_name("parameters")
        if params_node is None:
            return []

        param_types: list[TypeReference] = []
        for child in params_node.named_children:
            if child.type == "formal_parameter":
                type_node = child.child_by_field_name("type")
                if type_node is None:
                    continue
                text = JavaAstUtils.get_node_text(type_node, content)
                dimensions = child.child_by_field_name("dimensions")
                if dimensions is not None:
                    text += JavaAstUtils.get_node_text(dimensions, content)
                param_types.append(TypeReference(text))
            elif child.type == "spread_parameter":
                # spread_parameter doesn't have a 'type' field - type is a direct child
                type_node = child.child_by_field_name("type")
                if type_node is None:
                    for subchild in child.children:
                        if subchild.type in TYPE_NODES:
                            type_node = subchild
                            break
                if type_node is not None:
                    param_types.append(
                        TypeReference(JavaAstUtils.get_node_text(type_node, content) + "...")
                    )
        return param_types

    @staticmethod
    def extract_supertypes(type_node: Node, content: bytes) -> list[str]:
        """Extract simple names of directly declared supertypes.

        Covers "extends" of classes, "implements" of classes, enums and
        records, and "extends" of interfaces.

        Args:
            type_node: A type declaration node
            content: Source file content

        Returns:
            Simple supertype names in declaration order
        """
        supertypes: list[str] = []
        for child in type_node.children:
            if child.type not in ("superclass", "super_interfaces", "extends_interfaces"):
                continue
            for type_ref in child.named_children:
                candidates = type_ref.named_children if type_ref.type == "type_list" else [type_ref]
                for t in candidates:
                    if t.type in TYPE_NODES:
                        supertypes.append(JavaAstUtils.get_simple_type_name(t, content))
        return supertypes

    @staticmethod
    def get_anonymous_class_name(creation_node: Node, content: bytes) -> str:
        """Name of the type instantiated by an anonymous class expression."""
        type_node = creation_node.child_by_field_name("type")
        if type_node is not None:
            return JavaAstUtils.get_simple_type_name(type_node, content)
        return "<anonymous>"
