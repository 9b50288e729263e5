"""Declaration event emitter for Java.

Turns the syntax tree of a Java file into the flat stream of class and
method declaration events consumed by the classification engine. Fields,
statements and comments are not forwarded; only class bodies and the
method and constructor declarations they contain are.
"""

from __future__ import annotations

import logging

from tree_sitter import Node, Parser

from daolint.adapters.java.ast_utils import (
    IMPLICITLY_PUBLIC_DECLARATIONS,
    TYPE_DECLARATIONS,
    JavaAstUtils,
)
from daolint.core.models import (
    ClassClosed,
    ClassOpened,
    DeclarationEvent,
    MethodDeclaration,
    MethodDeclared,
)

logger = logging.getLogger(__name__)

CALLABLE_DECLARATIONS = ("method_declaration", "constructor_declaration")


class JavaEventEmitter:
    """Phase 2: Emit declaration events per top-level Java type."""

    def __init__(self, parser: Parser) -> None:
        """Initialize the emitter.

        Args:
            parser: Configured tree-sitter parser for Java
        """
        self._parser = parser

    def emit_source(self, content: bytes) -> list[tuple[str, list[DeclarationEvent]]]:
        """Emit events for every top-level type of a Java file.

        Args:
            content: Source file content

        Returns:
            (type name, events) pairs in source order
        """
        tree = self._parser.parse(content)
        if tree.root_node.has_error:
            logger.debug("Source contains syntax errors, emitting what was recognized")

        units: list[tuple[str, list[DeclarationEvent]]] = []
        for child in tree.root_node.children:
            if child.type not in TYPE_DECLARATIONS:
                continue
            name_node = child.child_by_field_name("name")
            if name_node is None:
                continue
            units.append(
                (JavaAstUtils.get_node_text(name_node, content), self._emit_type(child, content))
            )
        return units

    def _emit_type(self, root: Node, content: bytes) -> list[DeclarationEvent]:
        """Emit the events of a top-level type and everything inside it.

        The tree is walked with an explicit work stack, so deeply nested
        expressions in method bodies cannot exhaust the interpreter stack.
        A work item is either a (node, implicitly_public) pair still to be
        visited or an event to append once every item above it is done.

        Args:
            root: A top-level type declaration node
            content: Source file content

        Returns:
            Declaration events in source order
        """
        events: list[DeclarationEvent] = []
        stack: list[tuple[Node, bool] | DeclarationEvent] = []
        self._push_type(root, content, stack, nested=False)

        while stack:
            item = stack.pop()
            if not isinstance(item, tuple):
                events.append(item)
                continue

            node, implicitly_public = item
            if node.type in TYPE_DECLARATIONS:
                self._push_type(node, content, stack, nested=True)
                continue

            if node.type in CALLABLE_DECLARATIONS:
                events.append(
                    MethodDeclared(
                        declaration=self._build_declaration(node, content, implicitly_public)
                    )
                )
                body = node.child_by_field_name("body")
                if body is not None:
                    stack.append((body, False))
                continue

            if node.type == "object_creation_expression":
                class_body = next((c for c in node.children if c.type == "class_body"), None)
                if class_body is not None:
                    name = JavaAstUtils.get_anonymous_class_name(node, content)
                    self._push_anonymous(name, class_body, stack)
                    # Arguments are evaluated outside the anonymous body
                    stack.extend(
                        (c, False) for c in reversed(node.children) if c.type == "argument_list"
                    )
                    continue

            if node.type == "enum_constant":
                class_body = node.child_by_field_name("body")
                if class_body is not None:
                    name_node = node.child_by_field_name("name")
                    name = JavaAstUtils.get_node_text(name_node, content) if name_node else "<constant>"
                    self._push_anonymous(name, class_body, stack)
                    continue

            stack.extend((c, implicitly_public) for c in reversed(node.children))

        return events

    def _push_type(
        self,
        node: Node,
        content: bytes,
        stack: list[tuple[Node, bool] | DeclarationEvent],
        nested: bool,
    ) -> None:
        """Schedule the open/close pair of a named type and its members."""
        name_node = node.child_by_field_name("name")
        name = JavaAstUtils.get_node_text(name_node, content) if name_node else "<unnamed>"
        stack.append(ClassClosed())
        body = node.child_by_field_name("body")
        if body is not None:
            implicitly_public = node.type in IMPLICITLY_PUBLIC_DECLARATIONS
            stack.extend((member, implicitly_public) for member in reversed(body.children))
        stack.append(
            ClassOpened(
                name=name,
                nested=nested,
                type_variable_bounds=JavaAstUtils.extract_type_parameter_bounds(node, content),
            )
        )

    def _push_anonymous(
        self, name: str, body: Node, stack: list[tuple[Node, bool] | DeclarationEvent]
    ) -> None:
        stack.append(ClassClosed())
        stack.extend((member, False) for member in reversed(body.children))
        stack.append(ClassOpened(name=name, anonymous=True))

    def _build_declaration(
        self, node: Node, content: bytes, implicitly_public: bool
    ) -> MethodDeclaration:
        """Build a MethodDeclaration from a method or constructor node."""
        name_node = node.child_by_field_name("name")
        name = JavaAstUtils.get_node_text(name_node, content) if name_node else ""
        modifiers = JavaAstUtils.extract_modifiers(node, content)

        return_type = None
        if node.type == "method_declaration":
            type_node = node.child_by_field_name("type")
            if type_node is not None:
                return_type = JavaAstUtils.get_type_reference(type_node, content)

        type_parameters = JavaAstUtils.extract_type_parameters(node, content)
        return MethodDeclaration(
            name=name,
            modifiers=frozenset(modifiers),
            visibility=JavaAstUtils.get_visibility(modifiers, implicitly_public),
            return_type=return_type,
            parameters=tuple(JavaAstUtils.extract_parameter_types(node, content)),
            type_variable_bounds={n: b for n, b in type_parameters if b is not None},
            type_variables=frozenset(n for n, _ in type_parameters),
        )
