"""Finds the function declared at (or just below) a given line."""

from dataclasses import dataclass, replace

from tree_sitter import Node

from jsdoc_parser.core import SourceLocation
from jsdoc_parser.parsers.source import ParsedSource

FUNCTION_DECLARATION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})
# "function" is the pre-0.21 grammar's name for function_expression
FUNCTION_EXPRESSION_TYPES = frozenset({"function_expression", "function", "generator_function"})
VARIABLE_DECLARATION_TYPES = frozenset({"lexical_declaration", "variable_declaration"})


@dataclass(frozen=True, slots=True)
class LocatedFunction:
    """A function found in the syntax tree, before simplification."""

    name: str
    location: SourceLocation
    params: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class LocatorState:
    """
    Search state threaded through the traversal.

    Each visit step receives a state and returns the next one.
    """

    target_line: int
    match: LocatedFunction | None = None
    # Innermost export statement enclosing the node being visited
    export: Node | None = None


class FunctionLocator:
    """
    Walks a syntax tree looking for the function at a target line.

    A node matches when it starts on the target line or on the line below
    it (the cursor may sit on the blank line that will hold the comment).
    The traversal is pre-order, outer to inner, and the last match wins,
    so nested functions starting on the same lines take precedence.
    """

    def locate(self, parsed: ParsedSource, target_line: int) -> LocatedFunction | None:
        state = self._visit(parsed.root, LocatorState(target_line=target_line), parsed)
        return state.match

    def _visit(self, node: Node, state: LocatorState, parsed: ParsedSource) -> LocatorState:
        state = self._match(node, state, parsed)

        child_state = replace(state, export=node) if node.type == "export_statement" else state
        for child in node.named_children:
            child_state = self._visit(child, child_state, parsed)

        return replace(child_state, export=state.export)

    def _match(self, node: Node, state: LocatorState, parsed: ParsedSource) -> LocatorState:
        """Record node as the current match if it is a function on the target line."""
        match node.type:
            case t if t in FUNCTION_DECLARATION_TYPES:
                found = self._match_declaration(node, state, parsed)
            case t if t in VARIABLE_DECLARATION_TYPES:
                found = self._match_variable(node, state, parsed)
            case "assignment_expression":
                found = self._match_assignment(node, state, parsed)
            case _:
                found = None

        return replace(state, match=found) if found else state

    def _match_declaration(
        self, node: Node, state: LocatorState, parsed: ParsedSource
    ) -> LocatedFunction | None:
        """function name(...) {...}"""
        name_node = node.child_by_field_name("name")
        if not name_node or not self._on_line(node, state.target_line):
            return None

        return LocatedFunction(
            name=parsed.text(name_node),
            location=self._declaration_location(node, state, parsed),
            params=self._params(node),
        )

    def _match_variable(
        self, node: Node, state: LocatorState, parsed: ParsedSource
    ) -> LocatedFunction | None:
        """
        const name = function (...) {...}

        The declaration's location is used rather than the function
        expression's, since leading keywords shift where the expression starts.
        Export adoption applies here too, not only to function declarations:
        for `export const f = function () {}` the column is that of `export`,
        not the column after `export `.
        """
        if not self._on_line(node, state.target_line):
            return None

        declarator = next(
            (child for child in node.named_children if child.type == "variable_declarator"),
            None,
        )
        if not declarator:
            return None

        name_node = declarator.child_by_field_name("name")
        value_node = declarator.child_by_field_name("value")
        if not name_node or name_node.type != "identifier":
            return None
        if not value_node or value_node.type not in FUNCTION_EXPRESSION_TYPES:
            return None

        return LocatedFunction(
            name=parsed.text(name_node),
            location=self._declaration_location(node, state, parsed),
            params=self._params(value_node),
        )

    def _match_assignment(
        self, node: Node, state: LocatorState, parsed: ParsedSource
    ) -> LocatedFunction | None:
        """a.b.method = function (...) {...}"""
        if not self._on_line(node, state.target_line):
            return None

        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")
        if not left or left.type != "member_expression":
            return None
        if not right or right.type not in FUNCTION_EXPRESSION_TYPES:
            return None

        property_node = left.child_by_field_name("property")
        if not property_node:
            return None

        return LocatedFunction(
            name=parsed.text(property_node),
            location=parsed.location(node),
            params=self._params(right),
        )

    def _declaration_location(
        self, node: Node, state: LocatorState, parsed: ParsedSource
    ) -> SourceLocation:
        """Location of a declaration, or of its export statement if it is the exported payload."""
        if state.export is not None and state.export.child_by_field_name("declaration") == node:
            return parsed.location(state.export)
        return parsed.location(node)

    def _params(self, function_node: Node) -> tuple[Node, ...]:
        """Raw parameter nodes in declaration order, without comments."""
        params_node = function_node.child_by_field_name("parameters")
        if not params_node:
            return ()
        return tuple(child for child in params_node.named_children if child.type != "comment")

    def _on_line(self, node: Node, line: int) -> bool:
        start_line = node.start_point[0] + 1
        return start_line == line or start_line - 1 == line
