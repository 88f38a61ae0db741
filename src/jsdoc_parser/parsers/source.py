"""JavaScript source parsing using tree-sitter."""

from dataclasses import dataclass
from functools import lru_cache

import tree_sitter_javascript as ts_javascript
from tree_sitter import Language, Node, Parser, Tree

from jsdoc_parser.core import SourceLocation, SourceParseError
from jsdoc_parser.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_language() -> Language:
    """Get the shared tree-sitter JavaScript language."""
    return Language(ts_javascript.language())


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """A syntax tree together with the bytes it was parsed from."""

    tree: Tree
    source_bytes: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        """Extract text content from a node."""
        return self.source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def location(self, node: Node) -> SourceLocation:
        """
        Get the start position of a node.

        tree-sitter rows are 0-indexed and columns count bytes; the result
        uses 1-indexed lines and counts characters.
        """
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        prefix = self.source_bytes[line_start : node.start_byte]
        return SourceLocation(
            line=row + 1,
            column=len(prefix.decode("utf-8", errors="replace")),
        )


class SourceParser:
    """
    Parses JavaScript (module syntax) into a tree-sitter syntax tree.

    A new tree-sitter Parser is created per call, so one instance can be
    shared between threads.

    Only syntax errors are detected. Early errors that strict (module) code
    must also reject, such as duplicate parameter names, are not reported.
    """

    def parse(self, source_text: str) -> ParsedSource:
        """
        Parse source text.

        Raises:
            SourceParseError: If the source contains a syntax error.
        """
        source_bytes = source_text.encode("utf-8")
        tree = Parser(get_language()).parse(source_bytes)
        parsed = ParsedSource(tree=tree, source_bytes=source_bytes)

        if tree.root_node.has_error:
            error_node = _find_error(tree.root_node) or tree.root_node
            location = parsed.location(error_node)
            reason = f"missing {error_node.type}" if error_node.is_missing else "invalid syntax"
            logger.debug(
                "source_parse_failed",
                line=location.line,
                column=location.column,
                reason=reason,
            )
            raise SourceParseError(location.line, location.column, reason)

        return parsed


def _find_error(node: Node) -> Node | None:
    """Find the first ERROR or missing node, in source order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _find_error(child)
            if found:
                return found
    return None
