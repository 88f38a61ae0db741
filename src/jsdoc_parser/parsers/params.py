"""Simplifies raw parameter nodes into parameter descriptors."""

import math
import re
from collections.abc import Iterable, Iterator
from itertools import count

from tree_sitter import Node

from jsdoc_parser.core import (
    DESTRUCTURED_PARAM_NAME,
    ParameterDescriptor,
    ParameterType,
    SourceParseError,
    UnknownParamType,
)
from jsdoc_parser.parsers.source import ParsedSource

_IDENTIFIER_TYPES = frozenset({"identifier", "shorthand_property_identifier_pattern"})

_MAX_CODE_POINT = 0x10FFFF
_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


class ParameterSimplifier:
    """
    Converts parameter nodes into ParameterDescriptor lists.

    Supported parameter kinds:
    - plain name:            a
    - name with default:     a = "x"
    - rest:                  ...a
    - destructured object:   {a, b = 1, ...c}

    A destructured parameter expands to a synthetic parent entry followed
    by its properties. Parent entries are named Unknown, Unknown2, ... in
    order, or all Unknown when reuse_placeholder is set.
    """

    def __init__(self, reuse_placeholder: bool = False) -> None:
        self._reuse_placeholder = reuse_placeholder

    def simplify(self, params: Iterable[Node], parsed: ParsedSource) -> list[ParameterDescriptor]:
        """
        Simplify parameters in declaration order.

        Raises:
            UnknownParamType: If a parameter or default value is not supported.
            SourceParseError: If a string default holds an out-of-range \\u{...} escape.
        """
        placeholders = self._placeholder_names()
        descriptors: list[ParameterDescriptor] = []
        for param in params:
            descriptors.extend(self._simplify_param(param, parsed, placeholders))
        return descriptors

    def _simplify_param(
        self,
        param: Node,
        parsed: ParsedSource,
        placeholders: Iterator[str] | None,
    ) -> list[ParameterDescriptor]:
        # placeholders is None inside a destructured parameter, where nesting is unsupported
        match param.type:
            case t if t in _IDENTIFIER_TYPES:
                return [ParameterDescriptor(name=parsed.text(param))]
            case "assignment_pattern" | "object_assignment_pattern":
                return [self._simplify_default(param, parsed)]
            case "rest_pattern":
                return [self._simplify_rest(param, parsed)]
            case "object_pattern" if placeholders is not None:
                return self._simplify_destructured(param, parsed, next(placeholders))
            case kind:
                raise UnknownParamType(kind)

    def _simplify_default(self, param: Node, parsed: ParsedSource) -> ParameterDescriptor:
        """Type and default value come from the literal kind of the default."""
        left = param.child_by_field_name("left")
        right = param.child_by_field_name("right")
        if left is None or right is None:
            raise UnknownParamType(param.type)
        if left.type not in _IDENTIFIER_TYPES:
            raise UnknownParamType(left.type)

        while right.type == "parenthesized_expression":
            right = _named_children(right)[0]

        match right.type:
            case "string":
                param_type, default_value = ParameterType.STRING, _string_value(right, parsed)
            case "number":
                param_type, default_value = ParameterType.NUMBER, _number_value(parsed.text(right))
            case "array":
                param_type, default_value = ParameterType.ARRAY, "[]"
            case "object":
                param_type, default_value = ParameterType.OBJECT, "{}"
            case kind:
                raise UnknownParamType(kind)

        return ParameterDescriptor(
            name=parsed.text(left),
            type=param_type,
            default_value=default_value,
        )

    def _simplify_rest(self, param: Node, parsed: ParsedSource) -> ParameterDescriptor:
        children = _named_children(param)
        if not children or children[0].type != "identifier":
            raise UnknownParamType(children[0].type if children else param.type)
        return ParameterDescriptor(name=parsed.text(children[0]), type=ParameterType.ARRAY)

    def _simplify_destructured(
        self, param: Node, parsed: ParsedSource, parent: str
    ) -> list[ParameterDescriptor]:
        descriptors = [ParameterDescriptor(name=parent, type=ParameterType.OBJECT)]
        for prop in _named_children(param):
            # {key: value} binds the value side
            value = prop.child_by_field_name("value") if prop.type == "pair_pattern" else prop
            if value is None:
                raise UnknownParamType(prop.type)
            descriptors.extend(
                child.with_parent(parent) for child in self._simplify_param(value, parsed, None)
            )
        return descriptors

    def _placeholder_names(self) -> Iterator[str]:
        yield DESTRUCTURED_PARAM_NAME
        for index in count(2):
            if self._reuse_placeholder:
                yield DESTRUCTURED_PARAM_NAME
            else:
                yield f"{DESTRUCTURED_PARAM_NAME}{index}"


def _named_children(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _string_value(node: Node, parsed: ParsedSource) -> str:
    """Value of a string literal with its escape sequences resolved."""
    parts = []
    for child in node.named_children:
        text = parsed.text(child)
        parts.append(_unescape(child, parsed) if child.type == "escape_sequence" else text)
    # \u escapes yield UTF-16 code units; combine valid pairs, keep lone surrogates
    return _SURROGATE_PAIR.sub(_combine_surrogates, "".join(parts))


def _unescape(node: Node, parsed: ParsedSource) -> str:
    body = parsed.text(node)[1:]
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body.startswith("u{"):
        return _code_point(int(body[2:-1], 16), node, parsed)
    if body[:1] in ("x", "u"):
        return chr(int(body[1:], 16))
    if body.isdigit() and set(body) <= set("01234567"):
        return chr(int(body, 8))
    # Line continuation
    if body.strip("\r\n") == "":
        return ""
    return body


def _code_point(value: int, node: Node, parsed: ParsedSource) -> str:
    if value > _MAX_CODE_POINT:
        location = parsed.location(node)
        raise SourceParseError(location.line, location.column, "invalid unicode escape")
    return chr(value)


def _combine_surrogates(match: re.Match[str]) -> str:
    high, low = (ord(char) for char in match.group())
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def _number_value(literal: str) -> int | float:
    """Numeric value of a JavaScript number literal."""
    literal = literal.replace("_", "")
    if literal.endswith("n"):
        raise UnknownParamType("bigint")
    if literal[:2].lower() in ("0x", "0o", "0b"):
        return int(literal, 0)
    if len(literal) > 1 and literal.startswith("0") and literal.isdigit():
        # Legacy octal, unless it contains an 8 or 9
        return int(literal, 8) if set(literal) <= set("01234567") else int(literal)
    value = float(literal)
    if not math.isfinite(value):
        raise UnknownParamType("number")
    return int(value) if value.is_integer() else value
