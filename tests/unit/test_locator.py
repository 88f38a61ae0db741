"""Tests for source parsing and function lookup."""

import pytest

from jsdoc_parser.core import SourceLocation, SourceParseError
from jsdoc_parser.parsers import FunctionLocator, SourceParser


@pytest.fixture
def source_parser() -> SourceParser:
    return SourceParser()


@pytest.fixture
def locator() -> FunctionLocator:
    return FunctionLocator()


class TestSourceParser:
    """Tests for the tree-sitter source parser."""

    def test_parse_module(self, source_parser: SourceParser, sample_javascript_code: str):
        parsed = source_parser.parse(sample_javascript_code)

        assert parsed.root.type == "program"
        assert not parsed.root.has_error

    def test_syntax_error(self, source_parser: SourceParser):
        with pytest.raises(SourceParseError) as exc_info:
            source_parser.parse("function f( {\n")

        assert exc_info.value.line >= 1
        assert exc_info.value.to_dict()["error"] == "parse_error"

    def test_strict_mode_early_errors_not_reported(self, source_parser: SourceParser):
        parsed = source_parser.parse("function f(a, a) {}")

        assert not parsed.root.has_error

    def test_location_counts_characters(self, source_parser: SourceParser):
        parsed = source_parser.parse("/* ü */ function f() {}")
        function_node = parsed.root.named_children[-1]

        assert function_node.type == "function_declaration"
        assert parsed.location(function_node) == SourceLocation(line=1, column=8)


class TestFunctionLocator:
    """Tests for locating functions by line."""

    def test_function_declaration(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 3)

        assert located is not None
        assert located.name == "add"
        assert located.location == SourceLocation(line=3, column=0)
        assert [parsed.text(p) for p in located.params] == ["a", "b"]

    def test_matches_line_above_function(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 2)

        assert located is not None
        assert located.name == "add"

    def test_no_function_on_line(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)

        assert locator.locate(parsed, 1) is None
        assert locator.locate(parsed, 5) is None
        assert locator.locate(parsed, 500) is None

    def test_exported_declaration_uses_export_location(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 7)

        assert located is not None
        assert located.name == "greet"
        # Column of the export keyword, not of "function"
        assert located.location == SourceLocation(line=7, column=0)

    def test_exported_variable_uses_export_location(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 18)

        assert located is not None
        assert located.name == "main"
        assert located.location == SourceLocation(line=18, column=0)

    def test_variable_function_expression(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 10)

        assert located is not None
        assert located.name == "handler"
        assert located.location == SourceLocation(line=11, column=0)
        assert [p.type for p in located.params] == ["identifier", "rest_pattern"]

    def test_nested_function_wins(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        # handler starts on line 11 and inner on line 12; inner is visited last
        located = locator.locate(parsed, 11)

        assert located is not None
        assert located.name == "inner"
        assert located.location == SourceLocation(line=12, column=2)

    def test_member_assignment(
        self, source_parser: SourceParser, locator: FunctionLocator, sample_javascript_code: str
    ):
        parsed = source_parser.parse(sample_javascript_code)
        located = locator.locate(parsed, 16)

        assert located is not None
        assert located.name == "fetch"
        assert located.location == SourceLocation(line=16, column=0)

    def test_var_declaration(self, source_parser: SourceParser, locator: FunctionLocator):
        parsed = source_parser.parse("var f = function (a) {};")
        located = locator.locate(parsed, 1)

        assert located is not None
        assert located.name == "f"

    def test_generator_declaration(self, source_parser: SourceParser, locator: FunctionLocator):
        parsed = source_parser.parse("function* numbers(start) {}")
        located = locator.locate(parsed, 1)

        assert located is not None
        assert located.name == "numbers"

    def test_ignores_non_function_values(self, source_parser: SourceParser, locator: FunctionLocator):
        parsed = source_parser.parse("const x = 1;\nlet y;\nconst f = (a) => a;\n")

        assert locator.locate(parsed, 1) is None
        assert locator.locate(parsed, 2) is None
        assert locator.locate(parsed, 3) is None

    def test_comments_excluded_from_params(
        self, source_parser: SourceParser, locator: FunctionLocator
    ):
        parsed = source_parser.parse("function f(a /* first */, b) {}")
        located = locator.locate(parsed, 1)

        assert located is not None
        assert [parsed.text(p) for p in located.params] == ["a", "b"]
