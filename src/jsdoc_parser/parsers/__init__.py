"""Signature analysis components built on tree-sitter."""

from jsdoc_parser.parsers.location import insertion_point
from jsdoc_parser.parsers.locator import FunctionLocator, LocatedFunction
from jsdoc_parser.parsers.params import ParameterSimplifier
from jsdoc_parser.parsers.source import ParsedSource, SourceParser

__all__ = [
    "FunctionLocator",
    "LocatedFunction",
    "ParameterSimplifier",
    "ParsedSource",
    "SourceParser",
    "insertion_point",
]
