"""Maps a function's start position to where its JSDoc should be written."""

from jsdoc_parser.core import SourceLocation


def insertion_point(line: int, column: int) -> SourceLocation:
    """Line above the function (never above the first line), same column."""
    return SourceLocation(line=max(line - 1, 1), column=column)
