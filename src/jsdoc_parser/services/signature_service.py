"""Signature analysis orchestration service."""

from jsdoc_parser.config import get_settings
from jsdoc_parser.core import FunctionDescriptor, UnknownParamType
from jsdoc_parser.logging import get_logger
from jsdoc_parser.parsers import (
    FunctionLocator,
    ParameterSimplifier,
    SourceParser,
    insertion_point,
)

logger = get_logger(__name__)


class SignatureService:
    """
    Describes the function at a cursor line for JSDoc generation.

    Composes source parsing, function lookup, parameter simplification and
    location mapping. Holds no per-call state, so one instance can serve
    concurrent callers.
    """

    def __init__(self, reuse_placeholder: bool | None = None) -> None:
        if reuse_placeholder is None:
            reuse_placeholder = get_settings().reuse_placeholder
        self._parser = SourceParser()
        self._locator = FunctionLocator()
        self._simplifier = ParameterSimplifier(reuse_placeholder=reuse_placeholder)

    def describe(self, source_text: str, line_number: int = 1) -> FunctionDescriptor | None:
        """
        Describe the function declared on, or one line below, line_number.

        Args:
            source_text: Complete file contents.
            line_number: 1-indexed line where the cursor is located.

        Returns:
            The function descriptor, or None if no function is found there.

        Raises:
            SourceParseError: If the source is not valid JavaScript.
            UnknownParamType: If a parameter cannot be simplified.
        """
        parsed = self._parser.parse(source_text)

        located = self._locator.locate(parsed, line_number)
        if located is None:
            logger.debug("function_not_found", line=line_number)
            return None

        try:
            params = self._simplifier.simplify(located.params, parsed)
        except UnknownParamType as e:
            logger.warning(
                "unknown_param_type",
                function=located.name,
                line=located.location.line,
                kind=e.kind,
            )
            raise

        descriptor = FunctionDescriptor(
            name=located.name,
            location=insertion_point(located.location.line, located.location.column),
            params=tuple(params),
        )
        logger.debug(
            "function_located",
            function=descriptor.name,
            line=line_number,
            param_count=len(descriptor.params),
        )
        return descriptor


def parse(
    source_text: str,
    line_number: int = 1,
    *,
    reuse_placeholder: bool | None = None,
) -> FunctionDescriptor | None:
    """Describe the function at line_number in source_text, or return None."""
    return SignatureService(reuse_placeholder=reuse_placeholder).describe(source_text, line_number)
