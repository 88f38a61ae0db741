"""Core domain layer - pure Python business logic."""

from jsdoc_parser.core.errors import SignatureError, SourceParseError, UnknownParamType
from jsdoc_parser.core.models import (
    DESTRUCTURED_PARAM_NAME,
    FunctionDescriptor,
    ParameterDescriptor,
    ParameterType,
    SourceLocation,
)

__all__ = [
    "DESTRUCTURED_PARAM_NAME",
    "FunctionDescriptor",
    "ParameterDescriptor",
    "ParameterType",
    "SignatureError",
    "SourceLocation",
    "SourceParseError",
    "UnknownParamType",
]
