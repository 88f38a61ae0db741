"""Error types raised while analyzing a function signature.

A missing function is not an error: lookups return None instead.
"""

from typing import Any


class SignatureError(Exception):
    """Base error with structured context for API responses."""

    error_name = "signature_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {"error": self.error_name, "message": self.message, **self.details}


class SourceParseError(SignatureError):
    """The source text is not valid JavaScript."""

    error_name = "parse_error"

    def __init__(self, line: int, column: int, reason: str = "invalid syntax") -> None:
        super().__init__(f"{reason} at line {line}, column {column}")
        self.line = line
        self.column = column
        self.reason = reason

    @property
    def details(self) -> dict[str, Any]:
        return {"line": self.line, "column": self.column}


class UnknownParamType(SignatureError):
    """A parameter or default value uses syntax that cannot be simplified."""

    error_name = "unknown_param_type"

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown param type: {kind}")
        self.kind = kind

    @property
    def details(self) -> dict[str, Any]:
        return {"kind": self.kind}
