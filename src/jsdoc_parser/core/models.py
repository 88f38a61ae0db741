"""Core domain models - pure Python dataclasses with no framework dependencies."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Base name given to the synthetic parent entry of a destructured parameter
DESTRUCTURED_PARAM_NAME = "Unknown"


class ParameterType(StrEnum):
    """Types inferred from the literal kind of a parameter's default value."""

    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    A position in source text.

    Lines are 1-indexed, columns are 0-indexed characters from line start.
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError("line must be >= 1")
        if self.column < 0:
            raise ValueError("column must be >= 0")

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """
    A simplified parameter, ready for documentation rendering.

    Immutable value object. Fields left as None are omitted on serialization.
    """

    name: str
    parent: str | None = None
    type: ParameterType | None = None
    default_value: str | int | float | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ParameterDescriptor name cannot be empty")

    def with_parent(self, parent: str) -> "ParameterDescriptor":
        """Copy of this descriptor attached to a destructured parent."""
        return ParameterDescriptor(
            name=self.name,
            parent=parent,
            type=self.type,
            default_value=self.default_value,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.parent is not None:
            data["parent"] = self.parent
        if self.type is not None:
            data["type"] = self.type.value
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        return data


@dataclass(frozen=True, slots=True)
class FunctionDescriptor:
    """Simplified representation of a function, used to generate its JSDoc."""

    name: str
    location: SourceLocation
    params: tuple[ParameterDescriptor, ...] = ()
    # Return types are not inferred; serialized as {"returns": False}
    returns: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("FunctionDescriptor name cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "location": self.location.to_dict(),
            "params": [param.to_dict() for param in self.params],
            "returns": {"returns": self.returns},
        }
