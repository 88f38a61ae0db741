"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field


# ============== Request Schemas ==============


class DescribeSignatureRequest(BaseModel):
    """Request to describe the function at a cursor line."""

    source: str = Field(
        ...,
        description="Complete JavaScript source of the file",
        examples=["function greet(name, greeting = 'hi') {}"],
    )
    line: int = Field(
        1,
        description="1-indexed cursor line; the function may start here or one line below",
        ge=0,
    )
    reuse_placeholder: bool | None = Field(
        None,
        description="Name every destructured parameter 'Unknown' (defaults to server setting)",
    )


# ============== Response Schemas ==============


class ErrorResponse(BaseModel):
    """Error raised while analyzing the source."""

    error: str
    message: str
    line: int | None = None
    column: int | None = None
    kind: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    grammar: str
