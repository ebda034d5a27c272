"""RFC 7807 Problem Details for HTTP APIs.

Every error response of the API uses this body, served as
``application/problem+json``.

Exports:
    PROBLEM_JSON: Media type for problem responses
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field

PROBLEM_JSON = "application/problem+json"


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error (dotted path for nested bodies)
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID (same value as the X-Trace-Id header)

    Examples:
        >>> ProblemDetails(
        ...     type="https://api.properties.example/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Property with id 123 was not found",
        ...     instance="/api/v1/properties/123",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.properties.example/errors/validation-failed"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Tax percentage must be between 0 and 100"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/properties/7/sell"],
    )
    errors: list[ErrorDetail] | None = Field(None, description="List of field-specific errors")
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
