"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class FieldErrorResponse(BaseModel):
    """One rejected request field."""

    field: str = Field(..., description="Dotted path of the offending field")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")
    errors: list[FieldErrorResponse] | None = Field(
        default=None,
        description="Per-field problems (request validation only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Invalid or expired token", "code": "INVALID_TOKEN"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
