"""Standardized error response schema."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body returned for every handled error, domain (4xx) or unexpected (500)."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"detail": "Policy not found", "code": "NOT_FOUND"}}
    )

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
