"""Validation result and error envelope models."""

from typing import Any

from pydantic import BaseModel, Field

from planner_api.models.constraints import CamelModel


class ValidationResult(CamelModel):
    """Outcome of validating a constraint record."""

    is_valid: bool
    errors: dict[str, str] = Field(
        default_factory=dict, description="Field id to human-readable message"
    )


class ErrorDetail(BaseModel):
    """Body of an error response."""

    code: str
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    """Standard error response format for every endpoint."""

    error: ErrorDetail
