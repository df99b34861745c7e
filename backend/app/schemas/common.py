"""Schemas shared across resources."""
from pydantic import BaseModel


class FieldViolation(BaseModel):
    """A single rejected field with a human-readable reason."""

    field: str
    constraint: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body returned when a request fails field validation."""

    detail: str = "Validation failed"
    errors: list[FieldViolation]


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
