"""Common response schemas."""

from typing import List

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str


class ValidationErrorResponse(BaseModel):
    detail: str = "Validation failed"
    errors: List[FieldError]
