"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field rules (length, format, strength) are not declared here: the domain
value objects own them so every failure is reported in one response.
Registration fields accept any JSON value for the same reason; a
non-string reaches the domain and is reported with the other fields.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

_STRING_SCHEMA = {"type": "string"}


class RegisterRequest(BaseModel):
    """Request model for user registration. Absent or null fields are treated as empty."""

    name: Any = Field(
        default="",
        description="Display name (3-100 characters)",
        json_schema_extra=_STRING_SCHEMA,
    )
    email: Any = Field(default="", description="Email address", json_schema_extra=_STRING_SCHEMA)
    password: Any = Field(
        default="",
        description="Password (8-50 characters, upper, lower, digit and special character)",
        json_schema_extra=_STRING_SCHEMA,
    )
    password_confirmation: Any = Field(
        default=None,
        description="Must match password when provided",
        json_schema_extra=_STRING_SCHEMA,
    )

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class UserResponse(BaseModel):
    """Public projection of a registered user. Never includes the password."""

    id: str
    name: str
    email: str


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    user: UserResponse


class ErrorResponse(BaseModel):
    """Error response without field detail (internal failures)."""

    message: str


class ValidationErrorResponse(ErrorResponse):
    """Error response listing messages per failing field."""

    errors: dict[str, list[str]]
