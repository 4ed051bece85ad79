"""
Result types - Explicit success/failure values for field validation.

Field validators never raise for bad input; they return either
``Valid(value)`` or ``Invalid(errors)`` where ``errors`` is a non-empty
tuple of ErrorCode.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation carrying the constructed value object."""

    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying every error code that applied."""

    errors: tuple[ErrorCode, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid requires at least one error code")


FieldResult = Union[Valid[T], Invalid]
