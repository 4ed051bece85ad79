"""
Error taxonomy - Fields and error codes reported by field validation.

Both enums use the str mixin so they serialize directly to JSON and
compare equal to their string values.
"""

from enum import Enum


class Field(str, Enum):
    """
    Input fields that can carry validation errors.

    Declaration order is the order in which fields appear in an error
    report, keeping client-facing responses deterministic.
    """

    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    ID = "id"


class ErrorCode(str, Enum):
    """Machine-readable validation failure kinds."""

    EMPTY = "EMPTY"
    INVALID_TYPE = "INVALID_TYPE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_FORMAT = "INVALID_FORMAT"
    MISSING_DOMAIN_DOT = "MISSING_DOMAIN_DOT"
    MISSING_UPPERCASE = "MISSING_UPPERCASE"
    MISSING_LOWERCASE = "MISSING_LOWERCASE"
    MISSING_NUMBER = "MISSING_NUMBER"
    MISSING_SPECIAL_CHARACTER = "MISSING_SPECIAL_CHARACTER"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"


# Codes each field can produce. The message catalog must cover every pair.
FIELD_ERROR_CODES: dict[Field, tuple[ErrorCode, ...]] = {
    Field.NAME: (
        ErrorCode.EMPTY,
        ErrorCode.INVALID_TYPE,
        ErrorCode.TOO_SHORT,
        ErrorCode.TOO_LONG,
        ErrorCode.INVALID_CHARACTERS,
    ),
    Field.EMAIL: (
        ErrorCode.EMPTY,
        ErrorCode.INVALID_TYPE,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.MISSING_DOMAIN_DOT,
        ErrorCode.EMAIL_ALREADY_EXISTS,
    ),
    Field.PASSWORD: (
        ErrorCode.EMPTY,
        ErrorCode.INVALID_TYPE,
        ErrorCode.TOO_SHORT,
        ErrorCode.TOO_LONG,
        ErrorCode.MISSING_UPPERCASE,
        ErrorCode.MISSING_LOWERCASE,
        ErrorCode.MISSING_NUMBER,
        ErrorCode.MISSING_SPECIAL_CHARACTER,
    ),
    Field.ID: (
        ErrorCode.EMPTY,
        ErrorCode.INVALID_FORMAT,
    ),
}
