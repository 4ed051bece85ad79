"""
Value objects - Self-validating field types for user registration.

Each value object owns one rule-set and exposes ``parse(raw)``, which
returns ``Valid(instance)`` or ``Invalid(codes)`` without raising. A raw
value that is not text fails with INVALID_TYPE alone.
Instances are frozen; constructing one directly with an invalid value
raises InvalidValueObject, so an instance is always valid.

Canonical rule-set
==================

- Name: 3-100 user-perceived characters after trimming and NFC
  normalization. Letters, digits, spaces, hyphens and underscores only.
- Email: one ``@``, a dotted domain, and a syntactically valid address
  per email-validator (no DNS lookup). Compared case-insensitively.
- Password: 8-50 characters with at least one uppercase letter, one
  lowercase letter, one digit and one special character.
- UserId: canonical lower-case UUID version 4.
"""

import re
import unicodedata
import uuid
from dataclasses import dataclass, field

from email_validator import EmailNotValidError, validate_email

from .errors import ErrorCode
from .exceptions import InvalidValueObject
from .results import FieldResult, Invalid, Valid

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 50
PASSWORD_SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_-+=[]{}|;:'\",.<>/?¿")

_NAME_SEPARATORS = frozenset(" -_")

_UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def _is_combining(char: str) -> bool:
    return unicodedata.category(char).startswith("M")


def _grapheme_length(value: str) -> int:
    """
    Count user-perceived characters.

    Combining marks attach to the preceding base character, so
    a decomposed "e" plus acute accent counts as one character.
    """
    return sum(1 for char in value if not _is_combining(char))


def _name_errors(value: str) -> tuple[ErrorCode, ...]:
    if not value:
        return (ErrorCode.EMPTY,)

    errors = []
    length = _grapheme_length(value)
    if length < NAME_MIN_LENGTH:
        errors.append(ErrorCode.TOO_SHORT)
    if length > NAME_MAX_LENGTH:
        errors.append(ErrorCode.TOO_LONG)
    if not all(c.isalnum() or c in _NAME_SEPARATORS or _is_combining(c) for c in value):
        errors.append(ErrorCode.INVALID_CHARACTERS)
    return tuple(errors)


def _email_errors(value: str) -> tuple[ErrorCode, ...]:
    # Email format is binary: at most one code is ever reported.
    if not value:
        return (ErrorCode.EMPTY,)

    local, _, domain = value.partition("@")
    if value.count("@") != 1 or not local or not domain:
        return (ErrorCode.INVALID_FORMAT,)
    if "." not in domain:
        return (ErrorCode.MISSING_DOMAIN_DOT,)

    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return (ErrorCode.INVALID_FORMAT,)
    return ()


def _password_errors(value: str) -> tuple[ErrorCode, ...]:
    if not value:
        return (ErrorCode.EMPTY,)

    # Every check runs; all failing codes are reported together.
    errors = []
    if len(value) < PASSWORD_MIN_LENGTH:
        errors.append(ErrorCode.TOO_SHORT)
    if len(value) > PASSWORD_MAX_LENGTH:
        errors.append(ErrorCode.TOO_LONG)
    if not any(c.isupper() for c in value):
        errors.append(ErrorCode.MISSING_UPPERCASE)
    if not any(c.islower() for c in value):
        errors.append(ErrorCode.MISSING_LOWERCASE)
    if not any(c.isdigit() for c in value):
        errors.append(ErrorCode.MISSING_NUMBER)
    if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in value):
        errors.append(ErrorCode.MISSING_SPECIAL_CHARACTER)
    return tuple(errors)


def _user_id_errors(value: str) -> tuple[ErrorCode, ...]:
    if not value:
        return (ErrorCode.EMPTY,)
    if not _UUID4_PATTERN.match(value):
        return (ErrorCode.INVALID_FORMAT,)
    return ()


@dataclass(frozen=True)
class Name:
    """User display name."""

    value: str

    def __post_init__(self) -> None:
        errors = _name_errors(self.value)
        if errors:
            raise InvalidValueObject("Name", errors)

    @classmethod
    def parse(cls, raw: object) -> FieldResult["Name"]:
        """Trim, NFC-normalize and validate a raw name."""
        if not isinstance(raw, str):
            return Invalid((ErrorCode.INVALID_TYPE,))
        value = unicodedata.normalize("NFC", raw.strip())
        errors = _name_errors(value)
        if errors:
            return Invalid(errors)
        return Valid(cls(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Email:
    """
    Email address as typed by the user (trimmed).

    Equality and hashing use the lower-cased ``normalized`` form. Stored
    lookups leave case folding to the database.
    """

    value: str

    def __post_init__(self) -> None:
        errors = _email_errors(self.value)
        if errors:
            raise InvalidValueObject("Email", errors)

    @classmethod
    def parse(cls, raw: object) -> FieldResult["Email"]:
        """Trim and validate a raw email address."""
        if not isinstance(raw, str):
            return Invalid((ErrorCode.INVALID_TYPE,))
        value = raw.strip()
        errors = _email_errors(value)
        if errors:
            return Invalid(errors)
        return Valid(cls(value))

    @property
    def normalized(self) -> str:
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """
    Plaintext password that satisfies the strength rules.

    Never holds a hash. Hashing happens at the persistence boundary.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        errors = _password_errors(self.value)
        if errors:
            raise InvalidValueObject("Password", errors)

    @classmethod
    def parse(cls, raw: object) -> FieldResult["Password"]:
        """Validate a raw password. Whitespace is significant and kept."""
        if not isinstance(raw, str):
            return Invalid((ErrorCode.INVALID_TYPE,))
        errors = _password_errors(raw)
        if errors:
            return Invalid(errors)
        return Valid(cls(raw))


@dataclass(frozen=True)
class UserId:
    """UUID version 4 identifying a user."""

    value: str

    def __post_init__(self) -> None:
        errors = _user_id_errors(self.value)
        if errors:
            raise InvalidValueObject("UserId", errors)

    @classmethod
    def parse(cls, raw: str) -> FieldResult["UserId"]:
        """Validate an externally supplied id. Hex digits are lower-cased."""
        value = raw.strip().lower()
        errors = _user_id_errors(value)
        if errors:
            return Invalid(errors)
        return Valid(cls(value))

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "UserId":
        return cls(str(value))

    def __str__(self) -> str:
        return self.value
