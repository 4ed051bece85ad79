"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core logic for validating and creating new
users. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .aggregator import ErrorAggregator, ValidationErrorReport
from .errors import ErrorCode, Field
from .exceptions import InvalidValueObject, PersistenceError, RegistrationError
from .ports import IdentifierGenerator, PasswordHasher, UniquenessChecker, UserRepository
from .registration import Registered, RegistrationRejected, RegistrationResult, RegistrationService
from .results import FieldResult, Invalid, Valid
from .user import User
from .value_objects import Email, Name, Password, UserId

__all__ = [
    "Email",
    "ErrorAggregator",
    "ErrorCode",
    "Field",
    "FieldResult",
    "IdentifierGenerator",
    "Invalid",
    "InvalidValueObject",
    "Name",
    "Password",
    "PasswordHasher",
    "PersistenceError",
    "Registered",
    "RegistrationError",
    "RegistrationRejected",
    "RegistrationResult",
    "RegistrationService",
    "UniquenessChecker",
    "User",
    "UserId",
    "UserRepository",
    "Valid",
    "ValidationErrorReport",
]
