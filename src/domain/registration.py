"""
Registration domain service - Validates and creates new users.

Registration Flow
=================

1. Parse name, email and password independently. Every field is always
   parsed; one failing field never prevents the others from reporting.
2. Only when the email parsed successfully, ask the uniqueness checker
   whether it is already registered. A taken email adds
   EMAIL_ALREADY_EXISTS under the ``email`` key.
3. Any collected error rejects the attempt with a single
   ValidationErrorReport covering all fields.
4. Otherwise build the User with a fresh id and hand it to the
   repository exactly once.

Expected failures are returned as values (RegistrationRejected).
Exceptions raised by the repository propagate unchanged: the check in
step 2 is best-effort, and a concurrent registration that wins the race
is caught by the storage unique constraint, not here.
"""

import logging
from dataclasses import dataclass
from typing import Union

from .aggregator import ErrorAggregator, ValidationErrorReport
from .errors import ErrorCode, Field
from .ports import IdentifierGenerator, UniquenessChecker, UserRepository
from .results import Valid
from .user import User
from .value_objects import Email, Name, Password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registered:
    """Registration succeeded and the user was persisted."""

    user: User


@dataclass(frozen=True)
class RegistrationRejected:
    """Registration failed validation; ``report`` lists every failure."""

    report: ValidationErrorReport


RegistrationResult = Union[Registered, RegistrationRejected]


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Collaborators are passed explicitly; nothing is resolved from
    global state.
    """

    uniqueness_checker: UniquenessChecker
    repository: UserRepository
    id_generator: IdentifierGenerator

    def register(self, name: object, email: object, password: object) -> RegistrationResult:
        """
        Register a new user.

        Non-text values are reported as INVALID_TYPE for their field.

        Args:
            name: Raw display name (trimmed before validation)
            email: Raw email address (trimmed before validation)
            password: Raw password (validated as-is)

        Returns:
            Registered with the new User, or RegistrationRejected with
            the full error report

        Raises:
            PersistenceError: If the repository fails to save the user
        """
        aggregator, fields = self._validate(name, email, password)

        if aggregator.has_errors():
            report = aggregator.report()
            logger.info("Registration rejected: %s", report.as_dict())
            return RegistrationRejected(report)

        valid_name, valid_email, valid_password = fields
        user = User(
            id=self.id_generator.generate(),
            name=valid_name,
            email=valid_email,
            password=valid_password,
        )
        self.repository.save(user)
        logger.info("Registered user %s", user.id)
        return Registered(user)

    def validate(self, name: object, email: object, password: object) -> ValidationErrorReport:
        """
        Run field validation and the uniqueness check without persisting.

        Returns:
            The error report; empty when registration would proceed
        """
        aggregator, _ = self._validate(name, email, password)
        return aggregator.report()

    def _validate(
        self, name: object, email: object, password: object
    ) -> tuple[ErrorAggregator, tuple[Name, Email, Password] | None]:
        aggregator = ErrorAggregator()

        name_result = Name.parse(name)
        email_result = Email.parse(email)
        password_result = Password.parse(password)

        aggregator.collect(Field.NAME, name_result)
        aggregator.collect(Field.EMAIL, email_result)
        aggregator.collect(Field.PASSWORD, password_result)

        # Uniqueness is only meaningful for a well-formed email.
        if isinstance(email_result, Valid) and self.uniqueness_checker.exists(email_result.value):
            aggregator.add(Field.EMAIL, [ErrorCode.EMAIL_ALREADY_EXISTS])

        if aggregator.has_errors():
            return aggregator, None
        return aggregator, (name_result.value, email_result.value, password_result.value)
