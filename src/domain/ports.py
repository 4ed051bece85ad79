"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols structurally.
"""

from typing import Protocol

from .user import User
from .value_objects import Email, Password, UserId


class UniquenessChecker(Protocol):
    """Port answering whether an email is already registered."""

    def exists(self, email: Email) -> bool:
        """
        Check if a user with this email already exists.

        Only ever called with a validated Email. Lookups are
        case-insensitive.

        Args:
            email: Validated email address

        Returns:
            True if the email is taken, False otherwise
        """
        ...


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def save(self, user: User) -> None:
        """
        Persist a newly registered user.

        The implementation is responsible for turning the plaintext
        password into a storage-safe hash before writing.

        Raises:
            PersistenceError: If the write fails, including a unique
                constraint violation lost to a concurrent registration
        """
        ...


class IdentifierGenerator(Protocol):
    """Port producing identifiers for new users."""

    def generate(self) -> UserId:
        """Return a fresh UUID version 4."""
        ...


class PasswordHasher(Protocol):
    """Port used by persistence adapters to hash passwords."""

    def hash(self, password: Password) -> str:
        ...
