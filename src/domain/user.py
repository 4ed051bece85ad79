"""
User entity - The result of a fully validated registration.
"""

from dataclasses import dataclass

from .value_objects import Email, Name, Password, UserId


@dataclass(frozen=True)
class User:
    """
    A new user built only from already-valid value objects.

    Frozen: there is no path to mutate a component after construction.
    """

    id: UserId
    name: Name
    email: Email
    password: Password

    def __post_init__(self) -> None:
        for attr, expected in (
            ("id", UserId),
            ("name", Name),
            ("email", Email),
            ("password", Password),
        ):
            if not isinstance(getattr(self, attr), expected):
                raise TypeError(f"User.{attr} must be a {expected.__name__}")

    def public_view(self) -> dict[str, str]:
        """Fields safe to expose outside the domain. Never includes the password."""
        return {
            "id": self.id.value,
            "name": self.name.value,
            "email": self.email.value,
        }
