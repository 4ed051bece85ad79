"""
Domain exceptions - Error types for unexpected registration faults.

Expected validation outcomes are returned as values (see results.py and
registration.py). Exceptions are reserved for faults the domain cannot
recover from locally, such as a storage failure.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class PersistenceError(RegistrationError):
    """Storage boundary failed to save or query a user."""

    pass


class InvalidValueObject(RegistrationError, ValueError):
    """
    A value object was constructed directly with an invalid value.

    Callers are expected to go through ``parse()``, which reports
    failures as values. Reaching this exception is a programming error.
    """

    def __init__(self, type_name: str, codes: tuple) -> None:
        self.type_name = type_name
        self.codes = codes
        super().__init__(f"{type_name} rejected: {', '.join(c.value for c in codes)}")
