"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid registration input
- Mocked domain ports and a service wired to them
"""

from unittest.mock import Mock

import pytest

from src.domain.registration import RegistrationService
from src.domain.value_objects import UserId

FIXED_USER_ID = "3f2b6c1e-8d4a-4f9b-a2c7-5e1d0b9a7c3f"

VALID_NAME = "John Doe"
VALID_EMAIL = "john@example.com"
VALID_PASSWORD = "Password123!"


@pytest.fixture
def uniqueness_checker() -> Mock:
    """Uniqueness checker reporting every email as free."""
    checker = Mock()
    checker.exists.return_value = False
    return checker


@pytest.fixture
def repository() -> Mock:
    """Persistence sink that accepts every save."""
    return Mock()


@pytest.fixture
def id_generator() -> Mock:
    """Identifier generator returning a fixed UUID v4."""
    generator = Mock()
    generator.generate.return_value = UserId(FIXED_USER_ID)
    return generator


@pytest.fixture
def service(uniqueness_checker: Mock, repository: Mock, id_generator: Mock) -> RegistrationService:
    """Registration service wired to mocked ports."""
    return RegistrationService(
        uniqueness_checker=uniqueness_checker,
        repository=repository,
        id_generator=id_generator,
    )
