"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
All wiring is explicit: collaborators are built here and passed to the
domain service's constructor.
"""

from functools import lru_cache

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.identity.uuid_generator import Uuid4Generator
from src.adapters.repository.postgres import PostgresUserRepository
from src.adapters.security.bcrypt_hasher import BcryptPasswordHasher
from src.api.messages import MessageCatalog, get_catalog
from src.config.settings import get_settings
from src.domain.registration import RegistrationService

# Module-level singleton - Uuid4Generator is stateless
_id_generator = Uuid4Generator()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get bcrypt hasher configured with the settings cost factor (singleton)."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool, get_password_hasher())


def get_id_generator() -> Uuid4Generator:
    """Get UUID v4 generator (singleton)."""
    return _id_generator


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    The PostgreSQL repository serves as both uniqueness checker and
    persistence sink.
    """
    repository = get_repository(request)
    return RegistrationService(
        uniqueness_checker=repository,
        repository=repository,
        id_generator=get_id_generator(),
    )


def get_messages() -> MessageCatalog:
    """Get the message catalog for the configured locale."""
    return get_catalog(get_settings().locale)
