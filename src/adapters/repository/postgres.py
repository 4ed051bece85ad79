"""
PostgreSQL repository adapter - Implements UniquenessChecker and UserRepository.

This module provides the PostgreSQL implementation of the domain's
persistence ports using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The domain asks ``exists()`` before saving, but that check is best-effort.
Two concurrent registrations for the same address can both pass it. The
``users_email_lower_key`` unique index on ``lower(email)`` is what closes
that race: the losing INSERT raises UniqueViolation, which is surfaced to
the domain as PersistenceError (never as a validation failure).

Emails are compared case-insensitively with PostgreSQL's ``lower()`` on both
sides of the lookup, the same function the unique index is built on.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceError
from src.domain.ports import PasswordHasher
from src.domain.user import User
from src.domain.value_objects import Email

logger = logging.getLogger(__name__)


class PostgresUserRepository:
    """
    Implements UniquenessChecker and UserRepository protocols via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool, hasher: PasswordHasher) -> None:
        """
        Initialize repository with connection pool and password hasher.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            hasher: Hashes plaintext passwords before they are written
        """
        self._pool = pool
        self._hasher = hasher

    def exists(self, email: Email) -> bool:
        """
        Check whether a user with this email is already stored.

        Args:
            email: Validated email; matched case-insensitively by the database

        Returns:
            True if a row exists for the email

        Raises:
            PersistenceError: If the query fails
        """
        sql = "SELECT 1 FROM users WHERE lower(email) = lower(%s) LIMIT 1"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email.value,))
                return cursor.fetchone() is not None
        except psycopg.Error as e:
            logger.error("User lookup failed: %s", e.__class__.__name__)
            raise PersistenceError("User lookup failed") from e

    def save(self, user: User) -> None:
        """
        Insert a new user row with a hashed password.

        Args:
            user: Fully validated user entity

        Raises:
            PersistenceError: If the insert fails, including a unique
                violation on email lost to a concurrent registration
        """
        sql = """
            INSERT INTO users (id, name, email, password_hash, created_at)
            VALUES (%s, %s, %s, %s, NOW())
        """
        password_hash = self._hasher.hash(user.password)

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql,
                    (user.id.value, user.name.value, user.email.value, password_hash),
                )
                conn.commit()
        except pg_errors.UniqueViolation as e:
            logger.warning("Concurrent registration lost unique constraint for user %s", user.id)
            raise PersistenceError("User already stored") from e
        except psycopg.Error as e:
            logger.error("User insert failed: %s", e.__class__.__name__)
            raise PersistenceError("User insert failed") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
