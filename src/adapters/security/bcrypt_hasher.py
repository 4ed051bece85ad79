"""
Bcrypt password hasher - Implements PasswordHasher protocol.

Hashing lives at the persistence boundary so the domain Password value
object only ever holds plaintext that has passed the strength rules.
"""

import bcrypt

from src.domain.value_objects import Password

MIN_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = MIN_BCRYPT_ROUNDS) -> None:
        if rounds < MIN_BCRYPT_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be >= {MIN_BCRYPT_ROUNDS}")
        self._rounds = rounds

    def hash(self, password: Password) -> str:
        """Hash a validated password with a fresh salt."""
        return bcrypt.hashpw(password.value.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()
