"""
UUID identifier generator - Implements IdentifierGenerator protocol.
"""

import uuid

from src.domain.value_objects import UserId


class Uuid4Generator:
    """Generates random version 4 UUIDs for new users."""

    def generate(self) -> UserId:
        return UserId.from_uuid(uuid.uuid4())
