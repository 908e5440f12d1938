"""Identifier generation."""

import uuid


class UuidIdGenerator:
    """Issues random UUID4 strings. Implements IdGeneratorProtocol."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
