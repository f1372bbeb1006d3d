"""Message ID generation."""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol
from uuid import uuid4

from message_board_backend.app.core.config import get_settings

SUPPORTED_FORMATS = ("uuid4", "hex")


class IdGenerator(Protocol):
    """Produces a fresh unique identifier on every call."""

    def generate_id(self) -> str:
        ...


class UuidIdGenerator:
    """ID generator backed by random UUIDs."""

    def __init__(self, id_format: str = "uuid4") -> None:
        if id_format not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported id format: {id_format}")
        self.id_format = id_format

    def generate_id(self) -> str:
        """Generate UUID string."""
        value = uuid4()
        if self.id_format == "hex":
            return value.hex
        return str(value)


@lru_cache(maxsize=1)
def get_id_generator() -> UuidIdGenerator:
    """Get the process-wide ID generator."""
    settings = get_settings()
    return UuidIdGenerator(settings.ids.format)
