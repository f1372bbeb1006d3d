"""Boards service module for in-memory message boards."""

from .id_generation import IdGenerator, UuidIdGenerator, get_id_generator
from .repository import (
    Board,
    BoardRepository,
    Clock,
    Message,
    get_board_repository,
    utc_now,
)

__all__ = [
    "Board",
    "BoardRepository",
    "Clock",
    "IdGenerator",
    "Message",
    "UuidIdGenerator",
    "get_board_repository",
    "get_id_generator",
    "utc_now",
]
