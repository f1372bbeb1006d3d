"""In-memory repository for message boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import lru_cache
from typing import Callable, List, Optional

from message_board_backend.app.services.boards.id_generation import IdGenerator, get_id_generator

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


@dataclass
class Message:
    """Message entity posted on a board."""

    id: str
    text: str
    created_at: datetime
    votes: int = 0


@dataclass
class Board:
    """Board entity holding its messages in insertion order."""

    id: str
    created_at: datetime
    messages: List[Message] = field(default_factory=list)


class BoardRepository:
    """Repository for board and message operations.

    State lives in process memory only. Instances are not thread-safe;
    share one across threads only behind an external lock.
    """

    def __init__(self, id_generator: IdGenerator, clock: Clock = utc_now) -> None:
        self.id_generator = id_generator
        self.clock = clock
        self._boards: List[Board] = []
        logger.info("Board repository initialized")

    # ========== Board operations ==========

    def find_board(self, board_id: str) -> Optional[Board]:
        """Get board by ID, or None if no such board exists."""
        for board in self._boards:
            if board.id == board_id:
                return board
        return None

    def has_board(self, board_id: str) -> bool:
        """Check whether a board with the given ID exists."""
        return self.find_board(board_id) is not None

    def create_board(self, board_id: str) -> Board:
        """Create a new empty board.

        No check is made for an existing board with the same ID; callers
        are expected to use ``has_board`` first. A duplicate ID results in a
        second board that ``find_board`` never returns.

        Args:
            board_id: Caller supplied board ID

        Returns:
            The created board
        """
        board = Board(id=board_id, created_at=self.clock())
        self._boards.append(board)
        logger.debug("Created board id=%s", board_id)
        return board

    # ========== Message operations ==========

    def find_messages(self, board_id: str) -> Optional[List[Message]]:
        """Get all messages of a board.

        Returns:
            The board's messages (possibly empty), or None if the board
            does not exist
        """
        board = self.find_board(board_id)
        if board is None:
            return None
        return board.messages

    def find_message(self, board_id: str, message_id: str) -> Optional[Message]:
        """Get a single message from a board.

        Every message is scanned; if several share the ID the last one wins.
        """
        board = self.find_board(board_id)
        if board is None:
            return None

        requested: Optional[Message] = None
        for message in board.messages:
            if message.id == message_id:
                requested = message
        return requested

    def create_message(self, board_id: str, text: str) -> Optional[Message]:
        """Append a new message to a board.

        Args:
            board_id: ID of the target board
            text: Message text, stored as given

        Returns:
            The created message, or None if the board does not exist
        """
        board = self.find_board(board_id)
        if board is None:
            return None

        message = Message(
            id=self.id_generator.generate_id(),
            text=text,
            created_at=self.clock(),
        )
        board.messages.append(message)
        logger.debug("Created message id=%s board=%s", message.id, board_id)
        return message

    def delete_message(self, board_id: str, message_id: str) -> Optional[Message]:
        """Remove a message from a board.

        All messages carrying the ID are removed in place. Since IDs are
        unique there is at most one, which is returned.

        Returns:
            The removed message, or None if the board or message is missing
        """
        board = self.find_board(board_id)
        if board is None:
            return None

        removed = [m for m in board.messages if m.id == message_id]
        if not removed:
            return None

        board.messages[:] = [m for m in board.messages if m.id != message_id]
        logger.debug("Deleted message id=%s board=%s", message_id, board_id)
        return removed[0]

    def clear(self) -> None:
        """Drop every board and message. Intended for test setup and teardown."""
        self._boards = []
        logger.info("Board repository cleared")


@lru_cache(maxsize=1)
def get_board_repository() -> BoardRepository:
    """Get the process-wide board repository."""
    return BoardRepository(get_id_generator())
