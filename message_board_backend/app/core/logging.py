"""Logging setup for the message board backend."""

from __future__ import annotations

import logging
from typing import List

from message_board_backend.app.core.config import MessageBoardSettings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(settings: MessageBoardSettings) -> None:
    """Configure application logging destinations."""

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
