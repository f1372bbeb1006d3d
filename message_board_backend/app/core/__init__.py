"""Core configuration and logging setup."""

from .config import IdSettings, MessageBoardSettings, get_settings
from .logging import configure_logging

__all__ = ["IdSettings", "MessageBoardSettings", "configure_logging", "get_settings"]
