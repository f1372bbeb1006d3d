"""Shared fixtures for message board tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Iterator

import pytest

from message_board_backend.app.core.config import get_settings
from message_board_backend.app.services.boards import BoardRepository
from message_board_backend.app.services.boards.id_generation import get_id_generator
from message_board_backend.app.services.boards.repository import get_board_repository


class SequentialIdGenerator:
    """Deterministic ID generator for tests."""

    def __init__(self, prefix: str = "msg") -> None:
        self.prefix = prefix
        self.counter = 0

    def generate_id(self) -> str:
        self.counter += 1
        return f"{self.prefix}-{self.counter}"


class FakeClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def repository(id_generator: SequentialIdGenerator, clock: FakeClock) -> Iterator[BoardRepository]:
    """Create a fresh repository and clear it afterwards."""
    repo = BoardRepository(id_generator, clock=clock)
    yield repo
    repo.clear()


@pytest.fixture(autouse=True)
def reset_cached_singletons() -> Iterator[None]:
    """Drop cached settings and singletons around each test."""
    get_settings.cache_clear()
    get_id_generator.cache_clear()
    get_board_repository.cache_clear()
    yield
    get_settings.cache_clear()
    get_id_generator.cache_clear()
    get_board_repository.cache_clear()
