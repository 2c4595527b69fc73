"""Pytest fixtures for the todo list tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from simple_todos.config import Settings
from simple_todos.main import create_app
from simple_todos.persistence import TaskPersistence
from simple_todos.slots import MemorySlotStore
from simple_todos.store import TaskStore


class RecordingSlotStore(MemorySlotStore):
    """Memory slot store that remembers every write."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


@pytest.fixture
def slots() -> RecordingSlotStore:
    return RecordingSlotStore()


@pytest.fixture
def persistence(slots: RecordingSlotStore) -> TaskPersistence:
    return TaskPersistence(slots)


@pytest.fixture
def store(persistence: TaskPersistence) -> TaskStore:
    return TaskStore(persistence)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path, log_level="DEBUG")


@pytest.fixture
def client(settings: Settings, slots: RecordingSlotStore) -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app(settings, slots=slots))
