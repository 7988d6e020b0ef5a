"""Shared pytest fixtures for agentdeck tests."""

from pathlib import Path

import pytest

from agentdeck.core.errors import StoreWriteError
from agentdeck.core.ir import Role, ThemePreference
from agentdeck.core.store import JsonFileStore, MemoryStore
from agentdeck.ui.layout_engine import DashboardEditor, LayoutStore


class RecordingPort:
    """Theme application port that remembers every applied preference."""

    def __init__(self) -> None:
        self.applied: list[ThemePreference] = []

    def apply(self, preference: ThemePreference) -> None:
        self.applied.append(preference)

    @property
    def last(self) -> ThemePreference:
        return self.applied[-1]


class FailingStore(MemoryStore):
    """Store whose writes always fail; reads work normally."""

    def save(self, key: str, value: str) -> None:
        raise StoreWriteError("quota exceeded")

    def clear(self, key: str) -> None:
        raise StoreWriteError("quota exceeded")


@pytest.fixture
def memory_store() -> MemoryStore:
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def file_store(tmp_path: Path) -> JsonFileStore:
    """Return a JSON file store under a temporary directory."""
    return JsonFileStore(tmp_path / ".agentdeck" / "store.json")


@pytest.fixture
def layout_store(memory_store: MemoryStore) -> LayoutStore:
    return LayoutStore(memory_store)


@pytest.fixture
def editor(layout_store: LayoutStore) -> DashboardEditor:
    """Return an agent dashboard editor in viewing mode."""
    return DashboardEditor(layout_store, Role.AGENT)


@pytest.fixture
def port() -> RecordingPort:
    return RecordingPort()
