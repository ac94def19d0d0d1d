"""
Pytest configuration and shared fixtures.

This file adds the parent directory to the Python path so that tests
can import from the domain, repositories, services and api modules.
Every fixture that touches disk points the store at pytest's tmp_path.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add the project root to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from domain.item import Item  # noqa: E402
from repositories.item_store import JsonItemStore, LoadResult, LoadStatus  # noqa: E402
from repositories.store_config import StoreConfig  # noqa: E402
from services.vending_machine import VendingMachine  # noqa: E402


class SteppingClock:
    """Deterministic UTC clock that advances by `step` on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


class RecordingStore:
    """In-memory store that records every save; never fails."""

    def __init__(self, items=None) -> None:
        self.saves = []
        self._items = list(items or [])

    def save(self, items) -> None:
        self.saves.append([item.copy() for item in items])

    def load_result(self) -> LoadResult:
        if not self._items:
            return LoadResult(status=LoadStatus.MISSING)
        return LoadResult(status=LoadStatus.LOADED, items=[item.copy() for item in self._items])


@pytest.fixture
def store_config(tmp_path: Path) -> StoreConfig:
    return StoreConfig(data_dir=tmp_path / "data")


@pytest.fixture
def store(store_config: StoreConfig) -> JsonItemStore:
    return JsonItemStore(store_config)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def machine(store: JsonItemStore, clock: SteppingClock) -> VendingMachine:
    return VendingMachine(store, clock=clock)


@pytest.fixture
def failing_store(tmp_path: Path) -> JsonItemStore:
    """A store whose data directory sits under a regular file, so every save fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return JsonItemStore(StoreConfig(data_dir=blocker / "data"))


@pytest.fixture
def kopi() -> Item:
    return Item(item_id="P001", name="Kopi Hitam", price=10000, stock=15, image_ref="/images/kopi.png")
