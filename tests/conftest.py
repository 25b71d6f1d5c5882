"""Shared test fixtures for MindfulTask tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- Fake LLM and notification host doubles
- Ready-wired AppState instances

Usage:
    def test_something(app_state):
        app_state.add_task("Buy milk")
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Optional

import pytest

from mindful.config import MindfulConfig, StorageConfig
from mindful.notify.adapter import NotificationAdapter
from mindful.notify.base import Notification, NotificationHost, Permission
from mindful.notify.reminders import ReminderScheduler
from mindful.storage.kv import KeyValueStore
from mindful.storage.persistence import PersistenceAdapter
from mindful.state import AppState
from mindful.tasks.decompose import GoalBreakdownClient
from mindful.tasks.encouragement import EncouragementClient


# ─────────────────────────────────────────────────────────────────────────────
# Test Doubles
# ─────────────────────────────────────────────────────────────────────────────


class FakeLLM:
    """Stands in for LLMClient: returns queued responses or raises."""

    def __init__(self, responses=None, error: Optional[Exception] = None, configured: bool = True):
        self.responses = list(responses or [])
        self.error = error
        self._configured = configured
        self.prompts: list[str] = []

    @property
    def configured(self) -> bool:
        return self._configured

    async def complete(self, prompt: str, max_tokens: int) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


class RecordingHost(NotificationHost):
    """Notification host that records what it was asked to show."""

    def __init__(
        self,
        supported: bool = True,
        permission: Permission = Permission.GRANTED,
        decision: Permission = Permission.GRANTED,
    ):
        self._supported = supported
        self._permission = permission
        self.decision = decision
        self.prompts = 0
        self.shown: list[Notification] = []

    @property
    def supported(self) -> bool:
        return self._supported

    @property
    def permission(self) -> Permission:
        return self._permission

    async def request_permission(self) -> Permission:
        self.prompts += 1
        self._permission = self.decision
        return self._permission

    async def show(self, notification: Notification) -> None:
        self.shown.append(notification)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file is automatically deleted after the test completes.
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    if db_path.exists():
        os.unlink(db_path)


@pytest.fixture
def kv_store(temp_db: Path) -> KeyValueStore:
    return KeyValueStore(temp_db)


@pytest.fixture
def persistence(kv_store: KeyValueStore) -> PersistenceAdapter:
    return PersistenceAdapter(kv_store, StorageConfig(db_path=str(kv_store.db_path)))


@pytest.fixture
def test_config(temp_db: Path) -> MindfulConfig:
    config = MindfulConfig()
    config.storage.db_path = str(temp_db)
    config.notifications.enabled = True
    return config


# ─────────────────────────────────────────────────────────────────────────────
# Collaborator Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def recording_host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app_state(test_config, persistence, fake_llm, recording_host, fake_clock) -> AppState:
    """AppState wired to a temp database, a fake LLM and a recording host."""
    notifier = NotificationAdapter(recording_host, icon="icon.png")
    return AppState(
        config=test_config,
        persistence=persistence,
        notifier=notifier,
        breakdown_client=GoalBreakdownClient(test_config.ai, llm=fake_llm),
        encouragement_client=EncouragementClient(test_config.ai, llm=fake_llm),
        reminders=ReminderScheduler(notifier, seconds_per_minute=0.001),
        clock=fake_clock,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Sample Data
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def breakdown_json() -> str:
    """A valid breakdown response for "plan a birthday party"."""
    return """{
  "subtasks": [
    {"title": "Pick a date", "estimatedMinutes": 5, "priority": "High"},
    {"title": "Write guest list", "estimatedMinutes": 20, "priority": "Medium"},
    {"title": "Order cake", "estimatedMinutes": 10, "priority": "Low"}
  ]
}"""


# ─────────────────────────────────────────────────────────────────────────────
# Double Factories
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def llm_factory():
    """The FakeLLM class, for tests that need more than one instance."""
    return FakeLLM


@pytest.fixture
def host_factory():
    """The RecordingHost class, for tests that need a specific permission setup."""
    return RecordingHost
