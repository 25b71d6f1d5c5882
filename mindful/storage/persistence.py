"""
Persistence adapter for the task list and theme selection.

The task list is stored as one JSON array under the tasks key and the
theme as a bare identifier under the theme key. Writes are
fire-and-forget: storage faults are logged and never reach the caller.
Loads never fail either; corrupted state comes back as defaults.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import ValidationError

from mindful.config import StorageConfig
from mindful.storage.kv import KeyValueStore
from mindful.tasks.models import Task
from mindful.themes import DEFAULT_THEME, ThemeId, parse_theme

logger = logging.getLogger(__name__)


@dataclass
class LoadedState:
    tasks: List[Task] = field(default_factory=list)
    theme: ThemeId = DEFAULT_THEME


class PersistenceAdapter:
    def __init__(self, store: KeyValueStore, config: Optional[StorageConfig] = None):
        self.store = store
        self.config = config or StorageConfig()

    @classmethod
    def from_config(cls, config: StorageConfig) -> "PersistenceAdapter":
        return cls(KeyValueStore(config.resolved_db_path()), config)

    def load(self) -> LoadedState:
        return LoadedState(tasks=self.load_tasks(), theme=self.load_theme())

    def load_tasks(self) -> List[Task]:
        try:
            raw = self.store.get(self.config.tasks_key)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Failed to read saved tasks: {e}")
            return []

        if not raw:
            return []

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError(f"expected a JSON array, got {type(records).__name__}")
            return [Task.model_validate(record) for record in records]
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Failed to parse saved tasks, starting empty: {e}")
            return []

    def load_theme(self) -> ThemeId:
        try:
            raw = self.store.get(self.config.theme_key)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Failed to read saved theme: {e}")
            return DEFAULT_THEME

        theme = parse_theme(raw) if raw else None
        if raw and theme is None:
            logger.warning(f"Ignoring unknown saved theme: {raw!r}")
        return theme or DEFAULT_THEME

    def save(self, tasks: List[Task]) -> None:
        try:
            payload = json.dumps([task.to_record() for task in tasks])
            self.store.set(self.config.tasks_key, payload)
        except (sqlite3.Error, OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save tasks: {e}")

    def save_theme(self, theme: ThemeId) -> None:
        try:
            self.store.set(self.config.theme_key, ThemeId(theme).value)
        except (sqlite3.Error, OSError, ValueError) as e:
            logger.error(f"Failed to save theme: {e}")


__all__ = ["LoadedState", "PersistenceAdapter"]
