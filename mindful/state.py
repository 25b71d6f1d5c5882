"""
Application state container.

AppState owns everything that is process-wide: the task store, the theme
selection, the notification permission cache, pending reminders and the
encouragement toast. The dashboard creates one instance at startup and
hands it to routes through a dependency; nothing here is a module global.

Workflows:
    add_task / delete_task / set_theme: synchronous, write-through
    toggle_task + encourage: completion milestones trigger an encouragement toast
    smart_breakdown: LLM goal breakdown behind a one-at-a-time gate
    set_reminder: acknowledgment now, reminder notification later
    enable_notifications: permission prompt plus a welcome notification
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from mindful.config import MindfulConfig
from mindful.notify.adapter import NotificationAdapter
from mindful.notify.base import NotificationHost
from mindful.notify.reminders import REMINDER_SET_BODY, REMINDER_SET_TITLE, ReminderScheduler
from mindful.notify.websocket_host import Broadcaster
from mindful.storage.persistence import PersistenceAdapter
from mindful.tasks.decompose import GoalBreakdownClient
from mindful.tasks.encouragement import EncouragementClient, should_encourage
from mindful.tasks.models import BreakdownFailure, BreakdownSuccess, Task
from mindful.tasks.stats import StatsSummary, summarize
from mindful.tasks.store import TaskStore, ToggleResult
from mindful.themes import THEMES, ThemeConfig, ThemeId

logger = logging.getLogger(__name__)


BREAKDOWN_FAILED_MESSAGE = "Could not break down this task. Try being more specific."
NOTIFICATIONS_ENABLED_TITLE = "Notifications Enabled"
NOTIFICATIONS_ENABLED_BODY = "You'll now get task reminders!"


class BreakdownInProgress(RuntimeError):
    """A goal breakdown is already running."""


@dataclass(frozen=True)
class BreakdownOutcome:
    success: bool
    tasks: List[Task] = field(default_factory=list)
    message: Optional[str] = None
    clear_input: bool = False


class EncouragementToast:
    """Last encouragement message, visible for a fixed window after it is shown."""

    def __init__(self, duration_seconds: float = 4.0, clock: Callable[[], float] = time.monotonic):
        self.duration_seconds = duration_seconds
        self._clock = clock
        self._message: Optional[str] = None
        self._shown_at: Optional[float] = None

    def show(self, message: str) -> None:
        self._message = message
        self._shown_at = self._clock()

    @property
    def visible(self) -> bool:
        if self._message is None or self._shown_at is None:
            return False
        return self._clock() - self._shown_at < self.duration_seconds

    @property
    def message(self) -> Optional[str]:
        return self._message if self.visible else None


class AppState:
    def __init__(
        self,
        config: MindfulConfig,
        persistence: PersistenceAdapter,
        notifier: NotificationAdapter,
        breakdown_client: GoalBreakdownClient,
        encouragement_client: EncouragementClient,
        reminders: Optional[ReminderScheduler] = None,
        events: Optional[Broadcaster] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.persistence = persistence
        self.notifier = notifier
        self.breakdown_client = breakdown_client
        self.encouragement_client = encouragement_client
        self.reminders = reminders or ReminderScheduler(notifier)
        self.events = events
        self.toast = EncouragementToast(config.notifications.toast_seconds, clock=clock)

        loaded = persistence.load()
        self.store = TaskStore(persistence=persistence, tasks=loaded.tasks)
        self.theme: ThemeId = loaded.theme
        self._breakdown_in_flight = False
        logger.info(f"Loaded {len(self.store)} task(s), theme '{self.theme.value}'")

    @classmethod
    def create(
        cls,
        config: MindfulConfig,
        host: Optional[NotificationHost] = None,
        events: Optional[Broadcaster] = None,
    ) -> "AppState":
        """Wire up the default collaborators from configuration."""
        return cls(
            config=config,
            persistence=PersistenceAdapter.from_config(config.storage),
            notifier=NotificationAdapter(host, icon=config.notifications.icon),
            breakdown_client=GoalBreakdownClient(config.ai),
            encouragement_client=EncouragementClient(config.ai),
            events=events,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Tasks
    # ─────────────────────────────────────────────────────────────────────

    @property
    def tasks(self) -> List[Task]:
        return self.store.tasks

    def add_task(self, title: str) -> Optional[Task]:
        return self.store.add_task(title)

    def delete_task(self, task_id: str) -> bool:
        return self.store.delete_task(task_id)

    def toggle_task(self, task_id: str) -> Optional[ToggleResult]:
        return self.store.toggle_task(task_id)

    @staticmethod
    def needs_encouragement(result: Optional[ToggleResult]) -> bool:
        return bool(result and result.completion_event and should_encourage(result.completed_count))

    async def encourage(self, completed_count: int) -> str:
        """Fetch an encouragement message and show it as the toast."""
        message = await self.encouragement_client.suggest(completed_count)
        self.toast.show(message)
        await self.publish(
            "toast:show",
            {"message": message, "duration_ms": int(self.toast.duration_seconds * 1000)},
        )
        return message

    async def toggle_and_encourage(self, task_id: str) -> Optional[ToggleResult]:
        result = self.toggle_task(task_id)
        if self.needs_encouragement(result):
            await self.encourage(result.completed_count)
        return result

    @property
    def breakdown_pending(self) -> bool:
        return self._breakdown_in_flight

    async def smart_breakdown(self, goal: str) -> BreakdownOutcome:
        if not goal or not goal.strip():
            return BreakdownOutcome(success=False)

        if self._breakdown_in_flight:
            raise BreakdownInProgress("A breakdown is already in progress")

        self._breakdown_in_flight = True
        try:
            result = await self.breakdown_client.breakdown(goal)
        finally:
            self._breakdown_in_flight = False

        if isinstance(result, BreakdownSuccess) and result.subtasks:
            tasks = self.store.add_breakdown(result.subtasks)
            return BreakdownOutcome(success=True, tasks=tasks, clear_input=True)

        if isinstance(result, BreakdownFailure):
            logger.warning(f"Goal breakdown failed: {result.reason}")
        else:
            logger.warning("Goal breakdown returned no subtasks")
        return BreakdownOutcome(success=False, message=BREAKDOWN_FAILED_MESSAGE)

    # ─────────────────────────────────────────────────────────────────────
    # Reminders and notifications
    # ─────────────────────────────────────────────────────────────────────

    async def set_reminder(self, task_id: str, minutes: int) -> Optional[Task]:
        task = self.store.set_reminder(task_id, minutes)
        await self.notifier.send(REMINDER_SET_TITLE, REMINDER_SET_BODY.format(minutes=minutes))
        self.reminders.schedule(minutes)
        return task

    async def enable_notifications(self) -> bool:
        granted = await self.notifier.request_permission()
        if granted:
            await self.notifier.send(NOTIFICATIONS_ENABLED_TITLE, NOTIFICATIONS_ENABLED_BODY)
        return granted

    # ─────────────────────────────────────────────────────────────────────
    # Theme, stats, events
    # ─────────────────────────────────────────────────────────────────────

    @property
    def theme_config(self) -> ThemeConfig:
        return THEMES[self.theme]

    @property
    def dark_mode(self) -> bool:
        return self.theme_config.is_dark

    def set_theme(self, theme: ThemeId) -> ThemeConfig:
        self.theme = ThemeId(theme)
        self.persistence.save_theme(self.theme)
        return self.theme_config

    def stats(self) -> StatsSummary:
        return summarize(self.store.tasks)

    async def publish(self, event: str, data: Dict[str, Any]) -> None:
        if self.events is None:
            return
        try:
            await self.events.broadcast({"event": event, "data": data})
        except Exception as e:
            logger.warning(f"Failed to publish {event}: {e}")

    async def shutdown(self) -> None:
        await self.reminders.shutdown()


__all__ = [
    "AppState",
    "BREAKDOWN_FAILED_MESSAGE",
    "BreakdownInProgress",
    "BreakdownOutcome",
    "EncouragementToast",
]
