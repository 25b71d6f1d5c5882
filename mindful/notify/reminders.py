"""
One-shot deferred reminder notifications.

Each call to schedule() arms an independent asyncio task that sleeps and
then sends the reminder. Reminders do not look at the task list when they
fire, so a reminder armed for a task that was later deleted or completed
still goes out. Pending reminders are only cancelled on shutdown.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Set

from mindful.notify.adapter import NotificationAdapter

logger = logging.getLogger(__name__)


REMINDER_SET_TITLE = "Reminder Set"
REMINDER_SET_BODY = "We'll remind you in {minutes} minutes."
REMINDER_TITLE = "Task Reminder"
REMINDER_BODY = "Time to work on your task!"


class ReminderScheduler:
    def __init__(self, notifier: NotificationAdapter, seconds_per_minute: float = 60.0):
        self.notifier = notifier
        self.seconds_per_minute = seconds_per_minute
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def schedule(self, minutes: int, title: str = REMINDER_TITLE, body: str = REMINDER_BODY) -> asyncio.Task:
        """Send title/body after `minutes`. Must be called from a running loop."""
        delay = minutes * self.seconds_per_minute
        task = asyncio.get_running_loop().create_task(self._fire_later(delay, title, body))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.info(f"Reminder armed for {minutes} minute(s)")
        return task

    async def _fire_later(self, delay: float, title: str, body: str) -> None:
        await asyncio.sleep(delay)
        await self.notifier.send(title, body)

    async def shutdown(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
