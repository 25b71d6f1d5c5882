"""Tests for mindful/notify/reminders.py"""

import asyncio

import pytest

from mindful.notify.adapter import NotificationAdapter
from mindful.notify.base import Permission
from mindful.notify.reminders import REMINDER_BODY, REMINDER_TITLE, ReminderScheduler


@pytest.fixture
def scheduler(recording_host):
    return ReminderScheduler(NotificationAdapter(recording_host), seconds_per_minute=0.001)


class TestReminderScheduler:
    @pytest.mark.asyncio
    async def test_fires_after_delay(self, scheduler, recording_host):
        """Should send the reminder once the delay has elapsed."""
        task = scheduler.schedule(15)
        assert recording_host.shown == []

        await task

        (shown,) = recording_host.shown
        assert (shown.title, shown.body) == (REMINDER_TITLE, REMINDER_BODY)
        assert scheduler.pending_count == 0

    @pytest.mark.asyncio
    async def test_independent_reminders(self, scheduler, recording_host):
        """Should fire every reminder that was armed."""
        tasks = [scheduler.schedule(15), scheduler.schedule(15), scheduler.schedule(30)]
        assert scheduler.pending_count == 3

        await asyncio.gather(*tasks)

        assert len(recording_host.shown) == 3

    @pytest.mark.asyncio
    async def test_silent_without_permission(self, host_factory):
        host = host_factory(permission=Permission.DENIED)
        scheduler = ReminderScheduler(NotificationAdapter(host), seconds_per_minute=0.001)

        await scheduler.schedule(15)

        assert host.shown == []

    @pytest.mark.asyncio
    async def test_shutdown_cancels_pending(self, recording_host):
        """Should cancel reminders that have not fired yet."""
        scheduler = ReminderScheduler(NotificationAdapter(recording_host))
        task = scheduler.schedule(60)

        await scheduler.shutdown()

        assert task.cancelled()
        assert recording_host.shown == []
        assert scheduler.pending_count == 0

    def test_requires_running_loop(self, scheduler):
        with pytest.raises(RuntimeError):
            scheduler.schedule(15)
