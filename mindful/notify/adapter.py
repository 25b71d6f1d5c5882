"""
Tool: Notification Adapter
Purpose: Cache notification permission and deliver notifications best-effort

Permission is read from the host once and cached; the host is only asked
again when the cached state is still undecided. Delivery is a silent no-op
unless permission is granted, and delivery faults are logged, never raised.
"""

from __future__ import annotations

import logging
from typing import Optional

from mindful.notify.base import Notification, NotificationHost, NullNotificationHost, Permission

logger = logging.getLogger(__name__)


class NotificationAdapter:
    def __init__(self, host: Optional[NotificationHost] = None, icon: Optional[str] = None):
        self.host = host or NullNotificationHost()
        self.icon = icon
        self._permission = self.host.permission if self.host.supported else Permission.DENIED

    @property
    def permission(self) -> Permission:
        return self._permission

    def refresh(self, permission: Permission) -> None:
        """Update the cache when the host reports a decision on its own."""
        if self.host.supported:
            self._permission = Permission(permission)

    async def request_permission(self) -> bool:
        """Return True if notifications are permitted, prompting when undecided."""
        if not self.host.supported:
            logger.warning("Notifications are not supported in this environment")
            self._permission = Permission.DENIED
            return False

        if self._permission == Permission.GRANTED:
            return True

        if self._permission == Permission.DEFAULT:
            try:
                self._permission = await self.host.request_permission()
            except Exception as e:
                logger.warning(f"Notification permission request failed: {e}")
                return False

        return self._permission == Permission.GRANTED

    async def send(self, title: str, body: str) -> bool:
        """Deliver a notification if permitted. Returns whether it was handed to the host."""
        if self._permission != Permission.GRANTED:
            return False

        try:
            await self.host.show(Notification(title=title, body=body, icon=self.icon))
        except Exception as e:
            logger.warning(f"Notification delivery failed: {e}")
            return False
        return True


__all__ = ["NotificationAdapter"]
