"""
Notification host backed by the dashboard WebSocket.

Connected dashboard clients display notifications with the browser
Notification API and own the permission decision. A permission request
is broadcast as a "notification:permission_request" event; the client
answers through PUT /api/notifications/permission, which resolves the
pending request via report_permission().
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Protocol

from mindful.notify.base import Notification, NotificationHost, Permission

logger = logging.getLogger(__name__)


class Broadcaster(Protocol):
    @property
    def connection_count(self) -> int: ...

    async def broadcast(self, message: Dict[str, Any]) -> None: ...


class WebSocketNotificationHost(NotificationHost):
    def __init__(self, broadcaster: Broadcaster, enabled: bool = True, timeout_seconds: float = 30.0):
        self.broadcaster = broadcaster
        self.enabled = enabled
        self.timeout_seconds = timeout_seconds
        self._permission = Permission.DEFAULT
        self._pending: Optional[asyncio.Future] = None

    @property
    def supported(self) -> bool:
        return self.enabled

    @property
    def permission(self) -> Permission:
        return self._permission

    def report_permission(self, permission: Permission) -> None:
        """Record the decision reported by a dashboard client."""
        self._permission = Permission(permission)
        if self._pending is not None and not self._pending.done():
            self._pending.set_result(self._permission)

    async def request_permission(self) -> Permission:
        if self._permission != Permission.DEFAULT:
            return self._permission

        if self.broadcaster.connection_count == 0:
            logger.info("No dashboard client connected, cannot prompt for notification permission")
            return self._permission

        loop = asyncio.get_running_loop()
        if self._pending is None or self._pending.done():
            self._pending = loop.create_future()
            await self.broadcaster.broadcast({"event": "notification:permission_request", "data": {}})

        try:
            return await asyncio.wait_for(asyncio.shield(self._pending), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.info("Notification permission request timed out")
            # Settle the request so the next call prompts again
            if self._pending is not None and not self._pending.done():
                self._pending.set_result(self._permission)
            self._pending = None
            return self._permission

    async def show(self, notification: Notification) -> None:
        await self.broadcaster.broadcast(
            {
                "event": "notification",
                "data": {
                    "title": notification.title,
                    "body": notification.body,
                    "icon": notification.icon,
                },
            }
        )
