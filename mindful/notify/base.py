"""
Base interface for notification hosts.

A host is whatever actually shows a notification to the user. It reports
whether it supports notifications at all, what the user has decided about
permission, and can be asked to prompt for a decision.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Permission(str, Enum):
    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class Notification:
    title: str
    body: str
    icon: Optional[str] = None


class NotificationHost(ABC):
    """Abstract notification host."""

    @property
    @abstractmethod
    def supported(self) -> bool:
        """False when the environment has no notification capability."""
        ...

    @property
    @abstractmethod
    def permission(self) -> Permission:
        ...

    @abstractmethod
    async def request_permission(self) -> Permission:
        """Prompt the user and return the resulting decision."""
        ...

    @abstractmethod
    async def show(self, notification: Notification) -> None:
        ...


class NullNotificationHost(NotificationHost):
    """Host for environments without any notification support."""

    @property
    def supported(self) -> bool:
        return False

    @property
    def permission(self) -> Permission:
        return Permission.DENIED

    async def request_permission(self) -> Permission:
        return Permission.DENIED

    async def show(self, notification: Notification) -> None:
        return None
