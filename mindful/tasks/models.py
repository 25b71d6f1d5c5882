"""
Task data model and breakdown result types.

Tasks serialize with camelCase field names (estimatedMinutes, createdAt,
reminderTime) so the persisted JSON matches what the dashboard client
reads and writes.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from mindful.tasks import DEFAULT_ESTIMATED_MINUTES


class Priority(str, Enum):
    """Task priority."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def generate_id() -> str:
    return str(uuid.uuid4())


class Task(BaseModel):
    """One user-visible unit of work."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    title: str = Field(..., min_length=1)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    estimated_minutes: int = Field(default=DEFAULT_ESTIMATED_MINUTES, alias="estimatedMinutes")
    category: Optional[str] = None
    created_at: int = Field(default_factory=now_ms, alias="createdAt")
    reminder_time: Optional[int] = Field(default=None, alias="reminderTime")

    def to_record(self) -> dict[str, Any]:
        """Serialize with the persisted (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Subtask(BaseModel):
    """One entry of a goal breakdown as returned by the LLM."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    estimated_minutes: int = Field(..., alias="estimatedMinutes", ge=1, strict=True)
    priority: Priority


class TaskBreakdown(BaseModel):
    """Schema of the breakdown response body."""

    subtasks: list[Subtask]


@dataclass(frozen=True)
class BreakdownSuccess:
    subtasks: list[Subtask] = field(default_factory=list)


@dataclass(frozen=True)
class BreakdownFailure:
    reason: str


BreakdownResult = Union[BreakdownSuccess, BreakdownFailure]


__all__ = [
    "BreakdownFailure",
    "BreakdownResult",
    "BreakdownSuccess",
    "Priority",
    "Subtask",
    "Task",
    "TaskBreakdown",
    "generate_id",
    "now_ms",
]
