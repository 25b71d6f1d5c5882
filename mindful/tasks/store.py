"""
Tool: Task Store
Purpose: Own the in-memory task list and its mutations

The list is ordered newest first. Every committed mutation is mirrored
to the persistence adapter (write-through, one write per mutation).
Operations on an unknown id are no-ops and do not write.

Usage:
    from mindful.tasks.store import TaskStore

    store = TaskStore(persistence=adapter, tasks=adapter.load().tasks)
    task = store.add_task("Buy milk")
    result = store.toggle_task(task.id)
    if result.completion_event:
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

from mindful.tasks import DEFAULT_ESTIMATED_MINUTES, DEFAULT_PRIORITY
from mindful.tasks.models import Priority, Subtask, Task, generate_id, now_ms

logger = logging.getLogger(__name__)


class TaskSink(Protocol):
    def save(self, tasks: List[Task]) -> None: ...


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a toggle.

    completion_event is True only for an incomplete -> complete flip;
    completed_count is the number of completed tasks after the flip.
    """

    task: Task
    completion_event: bool
    completed_count: int


class TaskStore:
    """Authoritative ordered list of tasks."""

    def __init__(self, persistence: Optional[TaskSink] = None, tasks: Optional[Iterable[Task]] = None):
        self._persistence = persistence
        self._tasks: List[Task] = list(tasks or [])

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the list, newest first."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def pending(self) -> List[Task]:
        return [t for t in self._tasks if not t.completed]

    def completed(self) -> List[Task]:
        return [t for t in self._tasks if t.completed]

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    # ─────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────

    def add_task(self, title: str) -> Optional[Task]:
        """Prepend a task with default priority and estimate.

        Blank titles are ignored and None is returned.
        """
        if not title or not title.strip():
            return None

        task = Task(
            title=title,
            priority=Priority(DEFAULT_PRIORITY),
            estimated_minutes=DEFAULT_ESTIMATED_MINUTES,
        )
        self._tasks.insert(0, task)
        self._commit()
        return task

    def add_breakdown(self, subtasks: Iterable[Subtask]) -> List[Task]:
        """Prepend one task per subtask as a contiguous batch, keeping their order."""
        created_at = now_ms()
        new_tasks = [
            Task(
                id=generate_id(),
                title=subtask.title,
                priority=subtask.priority,
                estimated_minutes=subtask.estimated_minutes,
                created_at=created_at,
            )
            for subtask in subtasks
        ]
        if not new_tasks:
            return []

        self._tasks[:0] = new_tasks
        self._commit()
        return new_tasks

    def toggle_task(self, task_id: str) -> Optional[ToggleResult]:
        task = self.get(task_id)
        if task is None:
            return None

        task.completed = not task.completed
        self._commit()
        return ToggleResult(
            task=task,
            completion_event=task.completed,
            completed_count=self.completed_count(),
        )

    def delete_task(self, task_id: str) -> bool:
        task = self.get(task_id)
        if task is None:
            return False

        self._tasks.remove(task)
        self._commit()
        return True

    def set_reminder(self, task_id: str, minutes: int) -> Optional[Task]:
        """Stamp reminder_time = now + minutes on the task, if it exists."""
        task = self.get(task_id)
        if task is None:
            return None

        task.reminder_time = now_ms() + minutes * 60_000
        self._commit()
        return task

    def _commit(self) -> None:
        if self._persistence is None:
            return
        self._persistence.save(self.tasks)


__all__ = ["TaskSink", "TaskStore", "ToggleResult"]
