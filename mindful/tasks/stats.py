"""
Progress and chart aggregates for the dashboard.

- progress: completed / total as a percentage with a color band
- priority_breakdown: pending tasks per priority (empty slices dropped)
- time_breakdown: estimated minutes done vs. to do
"""

from __future__ import annotations

import math
from typing import Iterable, List

from pydantic import BaseModel

from mindful.tasks.models import Priority, Task


CHART_COLORS = {
    Priority.HIGH.value: "#ef4444",
    Priority.MEDIUM.value: "#f59e0b",
    Priority.LOW.value: "#3b82f6",
    "Completed": "#10b981",
    "Remaining": "#94a3b8",
}


class Progress(BaseModel):
    current: int
    total: int
    percentage: int
    color: str
    label: str


class ChartSlice(BaseModel):
    name: str
    value: int
    color: str


class StatsSummary(BaseModel):
    progress: Progress
    priority_breakdown: List[ChartSlice]
    time_breakdown: List[ChartSlice]
    has_tasks: bool


def progress_color(percentage: int) -> str:
    if percentage < 30:
        return "red"
    if percentage < 70:
        return "yellow"
    return "emerald"


def progress(tasks: Iterable[Task]) -> Progress:
    tasks = list(tasks)
    total = len(tasks)
    current = sum(1 for t in tasks if t.completed)
    # Half-up rounding
    percentage = 0 if total == 0 else math.floor(current * 100 / total + 0.5)
    return Progress(
        current=current,
        total=total,
        percentage=percentage,
        color=progress_color(percentage),
        label=f"{current} of {total} tasks completed",
    )


def priority_breakdown(tasks: Iterable[Task]) -> List[ChartSlice]:
    pending = [t for t in tasks if not t.completed]
    slices = []
    for priority in Priority:
        count = sum(1 for t in pending if t.priority == priority)
        if count > 0:
            slices.append(ChartSlice(name=priority.value, value=count, color=CHART_COLORS[priority.value]))
    return slices


def time_breakdown(tasks: Iterable[Task]) -> List[ChartSlice]:
    tasks = list(tasks)
    done = sum(t.estimated_minutes for t in tasks if t.completed)
    todo = sum(t.estimated_minutes for t in tasks if not t.completed)
    return [
        ChartSlice(name="Done", value=done, color=CHART_COLORS["Completed"]),
        ChartSlice(name="To Do", value=todo, color=CHART_COLORS["Remaining"]),
    ]


def summarize(tasks: Iterable[Task]) -> StatsSummary:
    tasks = list(tasks)
    return StatsSummary(
        progress=progress(tasks),
        priority_breakdown=priority_breakdown(tasks),
        time_breakdown=time_breakdown(tasks),
        has_tasks=bool(tasks),
    )


__all__ = [
    "CHART_COLORS",
    "ChartSlice",
    "Progress",
    "StatsSummary",
    "priority_breakdown",
    "progress",
    "progress_color",
    "summarize",
    "time_breakdown",
]
