"""Task Engine - task list state, AI goal breakdown and encouragement

Components:
    models.py: Task record, priorities and breakdown result types
    store.py: In-memory task list with write-through persistence
    llm.py: Shared Anthropic Messages API client
    decompose.py: Break a goal into subtasks using the LLM
    encouragement.py: Short motivating messages on completion milestones
    stats.py: Progress and chart aggregates

Usage:
    from mindful.tasks.store import TaskStore

    store = TaskStore()
    task = store.add_task("Buy milk")
    store.toggle_task(task.id)
"""

# Defaults for directly entered tasks
DEFAULT_PRIORITY = "Medium"
DEFAULT_ESTIMATED_MINUTES = 15

__all__ = [
    "DEFAULT_PRIORITY",
    "DEFAULT_ESTIMATED_MINUTES",
]
