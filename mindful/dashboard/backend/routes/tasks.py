"""
Tasks Route - Task list and task actions

Provides endpoints for the task list view:
- List tasks (all, pending, completed)
- Add a task
- Break a goal down into subtasks with the LLM
- Toggle, delete, set a reminder
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from mindful.dashboard.backend.deps import get_state
from mindful.dashboard.backend.models import (
    BreakdownRequest,
    BreakdownResponse,
    CreateTaskRequest,
    ReminderRequest,
    TaskActionResponse,
    TaskListResponse,
    ToggleResponse,
)
from mindful.state import AppState, BreakdownInProgress

logger = logging.getLogger(__name__)


router = APIRouter()


# =============================================================================
# Task List
# =============================================================================


@router.get("", response_model=TaskListResponse)
async def list_tasks(state: AppState = Depends(get_state)):
    """List all tasks, newest first, with pending/completed buckets."""
    tasks = state.tasks
    return TaskListResponse(
        tasks=[t.to_record() for t in tasks],
        pending=[t.to_record() for t in tasks if not t.completed],
        completed=[t.to_record() for t in tasks if t.completed],
        total=len(tasks),
    )


@router.post("", response_model=TaskActionResponse)
async def create_task(request: CreateTaskRequest, state: AppState = Depends(get_state)):
    """
    Add a task with default priority (Medium) and estimate (15 minutes).

    A blank title is ignored and reported as success=false.
    """
    task = state.add_task(request.title)
    if task is None:
        return TaskActionResponse(success=False, action="create")

    return TaskActionResponse(success=True, action="create", task_id=task.id, task=task.to_record())


# =============================================================================
# Goal Breakdown (must be before /{task_id} routes)
# =============================================================================


@router.post("/breakdown", response_model=BreakdownResponse)
async def breakdown_goal(request: BreakdownRequest, state: AppState = Depends(get_state)):
    """
    Break a goal into subtasks using the LLM and add them to the list.

    Only one breakdown runs at a time; a second request while one is
    pending gets 409. A failed or empty breakdown returns success=false
    with a message and leaves the input for the user to edit.
    """
    try:
        outcome = await state.smart_breakdown(request.goal)
    except BreakdownInProgress as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return BreakdownResponse(
        success=outcome.success,
        tasks=[t.to_record() for t in outcome.tasks],
        message=outcome.message,
        clear_input=outcome.clear_input,
    )


# =============================================================================
# Task Actions
# =============================================================================


@router.patch("/{task_id}/toggle", response_model=ToggleResponse)
async def toggle_task(task_id: str, background_tasks: BackgroundTasks, state: AppState = Depends(get_state)):
    """
    Flip a task between pending and completed.

    Completing the first task, or bringing the completed count to a
    multiple of three, fetches an encouragement message in the background
    (see GET /api/toast).
    """
    result = state.toggle_task(task_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Task not found")

    encourage = state.needs_encouragement(result)
    if encourage:
        background_tasks.add_task(state.encourage, result.completed_count)

    return ToggleResponse(
        success=True,
        action="toggle",
        task_id=task_id,
        task=result.task.to_record(),
        completed_count=result.completed_count,
        encouragement_pending=encourage,
    )


@router.delete("/{task_id}", response_model=TaskActionResponse)
async def delete_task(task_id: str, state: AppState = Depends(get_state)):
    if not state.delete_task(task_id):
        raise HTTPException(status_code=404, detail="Task not found")

    return TaskActionResponse(success=True, action="delete", task_id=task_id)


@router.post("/{task_id}/reminder", response_model=TaskActionResponse)
async def set_reminder(task_id: str, request: ReminderRequest, state: AppState = Depends(get_state)):
    """
    Remind the user about a task after the given number of minutes.

    The reminder is armed even if the task id is unknown.
    """
    task = await state.set_reminder(task_id, request.minutes)
    return TaskActionResponse(
        success=True,
        action="reminder",
        task_id=task_id,
        task=task.to_record() if task else None,
        message=f"We'll remind you in {request.minutes} minutes.",
    )
