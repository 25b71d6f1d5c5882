"""
Pydantic models for Dashboard API request/response types.

Task records are returned with the same camelCase field names they are
persisted with, so the browser client uses one shape everywhere.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from mindful.notify.base import Permission
from mindful.tasks.stats import StatsSummary
from mindful.themes import ThemeId


# =============================================================================
# Health
# =============================================================================


class HealthCheck(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Overall system status")
    version: str = Field(default="0.1.0", description="API version")
    timestamp: datetime = Field(default_factory=datetime.now, description="Check timestamp")
    services: dict[str, str] = Field(default_factory=dict, description="Individual service statuses")


# =============================================================================
# Task Models
# =============================================================================


class TaskListResponse(BaseModel):
    """All tasks plus the pending/completed buckets the list view renders."""

    tasks: list[dict[str, Any]] = Field(default_factory=list, description="All tasks, newest first")
    pending: list[dict[str, Any]] = Field(default_factory=list)
    completed: list[dict[str, Any]] = Field(default_factory=list)
    total: int = Field(default=0)


class CreateTaskRequest(BaseModel):
    title: str


class BreakdownRequest(BaseModel):
    goal: str = Field(..., min_length=1, max_length=2000)


class ReminderRequest(BaseModel):
    minutes: int = Field(..., gt=0, le=24 * 60, description="Minutes until the reminder fires")


class TaskActionResponse(BaseModel):
    """Response for task actions."""

    success: bool
    action: str
    task_id: Optional[str] = None
    task: Optional[dict[str, Any]] = None
    message: Optional[str] = None


class BreakdownResponse(BaseModel):
    success: bool
    tasks: list[dict[str, Any]] = Field(default_factory=list)
    message: Optional[str] = None
    clear_input: bool = False


class ToggleResponse(TaskActionResponse):
    completed_count: int = 0
    encouragement_pending: bool = False


# =============================================================================
# Stats
# =============================================================================


class StatsResponse(StatsSummary):
    pass


# =============================================================================
# Settings
# =============================================================================


class ThemeUpdate(BaseModel):
    theme: ThemeId


class ThemeResponse(BaseModel):
    theme: ThemeId
    dark_mode: bool
    config: dict[str, Any]
    presets: dict[str, dict[str, Any]]


# =============================================================================
# Notifications
# =============================================================================


class PermissionUpdate(BaseModel):
    permission: Permission

    @field_validator("permission", mode="before")
    @classmethod
    def lower(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class PermissionResponse(BaseModel):
    permission: Permission
    supported: bool
    granted: bool


class ToastResponse(BaseModel):
    message: Optional[str] = None
    visible: bool = False


# =============================================================================
# Error Models
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    code: str = Field(default="INTERNAL_ERROR", description="Error code")
    details: dict[str, Any] | None = Field(None, description="Additional details")
