"""
Notifications Route - Permission handling and the encouragement toast

- GET /permission: cached permission state
- PUT /permission: the browser client reports the user's decision
- POST /enable: request permission, then send a welcome notification
- GET /toast: encouragement message while it is visible
"""

import logging

from fastapi import APIRouter, Depends

from mindful.dashboard.backend.deps import get_state
from mindful.dashboard.backend.models import PermissionResponse, PermissionUpdate, ToastResponse
from mindful.notify.base import Permission
from mindful.notify.websocket_host import WebSocketNotificationHost
from mindful.state import AppState

logger = logging.getLogger(__name__)

router = APIRouter()


def _permission_response(state: AppState) -> PermissionResponse:
    permission = state.notifier.permission
    return PermissionResponse(
        permission=permission,
        supported=state.notifier.host.supported,
        granted=permission == Permission.GRANTED,
    )


@router.get("/notifications/permission", response_model=PermissionResponse)
async def get_permission(state: AppState = Depends(get_state)):
    return _permission_response(state)


@router.put("/notifications/permission", response_model=PermissionResponse)
async def report_permission(update: PermissionUpdate, state: AppState = Depends(get_state)):
    host = state.notifier.host
    if isinstance(host, WebSocketNotificationHost):
        host.report_permission(update.permission)
    state.notifier.refresh(update.permission)
    logger.info(f"Notification permission reported: {update.permission.value}")
    return _permission_response(state)


@router.post("/notifications/enable", response_model=PermissionResponse)
async def enable_notifications(state: AppState = Depends(get_state)):
    await state.enable_notifications()
    return _permission_response(state)


@router.get("/toast", response_model=ToastResponse)
async def get_toast(state: AppState = Depends(get_state)):
    message = state.toast.message
    return ToastResponse(message=message, visible=message is not None)
