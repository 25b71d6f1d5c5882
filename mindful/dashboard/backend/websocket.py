"""
WebSocket Server for Real-time Dashboard Updates

Pushes events to connected dashboard clients:
- notification - Show a browser notification (title, body, icon)
- notification:permission_request - Ask the client to prompt for permission
- toast:show - Encouragement message and how long to show it
- theme:update - Theme selection and dark-mode flag

Usage:
    Connect to ws://localhost:8080/ws
    Events are broadcast to all connected clients as JSON messages.
"""

import asyncio
import json
import logging
from datetime import datetime
from typing import Any, Dict, Set

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter()


class ConnectionManager:
    """Tracks WebSocket connections and broadcasts messages to them."""

    def __init__(self):
        self.active_connections: Set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        return len(self.active_connections)

    async def connect(self, websocket: WebSocket, initial: Dict[str, Any] | None = None):
        """Accept a new WebSocket connection and send it the current state."""
        await websocket.accept()
        self.active_connections.add(websocket)
        logger.info(f"WebSocket connected. Total: {len(self.active_connections)}")

        if initial:
            try:
                await websocket.send_json({**initial, "timestamp": datetime.now().isoformat()})
            except Exception as e:
                logger.error(f"Error sending initial state: {e}")

    def disconnect(self, websocket: WebSocket):
        self.active_connections.discard(websocket)
        logger.info(f"WebSocket disconnected. Total: {len(self.active_connections)}")

    async def broadcast(self, message: Dict[str, Any]):
        """Broadcast a message to all connected clients."""
        if not self.active_connections:
            return

        if "timestamp" not in message:
            message["timestamp"] = datetime.now().isoformat()

        message_json = json.dumps(message, default=str)

        # Send to all connections, removing dead ones
        dead_connections = set()
        for connection in list(self.active_connections):
            try:
                await connection.send_text(message_json)
            except Exception as e:
                logger.debug(f"Failed to send to client: {e}")
                dead_connections.add(connection)

        for conn in dead_connections:
            self.active_connections.discard(conn)


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for real-time updates.

    The server sends a theme:update event on connect, then pushes events as
    they occur. Clients may send {"event": "ping"} and get a pong back.
    """
    manager: ConnectionManager = websocket.app.state.ws_manager
    state = websocket.app.state.mindful

    await manager.connect(
        websocket,
        initial={
            "event": "theme:update",
            "data": {"theme": state.theme.value, "dark_mode": state.dark_mode},
        },
    )

    try:
        while True:
            try:
                data = await asyncio.wait_for(websocket.receive_text(), timeout=30.0)

                try:
                    message = json.loads(data)
                    if isinstance(message, dict) and message.get("event") == "ping":
                        await websocket.send_json({"event": "pong", "timestamp": datetime.now().isoformat()})
                except json.JSONDecodeError:
                    pass

            except asyncio.TimeoutError:
                # Keep the connection alive
                try:
                    await websocket.send_json({"event": "ping", "timestamp": datetime.now().isoformat()})
                except Exception:
                    break

    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        manager.disconnect(websocket)


ws_router = router
__all__ = ["ConnectionManager", "ws_router"]
