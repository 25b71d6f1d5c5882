"""Route dependencies."""

from fastapi import Request

from mindful.state import AppState


def get_state(request: Request) -> AppState:
    """The AppState owned by the running application."""
    return request.app.state.mindful
