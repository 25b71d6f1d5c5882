"""
Settings Route - Theme selection

The theme is one of five presets. Selecting one persists it and flips
the dashboard's dark-mode flag; connected clients get a theme:update event.
"""

from fastapi import APIRouter, Depends

from mindful.dashboard.backend.deps import get_state
from mindful.dashboard.backend.models import ThemeResponse, ThemeUpdate
from mindful.state import AppState
from mindful.themes import THEMES

router = APIRouter()


def _theme_response(state: AppState) -> ThemeResponse:
    return ThemeResponse(
        theme=state.theme,
        dark_mode=state.dark_mode,
        config=state.theme_config.to_dict(),
        presets={theme_id.value: config.to_dict() for theme_id, config in THEMES.items()},
    )


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(state: AppState = Depends(get_state)):
    return _theme_response(state)


@router.put("/theme", response_model=ThemeResponse)
async def update_theme(update: ThemeUpdate, state: AppState = Depends(get_state)):
    state.set_theme(update.theme)
    await state.publish("theme:update", {"theme": state.theme.value, "dark_mode": state.dark_mode})
    return _theme_response(state)
