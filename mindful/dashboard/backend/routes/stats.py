"""
Stats Route - Progress bar and chart data

- Progress: completed / total with a color band
- Pending by priority: pending task counts per priority
- Time investment: estimated minutes done vs. to do
"""

from fastapi import APIRouter, Depends

from mindful.dashboard.backend.deps import get_state
from mindful.dashboard.backend.models import StatsResponse
from mindful.state import AppState

router = APIRouter()


@router.get("", response_model=StatsResponse)
async def get_stats(state: AppState = Depends(get_state)):
    return StatsResponse.model_validate(state.stats().model_dump())
