"""
Integration test fixtures for MindfulTask.

Provides fixtures specific to integration testing:
- A dashboard app bound to a temporary database
- A FastAPI test client with the lifespan running
- Fake AI clients swapped into the running application state
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from mindful.state import AppState
from mindful.tasks.decompose import GoalBreakdownClient
from mindful.tasks.encouragement import EncouragementClient


# ─────────────────────────────────────────────────────────────────────────────
# Dashboard API Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def dashboard_app(test_config):
    """Create a test FastAPI app with an isolated database."""
    from mindful.dashboard.backend.main import create_app

    test_config.notifications.permission_timeout_seconds = 0.5
    return create_app(test_config)


@pytest.fixture
def test_client(dashboard_app, fake_llm) -> Generator[TestClient, None, None]:
    """Create a test client for the dashboard API.

    The AI clients are replaced with fakes once the lifespan has built the
    application state, and reminders fire after milliseconds instead of
    minutes.
    """
    with TestClient(dashboard_app) as client:
        state: AppState = dashboard_app.state.mindful
        state.breakdown_client = GoalBreakdownClient(state.config.ai, llm=fake_llm)
        state.encouragement_client = EncouragementClient(state.config.ai, llm=fake_llm)
        state.reminders.seconds_per_minute = 0.001

        yield client


@pytest.fixture
def mindful_state(dashboard_app, test_client) -> AppState:
    """The running application's state."""
    return dashboard_app.state.mindful


@pytest.fixture
def grant_notifications(test_client):
    """Report a granted notification permission, as a browser client would."""
    response = test_client.put("/api/notifications/permission", json={"permission": "granted"})
    assert response.status_code == 200
    return response.json()
