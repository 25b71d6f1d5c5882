"""
Integration tests for mindful/dashboard/backend API endpoints.

Tests the FastAPI dashboard routes:
- /api/health
- /api/tasks list, create, breakdown, toggle, delete, reminder
- /api/stats
- /api/settings/theme
- /api/notifications and /api/toast

These tests use an isolated test database and FastAPI TestClient.
"""

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Health Endpoint Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestHealthEndpoint:
    def test_health_check_returns_status(self, test_client):
        """GET /api/health should report overall and per-service status."""
        response = test_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["services"]["storage"] == "healthy"
        assert data["services"]["ai"] == "configured"
        assert data["services"]["notifications"] == "default"


# ─────────────────────────────────────────────────────────────────────────────
# Task List Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestTasksEndpoint:
    """Tests for /api/tasks."""

    def test_list_tasks_empty(self, test_client):
        response = test_client.get("/api/tasks")

        assert response.status_code == 200
        assert response.json() == {"tasks": [], "pending": [], "completed": [], "total": 0}

    def test_create_task(self, test_client):
        """POST /api/tasks should add a Medium task with a 15 minute estimate."""
        response = test_client.post("/api/tasks", json={"title": "Buy milk"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        task = data["task"]
        assert task["title"] == "Buy milk"
        assert task["priority"] == "Medium"
        assert task["estimatedMinutes"] == 15
        assert task["completed"] is False
        assert "createdAt" in task
        assert data["task_id"] == task["id"]

    def test_create_blank_title(self, test_client):
        """A blank title should be ignored."""
        response = test_client.post("/api/tasks", json={"title": "   "})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert test_client.get("/api/tasks").json()["total"] == 0

    def test_create_long_title(self, test_client):
        """Any non-blank title should be accepted, whatever its length."""
        title = "x" * 2000

        data = test_client.post("/api/tasks", json={"title": title}).json()

        assert data["success"] is True
        assert data["task"]["title"] == title

    def test_create_missing_title(self, test_client):
        response = test_client.post("/api/tasks", json={})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_list_newest_first_with_buckets(self, test_client):
        first = test_client.post("/api/tasks", json={"title": "first"}).json()["task_id"]
        test_client.post("/api/tasks", json={"title": "second"})
        test_client.patch(f"/api/tasks/{first}/toggle")

        data = test_client.get("/api/tasks").json()

        assert [t["title"] for t in data["tasks"]] == ["second", "first"]
        assert [t["title"] for t in data["pending"]] == ["second"]
        assert [t["title"] for t in data["completed"]] == ["first"]


# ─────────────────────────────────────────────────────────────────────────────
# Breakdown Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestBreakdownEndpoint:
    def test_breakdown_adds_subtasks(self, test_client, fake_llm, breakdown_json):
        fake_llm.responses.append(breakdown_json)

        response = test_client.post("/api/tasks/breakdown", json={"goal": "plan a birthday party"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["clear_input"] is True
        assert [t["title"] for t in data["tasks"]] == ["Pick a date", "Write guest list", "Order cake"]
        assert test_client.get("/api/tasks").json()["total"] == 3

    def test_breakdown_failure_message(self, test_client, fake_llm):
        fake_llm.responses.append("no idea")

        data = test_client.post("/api/tasks/breakdown", json={"goal": "plan a birthday party"}).json()

        assert data["success"] is False
        assert data["message"] == "Could not break down this task. Try being more specific."
        assert data["clear_input"] is False

    def test_breakdown_while_pending(self, test_client, mindful_state):
        """A second breakdown while one is in flight should get 409."""
        mindful_state._breakdown_in_flight = True

        response = test_client.post("/api/tasks/breakdown", json={"goal": "anything"})

        assert response.status_code == 409
        assert response.json()["code"] == "HTTP_409"

    def test_breakdown_empty_goal(self, test_client):
        response = test_client.post("/api/tasks/breakdown", json={"goal": ""})
        assert response.status_code == 422


# ─────────────────────────────────────────────────────────────────────────────
# Task Action Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestTaskActions:
    def test_toggle_encourages_on_first_completion(self, test_client, fake_llm):
        """Completing the first task should show an encouragement toast."""
        fake_llm.responses.append("One down!")
        task_id = test_client.post("/api/tasks", json={"title": "Buy milk"}).json()["task_id"]

        data = test_client.patch(f"/api/tasks/{task_id}/toggle").json()

        assert data["task"]["completed"] is True
        assert data["completed_count"] == 1
        assert data["encouragement_pending"] is True
        assert test_client.get("/api/toast").json() == {"message": "One down!", "visible": True}

    def test_toggle_second_completion_no_encouragement(self, test_client, fake_llm):
        ids = [test_client.post("/api/tasks", json={"title": t}).json()["task_id"] for t in ("a", "b")]
        test_client.patch(f"/api/tasks/{ids[0]}/toggle")

        data = test_client.patch(f"/api/tasks/{ids[1]}/toggle").json()

        assert data["completed_count"] == 2
        assert data["encouragement_pending"] is False
        assert len(fake_llm.prompts) == 1

    def test_toggle_unknown(self, test_client):
        response = test_client.patch("/api/tasks/missing/toggle")

        assert response.status_code == 404
        assert response.json() == {"error": "Task not found", "code": "HTTP_404", "details": None}

    def test_delete(self, test_client):
        task_id = test_client.post("/api/tasks", json={"title": "Buy milk"}).json()["task_id"]

        response = test_client.delete(f"/api/tasks/{task_id}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert test_client.get("/api/tasks").json()["total"] == 0

    def test_delete_unknown(self, test_client):
        assert test_client.delete("/api/tasks/missing").status_code == 404

    def test_set_reminder(self, test_client):
        task_id = test_client.post("/api/tasks", json={"title": "Stretch"}).json()["task_id"]

        response = test_client.post(f"/api/tasks/{task_id}/reminder", json={"minutes": 15})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "We'll remind you in 15 minutes."
        assert data["task"]["reminderTime"] > data["task"]["createdAt"]

    def test_set_reminder_unknown_task(self, test_client):
        """The reminder is armed even for an unknown id."""
        data = test_client.post("/api/tasks/missing/reminder", json={"minutes": 30}).json()

        assert data["success"] is True
        assert data["task"] is None

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_set_reminder_invalid_minutes(self, test_client, minutes):
        response = test_client.post("/api/tasks/any/reminder", json={"minutes": minutes})
        assert response.status_code == 422


# ─────────────────────────────────────────────────────────────────────────────
# Stats Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestStatsEndpoint:
    def test_empty(self, test_client):
        data = test_client.get("/api/stats").json()

        assert data["has_tasks"] is False
        assert data["progress"]["percentage"] == 0

    def test_with_tasks(self, test_client, fake_llm, breakdown_json):
        fake_llm.responses.append(breakdown_json)
        tasks = test_client.post("/api/tasks/breakdown", json={"goal": "party"}).json()["tasks"]
        test_client.patch(f"/api/tasks/{tasks[0]['id']}/toggle")

        data = test_client.get("/api/stats").json()

        assert data["progress"]["label"] == "1 of 3 tasks completed"
        assert data["progress"]["percentage"] == 33
        assert data["progress"]["color"] == "yellow"
        assert [(s["name"], s["value"]) for s in data["priority_breakdown"]] == [("Medium", 1), ("Low", 1)]
        assert [(s["name"], s["value"]) for s in data["time_breakdown"]] == [("Done", 5), ("To Do", 30)]


# ─────────────────────────────────────────────────────────────────────────────
# Settings Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestThemeEndpoint:
    def test_default_theme(self, test_client):
        data = test_client.get("/api/settings/theme").json()

        assert data["theme"] == "light"
        assert data["dark_mode"] is False
        assert data["config"]["name"] == "Classic"
        assert set(data["presets"]) == {"light", "dark", "nature", "ocean", "sunset"}

    def test_update_theme(self, test_client):
        response = test_client.put("/api/settings/theme", json={"theme": "dark"})

        assert response.status_code == 200
        assert response.json()["dark_mode"] is True
        assert test_client.get("/api/settings/theme").json()["theme"] == "dark"

    def test_unknown_theme(self, test_client):
        response = test_client.put("/api/settings/theme", json={"theme": "neon"})
        assert response.status_code == 422


# ─────────────────────────────────────────────────────────────────────────────
# Notification Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestNotificationEndpoints:
    def test_initial_permission(self, test_client):
        data = test_client.get("/api/notifications/permission").json()
        assert data == {"permission": "default", "supported": True, "granted": False}

    def test_report_permission(self, grant_notifications, test_client):
        assert grant_notifications["granted"] is True
        assert test_client.get("/api/notifications/permission").json()["permission"] == "granted"

    def test_report_permission_case_insensitive(self, test_client):
        response = test_client.put("/api/notifications/permission", json={"permission": "DENIED"})
        assert response.json()["permission"] == "denied"

    def test_enable_without_clients(self, test_client):
        """Enabling with no dashboard connected leaves permission undecided."""
        data = test_client.post("/api/notifications/enable").json()
        assert data["granted"] is False

    def test_toast_hidden_initially(self, test_client):
        assert test_client.get("/api/toast").json() == {"message": None, "visible": False}


# ─────────────────────────────────────────────────────────────────────────────
# Error Handling Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestErrorHandling:
    def test_invalid_endpoint_returns_404(self, test_client):
        response = test_client.get("/api/nonexistent")
        assert response.status_code == 404

    def test_invalid_json_body(self, test_client):
        response = test_client.post(
            "/api/tasks", content="not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 422
