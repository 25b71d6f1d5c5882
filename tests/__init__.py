"""MindfulTask Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - tasks/: Task store, goal breakdown, encouragement, stats
  - storage/: Key-value store and persistence adapter
  - notify/: Notification adapter, hosts and reminders
  - dashboard/: WebSocket connection manager
- integration/: Dashboard API endpoints and end-to-end task workflows

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/tasks/

    # Excluding slow tests
    pytest -m "not slow"
"""
