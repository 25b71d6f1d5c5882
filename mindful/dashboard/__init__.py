"""Web Dashboard - task list, charts and settings for the browser client

Components:
    backend/main.py: FastAPI application
    backend/routes/: API route handlers
    backend/websocket.py: Real-time event streaming
"""
