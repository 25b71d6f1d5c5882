"""Dashboard Backend Package

FastAPI-based REST API and WebSocket server for the MindfulTask dashboard.
"""
