"""Notifications - permission handling, delivery and task reminders

Components:
    base.py: NotificationHost interface, permission states, null host
    websocket_host.py: Host that forwards notifications to dashboard clients
    adapter.py: Permission cache and fire-and-forget delivery
    reminders.py: One-shot deferred reminder notifications
"""
