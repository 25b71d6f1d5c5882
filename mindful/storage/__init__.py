"""Storage - local key-value store and the task/theme persistence adapter

Components:
    kv.py: SQLite-backed string key-value store
    persistence.py: Load/save of the task list and theme selection
"""
