"""
Tool: Key-Value Store
Purpose: Durable string key-value storage for local application state

A single table of (key, value, updated_at) rows in SQLite. Values are
opaque strings; callers decide on the encoding.

Usage:
    python -m mindful.storage.kv --action get --key mindful-theme
    python -m mindful.storage.kv --action set --key mindful-theme --value ocean
    python -m mindful.storage.kv --action keys

Dependencies:
    - sqlite3 (stdlib)
"""

import argparse
import json
import sqlite3
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional


class KeyValueStore:
    """SQLite-backed key-value store."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def get_connection(self) -> sqlite3.Connection:
        """Get database connection, creating the table if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
        return conn

    def get(self, key: str) -> Optional[str]:
        conn = self.get_connection()
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        conn = self.get_connection()
        try:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> bool:
        conn = self.get_connection()
        try:
            cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def keys(self) -> List[str]:
        conn = self.get_connection()
        try:
            rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        finally:
            conn.close()
        return [row["key"] for row in rows]


def main():
    from mindful.config import load_config

    parser = argparse.ArgumentParser(description="Key-Value Store - inspect local state")
    parser.add_argument("--action", required=True, choices=["get", "set", "delete", "keys"])
    parser.add_argument("--key", help="Key to read or write")
    parser.add_argument("--value", help="Value to write (for set)")
    args = parser.parse_args()

    store = KeyValueStore(load_config().storage.resolved_db_path())

    if args.action == "keys":
        result = {"success": True, "data": store.keys()}
    elif not args.key:
        result = {"success": False, "error": "--key required"}
    elif args.action == "get":
        value = store.get(args.key)
        result = {"success": value is not None, "data": value}
    elif args.action == "set":
        if args.value is None:
            result = {"success": False, "error": "--value required for set"}
        else:
            store.set(args.key, args.value)
            result = {"success": True, "message": f"Stored {args.key}"}
    else:
        result = {"success": store.delete(args.key)}

    print(json.dumps(result, indent=2))
    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
