#!/usr/bin/env python3
"""
MindfulTask Command Line Interface

Main entry point for the `mindful` command. Operates on the same local
state the dashboard uses.

Usage:
    mindful serve                    # Start the dashboard server
    mindful tasks list               # Show tasks
    mindful tasks add "Buy milk"     # Add a task
    mindful tasks breakdown "Plan a birthday party"
    mindful tasks done <task-id>     # Toggle completion
    mindful tasks delete <task-id>
    mindful stats                    # Progress and chart data
    mindful theme [ocean]            # Show or set the theme
    mindful --version
"""

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from mindful import __version__
from mindful.config import load_config
from mindful.logging_config import get_logger, setup_logging
from mindful.state import AppState
from mindful.themes import ThemeId, parse_theme

logger = get_logger(__name__)


def _print(result: dict) -> int:
    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("success", True) else 1


def _state() -> AppState:
    return AppState.create(load_config())


def cmd_serve(args):
    """Handle serve subcommand."""
    import uvicorn

    config = load_config()
    uvicorn.run(
        "mindful.dashboard.backend.main:app",
        host=args.host or config.dashboard.host,
        port=args.port or config.dashboard.api_port,
        reload=args.reload,
        log_level="info",
    )
    return 0


def cmd_tasks(args):
    """Handle tasks subcommand."""
    state = _state()

    if args.tasks_action == "list":
        tasks = state.tasks
        if args.pending:
            tasks = [t for t in tasks if not t.completed]
        return _print({"success": True, "data": [t.to_record() for t in tasks], "total": len(tasks)})

    if args.tasks_action == "add":
        task = state.add_task(args.title)
        if task is None:
            return _print({"success": False, "error": "Title must not be blank"})
        return _print({"success": True, "data": task.to_record()})

    if args.tasks_action == "breakdown":
        outcome = asyncio.run(state.smart_breakdown(args.goal))
        if not outcome.success:
            return _print({"success": False, "error": outcome.message})
        return _print({"success": True, "data": [t.to_record() for t in outcome.tasks]})

    if args.tasks_action == "done":
        result = asyncio.run(state.toggle_and_encourage(args.task_id))
        if result is None:
            return _print({"success": False, "error": f"Task not found: {args.task_id}"})
        return _print({
            "success": True,
            "data": result.task.to_record(),
            "message": state.toast.message,
        })

    if args.tasks_action == "delete":
        if not state.delete_task(args.task_id):
            return _print({"success": False, "error": f"Task not found: {args.task_id}"})
        return _print({"success": True, "message": f"Deleted {args.task_id}"})

    return 1


def cmd_stats(args):
    """Handle stats subcommand."""
    return _print({"success": True, "data": _state().stats().model_dump()})


def cmd_theme(args):
    """Handle theme subcommand."""
    state = _state()
    if args.theme:
        theme = parse_theme(args.theme)
        if theme is None:
            choices = ", ".join(t.value for t in ThemeId)
            return _print({"success": False, "error": f"Unknown theme. Must be one of: {choices}"})
        state.set_theme(theme)
        logger.info("theme_selected", theme=theme.value)

    return _print({
        "success": True,
        "data": {"theme": state.theme.value, "dark_mode": state.dark_mode, **state.theme_config.to_dict()},
    })


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mindful", description="MindfulTask - personal task tracking")
    parser.add_argument("--version", action="version", version=f"mindful {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Start the dashboard server")
    serve.add_argument("--host", help="Bind address (default from config)")
    serve.add_argument("--port", type=int, help="Port (default from config)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    tasks = subparsers.add_parser("tasks", help="Manage tasks")
    task_actions = tasks.add_subparsers(dest="tasks_action", required=True)
    list_parser = task_actions.add_parser("list", help="List tasks")
    list_parser.add_argument("--pending", action="store_true", help="Only pending tasks")
    task_actions.add_parser("add", help="Add a task").add_argument("title")
    task_actions.add_parser("breakdown", help="Break a goal into subtasks").add_argument("goal")
    task_actions.add_parser("done", help="Toggle a task's completion").add_argument("task_id")
    task_actions.add_parser("delete", help="Delete a task").add_argument("task_id")
    tasks.set_defaults(func=cmd_tasks)

    stats = subparsers.add_parser("stats", help="Show progress and chart data")
    stats.set_defaults(func=cmd_stats)

    theme = subparsers.add_parser("theme", help="Show or set the theme")
    theme.add_argument("theme", nargs="?", help="light, dark, nature, ocean or sunset")
    theme.set_defaults(func=cmd_theme)

    return parser


def main(argv=None):
    load_dotenv()
    setup_logging()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
