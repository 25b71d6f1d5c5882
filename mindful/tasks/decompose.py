"""
Tool: Goal Breakdown
Purpose: Break a free-text goal into subtasks using the LLM

Takes a goal like "plan a birthday party" and asks the model for 3-6
concrete subtasks, each with a time estimate in minutes and a priority.
The response must match the schema

    {"subtasks": [{"title": str, "estimatedMinutes": int,
                   "priority": "High" | "Medium" | "Low"}, ...]}

Anything else is a failure. The client never raises: every fault is
returned as a BreakdownFailure so the caller must handle both branches.

Usage:
    python -m mindful.tasks.decompose --goal "plan birthday party"

Dependencies:
    - anthropic
    - pydantic
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional

from pydantic import ValidationError

from mindful.config import AIConfig, load_config
from mindful.tasks.llm import LLMClient, MissingCredentialError, extract_json
from mindful.tasks.models import (
    BreakdownFailure,
    BreakdownResult,
    BreakdownSuccess,
    TaskBreakdown,
)

logger = logging.getLogger(__name__)


BREAKDOWN_PROMPT = """Break down the following goal into 3-6 actionable subtasks with time estimates (in minutes) and priority levels: "{goal}". Keep tasks concise.

Output JSON format:
{{
  "subtasks": [
    {{"title": "...", "estimatedMinutes": N, "priority": "High" | "Medium" | "Low"}}
  ]
}}

Respond with valid JSON only."""


def build_prompt(goal: str) -> str:
    return BREAKDOWN_PROMPT.format(goal=goal)


def parse_breakdown(response_text: str) -> BreakdownResult:
    """Validate a raw LLM response against the breakdown schema."""
    try:
        data = extract_json(response_text)
    except (json.JSONDecodeError, IndexError) as e:
        return BreakdownFailure(reason=f"Failed to parse LLM response as JSON: {e}")

    try:
        breakdown = TaskBreakdown.model_validate(data)
    except ValidationError as e:
        return BreakdownFailure(reason=f"LLM response does not match schema: {e.error_count()} error(s)")

    return BreakdownSuccess(subtasks=breakdown.subtasks)


class GoalBreakdownClient:
    """Ask the LLM for a structured subtask list."""

    def __init__(self, config: Optional[AIConfig] = None, llm: Optional[LLMClient] = None):
        self.config = config or AIConfig()
        self.llm = llm or LLMClient(self.config)

    async def breakdown(self, goal: str) -> BreakdownResult:
        if not self.llm.configured:
            logger.error("API key is missing, goal breakdown unavailable")
            return BreakdownFailure(reason="missing_credential")

        try:
            text = await self.llm.complete(build_prompt(goal), self.config.breakdown_max_tokens)
        except MissingCredentialError as e:
            logger.error(f"Goal breakdown unavailable: {e}")
            return BreakdownFailure(reason="missing_credential")
        except Exception as e:
            logger.error(f"Error breaking down goal: {e}")
            return BreakdownFailure(reason=f"LLM request failed: {e}")

        if not text:
            return BreakdownFailure(reason="empty response")

        result = parse_breakdown(text)
        if isinstance(result, BreakdownFailure):
            logger.warning(f"Rejected breakdown response: {result.reason}")
        else:
            logger.info(f"Goal broken into {len(result.subtasks)} subtasks")
        return result


def result_to_dict(result: BreakdownResult) -> dict[str, Any]:
    if isinstance(result, BreakdownSuccess):
        return {
            "success": True,
            "data": {"subtasks": [s.model_dump(mode="json", by_alias=True) for s in result.subtasks]},
        }
    return {"success": False, "error": result.reason}


def main():
    parser = argparse.ArgumentParser(description="Goal Breakdown - split a goal into subtasks")
    parser.add_argument("--goal", required=True, help="Goal to break down")
    args = parser.parse_args()

    client = GoalBreakdownClient(load_config().ai)
    result = asyncio.run(client.breakdown(args.goal))

    output = result_to_dict(result)
    print(json.dumps(output, indent=2))
    if not output["success"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
