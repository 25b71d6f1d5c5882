"""
Tool: Encouragement
Purpose: Short motivating message when the user hits a completion milestone

Milestones are the first completed task and every third one after that
(1, 3, 6, 9, ...). The client always resolves to a string: the model's
text when available, otherwise a fixed fallback.
"""

from __future__ import annotations

import logging
from typing import Optional

from mindful.config import AIConfig
from mindful.tasks.llm import LLMClient

logger = logging.getLogger(__name__)


FALLBACK_MESSAGE = "Great job! Keep going!"
EMPTY_RESPONSE_MESSAGE = "You're on fire!"

ENCOURAGEMENT_PROMPT = (
    "Give me a short, witty, and motivating one-sentence compliment for someone "
    "who just completed their {count}th task of the day."
)


def should_encourage(completed_count: int) -> bool:
    """True on the first completion and on every multiple of three."""
    return completed_count == 1 or (completed_count > 0 and completed_count % 3 == 0)


class EncouragementClient:
    def __init__(self, config: Optional[AIConfig] = None, llm: Optional[LLMClient] = None):
        self.config = config or AIConfig()
        self.llm = llm or LLMClient(self.config)

    async def suggest(self, completed_count: int) -> str:
        if not self.llm.configured:
            return FALLBACK_MESSAGE

        try:
            text = await self.llm.complete(
                ENCOURAGEMENT_PROMPT.format(count=completed_count),
                self.config.encouragement_max_tokens,
            )
        except Exception as e:
            logger.warning(f"Encouragement request failed: {e}")
            return FALLBACK_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE


__all__ = [
    "EMPTY_RESPONSE_MESSAGE",
    "ENCOURAGEMENT_PROMPT",
    "FALLBACK_MESSAGE",
    "EncouragementClient",
    "should_encourage",
]
