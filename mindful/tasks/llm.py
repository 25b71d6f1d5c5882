"""
Shared Anthropic Messages API client for the task engine.

Both the goal breakdown and the encouragement clients send one user
message and read back the text of the first content block. The SDK client
is created lazily so that a missing credential never touches the network.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import anthropic

from mindful.config import AIConfig

logger = logging.getLogger(__name__)


class MissingCredentialError(RuntimeError):
    """Raised when no API key is configured."""


class LLMClient:
    """Thin wrapper around anthropic.AsyncAnthropic."""

    def __init__(self, config: Optional[AIConfig] = None, client: Any = None):
        self.config = config or AIConfig()
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.config.api_key())

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = self.config.api_key()
            if not api_key:
                raise MissingCredentialError(f"{self.config.api_key_env} not set")
            self._client = anthropic.AsyncAnthropic(
                api_key=api_key,
                timeout=self.config.timeout_seconds,
                max_retries=self.config.max_retries,
            )
        return self._client

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Send a single-turn prompt and return the response text ("" if none)."""
        client = self._get_client()
        message = await client.messages.create(
            model=self.config.model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        if not message.content:
            return ""
        return (getattr(message.content[0], "text", "") or "").strip()


def extract_json(response_text: str) -> Any:
    """Parse JSON from an LLM response, tolerating markdown code fences."""
    text = response_text.strip()
    if "```json" in text:
        text = text.split("```json")[1].split("```")[0]
    elif "```" in text:
        text = text.split("```")[1].split("```")[0]
    return json.loads(text)


__all__ = ["LLMClient", "MissingCredentialError", "extract_json"]
