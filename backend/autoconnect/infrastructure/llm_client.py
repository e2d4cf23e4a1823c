"""JSON Completion Client - wraps AsyncAnthropic for single-shot JSON extraction.

Invariants:
    - Exactly one Messages API call per complete_json() (no retry, no streaming)
    - Request shape is fixed: system prompt + one user message, fixed temperature and max_tokens
    - JSON output is forced by prefilling the assistant turn with "{"
    - Transport/API failures raise RequestFailedError; unparseable output raises
      InvalidResponseFormatError (core/errors.py)

Design Decisions:
    - Client handle injected at construction: tests pass a fake with the same
      `messages.create` surface instead of patching the SDK
"""

import json
import logging
from typing import Any

import anthropic
from anthropic import APIError

from autoconnect.core.errors import InvalidResponseFormatError, RequestFailedError

logger = logging.getLogger(__name__)

_JSON_PREFILL = "{"


class JSONCompletionClient:
    """Sends a fixed-shape completion request and parses the reply as a JSON object."""

    def __init__(
        self,
        client: anthropic.AsyncAnthropic,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_api_key(
        cls, api_key: str, model: str, timeout_seconds: float = 30.0, **kwargs,
    ) -> "JSONCompletionClient":
        return cls(
            anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout_seconds),
            model, **kwargs,
        )

    def build_request(self, user_content: str, system_prompt: str) -> dict:
        return {
            "model": self.model,
            "system": system_prompt,
            "messages": [
                {"role": "user", "content": user_content},
                {"role": "assistant", "content": _JSON_PREFILL},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete_json(self, user_content: str, system_prompt: str) -> Any:
        """Return the parsed JSON object the model produced for user_content."""
        try:
            response = await self.client.messages.create(
                **self.build_request(user_content, system_prompt),
            )
        except APIError as e:
            logger.error(f"LLM API error: {e}", extra={"model": self.model})
            raise RequestFailedError(str(e))
        except Exception as e:
            logger.error(
                f"Unexpected LLM client error: {e}",
                exc_info=True, extra={"model": self.model},
            )
            raise RequestFailedError(str(e))

        completion = _JSON_PREFILL + "".join(
            block.text for block in response.content
            if getattr(block, "type", None) == "text"
        )
        try:
            return json.loads(completion)
        except json.JSONDecodeError as e:
            logger.warning(
                f"LLM returned non-JSON content: {completion[:200]!r}",
                extra={"model": self.model},
            )
            raise InvalidResponseFormatError(str(e))
