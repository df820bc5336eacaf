"""OpenAI adapter for translating tool calls and results."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from openai.types.chat import ChatCompletion

from llm_tool_caller.types import ToolCall, ToolResult

ChatMessage = dict[str, Any]

_logger = logging.getLogger(__name__)


class OpenAIToolAdapter:
    """Adapter for converting between OpenAI chat completions and tool envelopes."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or _logger

    def _parse_arguments(self, name: str, raw_args: Any) -> dict[str, Any]:
        if isinstance(raw_args, dict):
            return raw_args
        if not isinstance(raw_args, str) or not raw_args.strip():
            return {}
        try:
            arguments = json.loads(raw_args)
        except json.JSONDecodeError as exc:
            self.logger.warning(f"Bad JSON in tool call {name!r}: {raw_args}", exc_info=exc)
            return {}
        if not isinstance(arguments, dict):
            self.logger.warning(f"Tool call {name!r} arguments are not an object: {raw_args}")
            return {}
        return arguments

    def tool_calls_from(self, raw: ChatCompletion) -> list[ToolCall]:
        """
        Extract tool calls from the first choice of an OpenAI response.

        Calls whose arguments are not a JSON object are kept with empty
        parameters, so the registry reports them as invalid instead of
        dropping them silently.
        """
        if not raw.choices or not raw.choices[0].message:
            return []

        calls: list[ToolCall] = []
        for tc in raw.choices[0].message.tool_calls or []:
            function = getattr(tc, "function", None)
            if function is None:
                continue  # custom (non-function) tool calls
            arguments = self._parse_arguments(function.name, function.arguments)
            try:
                calls.append(ToolCall(name=function.name, parameters=arguments, id=tc.id))
            except (TypeError, ValueError) as exc:
                self.logger.warning(f"Unusable arguments in tool call {function.name!r}: {exc}")
                calls.append(ToolCall(name=function.name, id=tc.id))
        return calls

    def tool_result_message(self, result: ToolResult) -> ChatMessage:
        """Convert a ToolResult to an OpenAI ``tool`` message."""
        return {
            "role": "tool",
            "tool_call_id": result.id,
            "content": result.content(),
        }

    def tool_result_messages(self, results: Sequence[ToolResult]) -> list[ChatMessage]:
        return [self.tool_result_message(r) for r in results]
