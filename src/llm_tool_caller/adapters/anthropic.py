"""Anthropic adapter for translating tool calls and results."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from anthropic.types import Message

from llm_tool_caller.types import ToolCall, ToolResult

ChatMessage = dict[str, Any]

_logger = logging.getLogger(__name__)


class AnthropicToolAdapter:
    """Adapter for converting between Anthropic messages and tool envelopes."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or _logger

    def tool_calls_from(self, raw: Message) -> list[ToolCall]:
        """Extract ``tool_use`` blocks from an Anthropic response."""
        calls: list[ToolCall] = []
        for block in raw.content or []:
            if block.type != "tool_use":
                continue
            arguments = dict(block.input) if hasattr(block.input, "items") else {}
            try:
                calls.append(ToolCall(name=block.name, parameters=arguments, id=block.id))
            except (TypeError, ValueError) as exc:
                self.logger.warning(f"Unusable input in tool call {block.name!r}: {exc}")
                calls.append(ToolCall(name=block.name, id=block.id))
        return calls

    def _tool_result_block(self, result: ToolResult) -> dict[str, Any]:
        block: dict[str, Any] = {
            "type": "tool_result",
            "tool_use_id": result.id,
            "content": result.content(),
        }
        if result.is_error:
            block["is_error"] = True
        return block

    def tool_result_message(self, result: ToolResult) -> ChatMessage:
        """Convert a ToolResult to an Anthropic user message."""
        return self.tool_result_messages([result])[0]

    def tool_result_messages(self, results: Sequence[ToolResult]) -> list[ChatMessage]:
        """Anthropic expects every result of one turn inside a single user message."""
        if not results:
            return []
        return [
            {
                "role": "user",
                "content": [self._tool_result_block(r) for r in results],
            }
        ]
