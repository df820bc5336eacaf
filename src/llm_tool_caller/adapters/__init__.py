"""Adapters between LLM provider payloads and tool envelopes."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from llm_tool_caller.config import Provider
from llm_tool_caller.types import ToolCall, ToolResult

from .openai import OpenAIToolAdapter
from .anthropic import AnthropicToolAdapter
from .gemini import GeminiToolAdapter


class ToolCallAdapter(Protocol):
    """Protocol for moving tool calls and results across a provider boundary."""

    def tool_calls_from(self, raw: Any) -> list[ToolCall]:
        """Extract tool calls from a provider response."""
        ...

    def tool_result_message(self, result: ToolResult) -> dict[str, Any]:
        """Convert one ToolResult to a provider-specific message."""
        ...

    def tool_result_messages(self, results: Sequence[ToolResult]) -> list[dict[str, Any]]:
        """Convert the results of one turn to provider-specific messages."""
        ...


_ADAPTERS: dict[Provider, type[ToolCallAdapter]] = {
    Provider.OPENAI: OpenAIToolAdapter,
    Provider.ANTHROPIC: AnthropicToolAdapter,
    Provider.GEMINI: GeminiToolAdapter,
}


def get_tool_adapter(provider: Provider) -> ToolCallAdapter:
    try:
        adapter_cls = _ADAPTERS[provider]
    except KeyError as exc:
        raise ValueError(f"Unsupported provider: {provider}") from exc
    return adapter_cls()


__all__ = [
    "ToolCallAdapter",
    "OpenAIToolAdapter",
    "AnthropicToolAdapter",
    "GeminiToolAdapter",
    "get_tool_adapter",
]
