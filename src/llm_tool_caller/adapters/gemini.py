"""Gemini adapter for translating tool calls and results.

Since Gemini uses OpenAI-compatible endpoints, we just re-export the OpenAI adapter.
"""

from .openai import OpenAIToolAdapter

# Gemini uses the OpenAI-compatible API, so it's the same adapter
GeminiToolAdapter = OpenAIToolAdapter
