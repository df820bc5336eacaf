from __future__ import annotations

import argparse
import asyncio
import logging

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from llm_tool_caller import Provider, get_api_key, get_tool_adapter
from llm_tool_caller.builtin import default_registry

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

# The registry exposes only name/description; the host owns the JSON schemas.
CALCULATOR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "operation": {
            "type": "string",
            "enum": ["add", "subtract", "multiply", "divide", "power", "sqrt", "sin", "cos", "tan"],
        },
        "operands": {"type": "array", "items": {"type": "number"}},
    },
    "required": ["operation", "operands"],
}

WEATHER_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "location": {"type": "string", "description": "City name, e.g. San Francisco"},
        "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
        "include_hourly": {"type": "boolean"},
    },
    "required": ["location"],
}

SCHEMAS = {"calculator": CALCULATOR_SCHEMA, "get_weather": WEATHER_SCHEMA}

PROMPT = "What's the weather in San Francisco, and what is 2 to the power of 10?"


async def openai_roundtrip(model: str) -> None:
    registry = default_registry()
    adapter = get_tool_adapter(Provider.OPENAI)
    client = AsyncOpenAI(api_key=get_api_key(Provider.OPENAI))
    tools = [
        {
            "type": "function",
            "function": {"name": d.name, "description": d.description, "parameters": SCHEMAS[d.name]},
        }
        for d in registry.list_descriptors()
        if d.name in SCHEMAS
    ]

    messages: list[dict] = [{"role": "user", "content": PROMPT}]
    rsp1 = await client.chat.completions.create(model=model, messages=messages, tools=tools)

    calls = adapter.tool_calls_from(rsp1)
    if not calls:
        logger.warning(f"Model answered directly: {rsp1.choices[0].message.content}")
        return

    results = await registry.execute_all(calls)
    messages.append(rsp1.choices[0].message.model_dump(exclude_none=True))
    messages.extend(adapter.tool_result_messages(results))

    rsp2 = await client.chat.completions.create(model=model, messages=messages, tools=tools)
    logger.info("OpenAI says: %s", rsp2.choices[0].message.content)


async def anthropic_roundtrip(model: str) -> None:
    registry = default_registry()
    adapter = get_tool_adapter(Provider.ANTHROPIC)
    client = AsyncAnthropic(api_key=get_api_key(Provider.ANTHROPIC))
    tools = [
        {"name": d.name, "description": d.description, "input_schema": SCHEMAS[d.name]}
        for d in registry.list_descriptors()
        if d.name in SCHEMAS
    ]

    messages: list[dict] = [{"role": "user", "content": PROMPT}]
    rsp1 = await client.messages.create(model=model, max_tokens=1024, messages=messages, tools=tools)

    calls = adapter.tool_calls_from(rsp1)
    if not calls:
        logger.warning("Model answered directly")
        return

    results = await registry.execute_all(calls)
    messages.append({"role": "assistant", "content": [b.model_dump() for b in rsp1.content]})
    messages.extend(adapter.tool_result_messages(results))

    rsp2 = await client.messages.create(model=model, max_tokens=1024, messages=messages, tools=tools)
    text = "".join(b.text for b in rsp2.content if b.type == "text")
    logger.info("Anthropic says: %s", text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--provider",
        choices=[Provider.OPENAI.value, Provider.ANTHROPIC.value],
        default=Provider.ANTHROPIC.value,
    )
    parser.add_argument("--model", default="claude-3-5-haiku-20241022")  # or "gpt-4.1-nano-2025-04-14"
    args = parser.parse_args()

    if Provider(args.provider) is Provider.OPENAI:
        asyncio.run(openai_roundtrip(args.model))
    else:
        asyncio.run(anthropic_roundtrip(args.model))
