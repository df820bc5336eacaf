"""
Command-line demo over the example tool registry.

    llm-tool-caller list
    llm-tool-caller info calculator
    llm-tool-caller call calculator --parameters '{"operation": "add", "operands": [1, 2]}'
    llm-tool-caller batch '[{"name": "calculator", "parameters": {...}}, ...]'
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Optional, Sequence

from llm_tool_caller.builtin import default_registry
from llm_tool_caller.config import Settings, configure_logging
from llm_tool_caller.registry import ToolRegistry
from llm_tool_caller.types import ToolCall, ToolResult


def _dumps(value: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
    return json.dumps(value, ensure_ascii=False)


def _cmd_list(registry: ToolRegistry, args: argparse.Namespace) -> int:
    tools = registry.list_descriptors()
    print("Available Tools:")
    print("================")
    for tool in tools:
        print(f"• {tool.name}")
        print(f"  {tool.description}")
        print()
    print(f"Total: {len(tools)} tools")
    return 0


def _cmd_info(registry: ToolRegistry, args: argparse.Namespace) -> int:
    info = registry.describe(args.tool_name)
    if info is None:
        print(f"Tool '{args.tool_name}' not found.", file=sys.stderr)
        return 1
    print(f"Tool: {info.name}")
    print(f"Description: {info.description}")
    return 0


def _print_result(result: ToolResult, pretty: bool) -> None:
    if result.is_error:
        print(f"❌ Error: {result.error}")
    else:
        print("✅ Success!")
        print(_dumps(result.value(), pretty))


def _cmd_call(registry: ToolRegistry, args: argparse.Namespace) -> int:
    try:
        parameters = json.loads(args.parameters)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON parameters: {exc}", file=sys.stderr)
        return 1
    try:
        call = ToolCall(name=args.tool_name, parameters=parameters)
    except (TypeError, ValueError) as exc:
        print(f"Invalid JSON parameters: {exc}", file=sys.stderr)
        return 1
    print(f"Executing tool: {call.name}")
    print(f"Parameters: {args.parameters}")
    print("---")

    result = asyncio.run(registry.execute(call))
    _print_result(result, args.pretty)
    return 1 if result.is_error else 0


def _cmd_batch(registry: ToolRegistry, args: argparse.Namespace) -> int:
    try:
        raw = json.loads(args.calls)
        if not isinstance(raw, list):
            raise ValueError("expected a JSON array of calls")
        calls = [ToolCall.from_dict(item) for item in raw]
    except (ValueError, TypeError, AttributeError) as exc:
        print(f"Invalid batch: {exc}", file=sys.stderr)
        return 1

    results = asyncio.run(registry.execute_all(calls))
    print(_dumps([r.to_dict() for r in results], args.pretty))
    return 1 if any(r.is_error for r in results) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-tool-caller",
        description="A demonstration of the llm-tool-caller registry",
    )
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--pretty", action="store_true", default=None, help="Pretty print JSON output")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all available tools").set_defaults(handler=_cmd_list)

    info = sub.add_parser("info", help="Show information about a tool")
    info.add_argument("tool_name")
    info.set_defaults(handler=_cmd_info)

    call = sub.add_parser("call", parents=[output], help="Execute a specific tool with parameters")
    call.add_argument("tool_name", help="The name of the tool to execute")
    call.add_argument("--parameters", default="{}", help="JSON parameters for the tool")
    call.set_defaults(handler=_cmd_call)

    batch = sub.add_parser("batch", parents=[output], help="Execute several tool calls concurrently")
    batch.add_argument("calls", help='JSON array of {"name", "parameters", "id"?} objects')
    batch.set_defaults(handler=_cmd_batch)
    return parser


def main(argv: Optional[Sequence[str]] = None, *, registry: Optional[ToolRegistry] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings)
    if getattr(args, "pretty", None) is None:
        args.pretty = settings.pretty

    return args.handler(registry if registry is not None else default_registry(), args)


if __name__ == "__main__":
    sys.exit(main())
