"""
LLM Tool Caller - typed tools behind an untyped, name-keyed call boundary.
"""

import logging

from ._exceptions import (
    ToolError,
    ToolNotFoundError,
    InvalidParametersError,
    ExecutionFailedError,
    SerializationError,
)
from .values import DynamicValue, DynamicObject, ValueKind, kind_of, to_dynamic
from .types import ToolCall, ToolResult, ToolDescriptor
from .tool import Tool, ToolModel
from .executor import ToolExecutor, TypedToolExecutor
from .registry import ToolRegistry
from .config import Provider, Settings, get_api_key
from .adapters import get_tool_adapter

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ToolError",
    "ToolNotFoundError",
    "InvalidParametersError",
    "ExecutionFailedError",
    "SerializationError",
    "DynamicValue",
    "DynamicObject",
    "ValueKind",
    "kind_of",
    "to_dynamic",
    "ToolCall",
    "ToolResult",
    "ToolDescriptor",
    "Tool",
    "ToolModel",
    "ToolExecutor",
    "TypedToolExecutor",
    "ToolRegistry",
    "Provider",
    "get_api_key",
    "Settings",
    "get_tool_adapter",
]
