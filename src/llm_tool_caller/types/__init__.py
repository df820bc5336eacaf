from .tool import ToolCall, ToolDescriptor, ToolResult, new_call_id

__all__ = [
    "ToolCall",
    "ToolDescriptor",
    "ToolResult",
    "new_call_id",
]
