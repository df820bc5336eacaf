"""
Tool error taxonomy, plus a classifier that turns stray tool exceptions
into a unified `ToolError` while preserving the original for tracebacks.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Optional

__all__: tuple[str, ...] = (
    "ToolError",
    "ToolNotFoundError",
    "InvalidParametersError",
    "ExecutionFailedError",
    "SerializationError",
    "classify_error",
)


class ToolError(RuntimeError):
    """Public tool-level exception.

    Subclasses render as ``"<prefix>: <detail>"``; the base class renders
    the bare detail.

    Attributes:
        detail: The message without its kind prefix.
        original_exc: The underlying exception, if this one wraps another.
    """

    prefix: ClassVar[str] = ""

    detail: str
    original_exc: Optional[BaseException]

    def __init__(
        self, detail: str, original_exc: Optional[BaseException] = None
    ) -> None:
        self.detail = detail
        self.original_exc = original_exc
        super().__init__(f"{self.prefix}: {detail}" if self.prefix else detail)
        if original_exc is not None:
            self.__cause__ = original_exc


class ToolNotFoundError(ToolError):
    """No tool is registered under the requested name."""

    prefix = "Tool not found"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


class InvalidParametersError(ToolError):
    """Raw parameters could not be decoded into the tool's parameter model."""

    prefix = "Invalid parameters"


class ExecutionFailedError(ToolError):
    """The tool's own logic failed after its parameters decoded cleanly."""

    prefix = "Execution failed"


class SerializationError(ToolError):
    """The tool's result could not be encoded into the dynamic value model."""

    prefix = "Serialization error"


def classify_error(
    exc: Exception,
    logger: Optional[logging.Logger] = None,
) -> ToolError:
    """Return *exc* unchanged if it is a ToolError, else wrap it as ExecutionFailedError."""
    if isinstance(exc, ToolError):
        return exc

    log = logger or logging.getLogger("llm_tool_caller.exceptions")
    detail = str(exc) or exc.__class__.__name__
    log.warning("Wrapping tool exception", extra={"exc": exc})
    return ExecutionFailedError(detail, exc)
