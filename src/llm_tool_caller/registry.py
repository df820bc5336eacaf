"""
Name-keyed registry of tools with single and batched dispatch.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Iterable, Optional, Sequence

from llm_tool_caller._exceptions import ToolError, ToolNotFoundError, classify_error
from llm_tool_caller.executor import ToolExecutor, TypedToolExecutor
from llm_tool_caller.tool import Tool
from llm_tool_caller.types import ToolCall, ToolDescriptor, ToolResult
from llm_tool_caller.values import empty_object

__all__ = ["ToolRegistry"]


class ToolRegistry:
    """
    Owns the mapping from tool name to executor and dispatches calls.

    Dispatch never raises for tool-level failures: every outcome, including
    an unknown tool name, comes back as a :class:`ToolResult`. Mutations
    and lookups share one lock; the tool itself always runs outside it.
    """

    def __init__(
        self,
        tools: Iterable[Tool] = (),
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Args:
            tools: Tools to register up front, in order.
            logger: Optional logger instance. If None, a logger named after
                    this module will be used.
            name: Optional name for this registry, used in logging.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else self.__class__.__name__
        self._executors: dict[str, ToolExecutor] = {}
        self._lock = threading.RLock()
        for tool in tools:
            self.register(tool)

    # --- mutation ----------------------------------------------------------
    def register(self, tool: Tool) -> None:
        """Register *tool* under its name, replacing any previous entry."""
        executor = TypedToolExecutor(tool, logger=self.logger)
        with self._lock:
            replaced = self._executors.get(executor.name)
            self._executors[executor.name] = executor
        if replaced is not None:
            self._log(f"Replaced tool {executor.name!r}", logging.DEBUG)
        else:
            self._log(f"Registered tool {executor.name!r}", logging.DEBUG)

    def unregister(self, name: str) -> bool:
        """Remove the tool called *name*; return whether anything was removed."""
        with self._lock:
            removed = self._executors.pop(name, None) is not None
        if removed:
            self._log(f"Unregistered tool {name!r}", logging.DEBUG)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._executors.clear()

    # --- queries -----------------------------------------------------------
    def _lookup(self, name: str) -> Optional[ToolExecutor]:
        with self._lock:
            return self._executors.get(name)

    def describe(self, name: str) -> Optional[ToolDescriptor]:
        executor = self._lookup(name)
        return executor.descriptor() if executor is not None else None

    def list_descriptors(self) -> list[ToolDescriptor]:
        """Descriptors of all registered tools, ordered by name."""
        with self._lock:
            executors = list(self._executors.values())
        return sorted((e.descriptor() for e in executors), key=lambda d: d.name)

    @property
    def available_tools(self) -> list[str]:
        with self._lock:
            return sorted(self._executors)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._executors

    def __len__(self) -> int:
        with self._lock:
            return len(self._executors)

    # --- dispatch ----------------------------------------------------------
    async def execute(self, call: ToolCall) -> ToolResult:
        """Run one call and wrap its outcome; tool failures never raise."""
        executor = self._lookup(call.name)
        try:
            if executor is None:
                raise ToolNotFoundError(call.name)
            self._log(f"Executing {call.name!r} (id={call.id})", logging.DEBUG)
            value = await executor.execute(call.parameters)
        except ToolError as exc:
            return self._wrap_error(call, exc)
        except Exception as exc:
            return self._wrap_error(call, classify_error(exc, self.logger))
        return ToolResult(call=call, result=value)

    async def execute_all(self, calls: Sequence[ToolCall]) -> list[ToolResult]:
        """Run *calls* concurrently; ``results[i]`` always answers ``calls[i]``."""
        if not calls:
            return []
        return list(await asyncio.gather(*(self.execute(call) for call in calls)))

    def _wrap_error(self, call: ToolCall, exc: ToolError) -> ToolResult:
        """Wrap a tool error into an error result."""
        self._log(f"Call {call.name!r} (id={call.id}) failed: {exc}", logging.INFO)
        return ToolResult(call=call, result=empty_object(), error=str(exc))

    def _log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, f"[{self.name}] {message}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tools={self.available_tools!r})"
