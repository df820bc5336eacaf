"""
Type-erasing executors: the uniform, dynamically typed face of a typed tool.

The registry holds heterogeneous tools behind the :class:`ToolExecutor`
protocol. :class:`TypedToolExecutor` implements it for any :class:`Tool`
by decoding raw parameters into ``Tool.Parameters``, awaiting the tool and
encoding its ``Tool.Result`` back into the dynamic value model.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Generic, Mapping, Optional, Protocol

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from llm_tool_caller._exceptions import (
    InvalidParametersError,
    SerializationError,
    ToolError,
    classify_error,
)
from llm_tool_caller.tool import ParamsT, ResultT, Tool
from llm_tool_caller.types import ToolDescriptor
from llm_tool_caller.values import DynamicValue, to_dynamic

__all__ = ["ToolExecutor", "TypedToolExecutor"]


class ToolExecutor(Protocol):
    """Protocol for running a tool across the untyped boundary."""

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    def descriptor(self) -> ToolDescriptor: ...

    async def execute(self, parameters: Mapping[str, Any]) -> DynamicValue:
        """Decode, run and encode; raises ToolError on any failure."""
        ...


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class TypedToolExecutor(Generic[ParamsT, ResultT]):
    """Executor bound to a single tool instance; stateless across calls."""

    def __init__(
        self,
        tool: Tool[ParamsT, ResultT],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tool = tool
        self._parameters_model = type(tool).Parameters
        self._result_model = type(tool).Result
        self._is_async = inspect.iscoroutinefunction(tool.execute)
        self.logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._tool.name

    @property
    def description(self) -> str:
        return self._tool.description

    @property
    def tool(self) -> Tool[ParamsT, ResultT]:
        return self._tool

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(name=self.name, description=self.description)

    def decode(self, parameters: Any) -> ParamsT:
        """Validate raw parameters into the tool's parameter model."""
        if not isinstance(parameters, Mapping):
            raise InvalidParametersError(
                f"Expected an object, got {type(parameters).__name__}"
            )
        try:
            raw = to_dynamic(parameters)
        except (TypeError, ValueError) as exc:
            raise InvalidParametersError(str(exc), exc) from exc
        try:
            return self._parameters_model.model_validate(raw)
        except ValidationError as exc:
            raise InvalidParametersError(
                f"Failed to decode parameters: {_format_validation_error(exc)}", exc
            ) from exc

    async def invoke(self, parameters: ParamsT) -> ResultT:
        """Run the tool; foreign exceptions come back as ExecutionFailedError."""
        try:
            if self._is_async:
                return await self._tool.execute(parameters)
            return await asyncio.to_thread(self._tool.execute, parameters)
        except ToolError:
            raise
        except Exception as exc:
            raise classify_error(exc, self.logger) from exc

    def encode(self, result: Any) -> DynamicValue:
        """Convert the tool's result into the dynamic value model, failing closed."""
        if not isinstance(result, self._result_model):
            try:
                result = self._result_model.model_validate(result)
            except ValidationError as exc:
                raise SerializationError(
                    f"{self.name} returned {type(result).__name__}, expected "
                    f"{self._result_model.__name__}: {_format_validation_error(exc)}",
                    exc,
                ) from exc
        try:
            payload = result.model_dump(mode="json", by_alias=True)
            return to_dynamic(payload)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise SerializationError(str(exc), exc) from exc

    async def execute(self, parameters: Mapping[str, Any]) -> DynamicValue:
        typed = self.decode(parameters)
        result = await self.invoke(typed)
        return self.encode(result)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tool={self._tool!r})"
