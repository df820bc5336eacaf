"""
Immutable envelopes that correlate a tool call with its outcome.

They are intentionally minimal: everything provider‑specific lives in adapters.
"""
from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping

from llm_tool_caller._exceptions import ToolError
from llm_tool_caller.values import DynamicValue, freeze, to_dynamic, to_dynamic_object

__all__ = ["ToolDescriptor", "ToolCall", "ToolResult", "new_call_id"]


def new_call_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Public name and description of a registered tool."""
    name: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True, slots=True)
class ToolCall:
    """
    A request to run the tool called *name* with raw *parameters*.

    ``parameters`` is stored as a read-only copy (see :func:`freeze`);
    ``to_dict`` hands back plain, mutable containers.
    """
    name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=new_call_id)   # correlation token only

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", freeze(to_dynamic_object(self.parameters)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "parameters": to_dynamic(self.parameters),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolCall:
        """Build a call from its JSON shape; ``id`` is generated when missing."""
        try:
            name = data["name"]
        except KeyError:
            raise ValueError("Tool call is missing 'name'") from None
        if not isinstance(name, str):
            raise TypeError(f"Tool call name must be a string, got {type(name).__name__}")

        parameters = data.get("parameters")
        if parameters is None:
            parameters = {}
        call_id = data.get("id")
        if call_id is None:
            return cls(name=name, parameters=parameters)
        return cls(name=name, parameters=parameters, id=str(call_id))


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of a :class:`ToolCall`; ``error`` decides success or failure."""
    call: ToolCall
    result: Any = field(default_factory=dict)
    error: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", freeze(self.result))

    @property
    def id(self) -> str:
        return self.call.id

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise ToolError(self.error)

    def content(self) -> str:
        """JSON text suitable for handing back to an LLM as the tool output."""
        if self.error is not None:
            return json.dumps({"error": self.error})
        return json.dumps(self.value())

    def value(self) -> DynamicValue:
        """A mutable, plain-container copy of ``result``."""
        return to_dynamic(self.result)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "tool_call": self.call.to_dict(),
            "result": self.value(),
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolResult:
        return cls(
            call=ToolCall.from_dict(data["tool_call"]),
            result=data.get("result", {}),
            error=data.get("error"),
        )
