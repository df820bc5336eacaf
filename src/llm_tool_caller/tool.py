"""
The typed contract every tool implements.

A tool declares its parameter and result shapes as pydantic models and
implements ``execute`` against those types only; the executor takes care of
the untyped boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from llm_tool_caller.types import ToolDescriptor

__all__ = ["Tool", "ToolModel", "ParamsT", "ResultT"]


class ToolModel(BaseModel):
    """Base for tool parameter and result shapes."""

    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        extra="ignore",
    )


ParamsT = TypeVar("ParamsT", bound=BaseModel)
ResultT = TypeVar("ResultT", bound=BaseModel)

_REQUIRED_ATTRS = ("name", "description", "Parameters", "Result")


class Tool(ABC, Generic[ParamsT, ResultT]):
    """
    Abstract base class for tools.

    Concrete subclasses set four class attributes and implement ``execute``::

        class EchoTool(Tool[EchoParameters, EchoResult]):
            name = "echo"
            description = "Echo the input back"
            Parameters = EchoParameters
            Result = EchoResult

            async def execute(self, parameters: EchoParameters) -> EchoResult:
                return EchoResult(text=parameters.text)

    ``execute`` may also be a plain function; it is then run in a worker
    thread so it never blocks the event loop.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    Parameters: ClassVar[type[BaseModel]]
    Result: ClassVar[type[BaseModel]]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # ABCMeta fills __abstractmethods__ only after this hook runs
        if getattr(cls.execute, "__isabstractmethod__", False):
            return

        missing = [attr for attr in _REQUIRED_ATTRS if not hasattr(cls, attr)]
        if missing:
            raise TypeError(f"{cls.__name__} must define {', '.join(missing)}")
        if not isinstance(cls.name, str) or not cls.name:
            raise TypeError(f"{cls.__name__}.name must be a non-empty string")
        if not isinstance(cls.description, str):
            raise TypeError(f"{cls.__name__}.description must be a string")
        for attr in ("Parameters", "Result"):
            model = getattr(cls, attr)
            if not (isinstance(model, type) and issubclass(model, BaseModel)):
                raise TypeError(f"{cls.__name__}.{attr} must be a pydantic model class")

    @abstractmethod
    def execute(self, parameters: ParamsT) -> Union[ResultT, Awaitable[ResultT]]:
        """
        Run the tool.

        Args:
            parameters: Decoded, validated parameters.

        Returns:
            An instance of ``Result``.

        Raises:
            ToolError: any of the tool error kinds; propagated unchanged.
            Exception: anything else is reported as an execution failure.
        """
        ...

    @classmethod
    def descriptor(cls) -> ToolDescriptor:
        return ToolDescriptor(name=cls.name, description=cls.description)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
