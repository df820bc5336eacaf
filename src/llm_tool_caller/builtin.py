"""
Example tools: mock weather, a calculator and a text processor.

They exist to exercise the tool contract end to end (optional fields,
enumerated values, semantic validation inside ``execute`` and nested
results) and back the CLI demo.
"""

from __future__ import annotations

import asyncio
import math
import random
import re
from enum import StrEnum
from typing import Literal, Optional, Union

from pydantic import Field, field_validator

from llm_tool_caller._exceptions import ExecutionFailedError
from llm_tool_caller.registry import ToolRegistry
from llm_tool_caller.tool import Tool, ToolModel

__all__ = [
    "WeatherTool",
    "CalculatorTool",
    "TextProcessorTool",
    "default_registry",
]


# --- weather ---------------------------------------------------------------

_CONDITIONS = ("Sunny", "Cloudy", "Partly Cloudy", "Rainy", "Snowy")


class WeatherParameters(ToolModel):
    location: str
    unit: Literal["celsius", "fahrenheit"] = "celsius"
    include_hourly: Optional[bool] = None

    @field_validator("unit", mode="before")
    @classmethod
    def lower_unit(cls, value):
        if value is None:
            return "celsius"
        return value.lower() if isinstance(value, str) else value


class HourlyForecast(ToolModel):
    time: str
    temperature: float
    condition: str


class WeatherResult(ToolModel):
    location: str
    temperature: float
    condition: str
    humidity: int
    wind_speed: float
    unit: str
    hourly_forecast: Optional[list[HourlyForecast]] = None


class WeatherTool(Tool[WeatherParameters, WeatherResult]):
    """Mock weather lookup; no network access, just plausible numbers."""

    name = "get_weather"
    description = "Get current weather information for a specified location"
    Parameters = WeatherParameters
    Result = WeatherResult

    def __init__(self, *, rng: Optional[random.Random] = None, delay: float = 0.1) -> None:
        self._rng = rng or random.Random()
        self._delay = delay

    async def execute(self, parameters: WeatherParameters) -> WeatherResult:
        if self._delay > 0:
            await asyncio.sleep(self._delay)  # simulated API latency

        rng = self._rng
        base = 72.0 if parameters.unit == "fahrenheit" else 22.0
        temperature = base + rng.uniform(-10, 10)

        hourly = None
        if parameters.include_hourly:
            hourly = [
                HourlyForecast(
                    time=f"{hour:02d}:00",
                    temperature=temperature + rng.uniform(-3, 3),
                    condition=rng.choice(_CONDITIONS),
                )
                for hour in range(24)
            ]

        return WeatherResult(
            location=parameters.location,
            temperature=temperature,
            condition=rng.choice(_CONDITIONS),
            humidity=rng.randint(30, 80),
            wind_speed=rng.uniform(0, 25),
            unit=parameters.unit,
            hourly_forecast=hourly,
        )


# --- calculator ------------------------------------------------------------

class Operation(StrEnum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    SQRT = "sqrt"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"


class CalculatorParameters(ToolModel):
    operation: Operation
    operands: list[float] = Field(min_length=1)


class CalculatorResult(ToolModel):
    operation: Operation
    operands: list[float]
    result: float
    expression: str


_UNARY = {
    Operation.SQRT: ("Square root", math.sqrt),
    Operation.SIN: ("Sine", math.sin),
    Operation.COS: ("Cosine", math.cos),
    Operation.TAN: ("Tangent", math.tan),
}
_SYMBOLS = {
    Operation.ADD: " + ",
    Operation.SUBTRACT: " - ",
    Operation.MULTIPLY: " × ",
    Operation.DIVIDE: " ÷ ",
}


def _require(operands: list[float], count: int, label: str, *, exact: bool = True) -> None:
    if exact and len(operands) != count:
        noun = "operand" if count == 1 else "operands"
        raise ExecutionFailedError(f"{label} requires exactly {count} {noun}")
    if not exact and len(operands) < count:
        raise ExecutionFailedError(f"{label} requires at least {count} operands")


class CalculatorTool(Tool[CalculatorParameters, CalculatorResult]):
    name = "calculator"
    description = "Perform basic mathematical operations on numbers"
    Parameters = CalculatorParameters
    Result = CalculatorResult

    async def execute(self, parameters: CalculatorParameters) -> CalculatorResult:
        op = parameters.operation
        operands = parameters.operands

        try:
            value, expression = self._compute(op, operands)
        except OverflowError as exc:
            raise ExecutionFailedError(f"Result out of range: {exc}", exc) from exc
        except ValueError as exc:
            # math domain errors, e.g. a negative base with a fractional exponent
            raise ExecutionFailedError(f"Math domain error: {exc}", exc) from exc

        if not math.isfinite(value):
            raise ExecutionFailedError("Result is not a finite number")

        return CalculatorResult(
            operation=op,
            operands=operands,
            result=value,
            expression=f"{expression} = {value}",
        )

    def _compute(self, op: Operation, operands: list[float]) -> tuple[float, str]:
        if op in _UNARY:
            label, fn = _UNARY[op]
            _require(operands, 1, label)
            (x,) = operands
            if op is Operation.SQRT:
                if x < 0:
                    raise ExecutionFailedError("Cannot take square root of negative number")
                return fn(x), f"√{x}"
            return fn(x), f"{op.value}({x})"

        if op is Operation.POWER:
            _require(operands, 2, "Power operation")
            base, exponent = operands
            return math.pow(base, exponent), f"{base}^{exponent}"

        expression = _SYMBOLS[op].join(str(x) for x in operands)
        if op is Operation.ADD:
            return math.fsum(operands), expression
        if op is Operation.MULTIPLY:
            return math.prod(operands), expression

        head, *rest = operands
        if op is Operation.SUBTRACT:
            _require(operands, 2, "Subtraction", exact=False)
            for x in rest:
                head -= x
            return head, expression

        _require(operands, 2, "Division", exact=False)
        if any(x == 0 for x in rest):
            raise ExecutionFailedError("Division by zero")
        for x in rest:
            head /= x
        return head, expression


# --- text processing -------------------------------------------------------

class TextOperation(StrEnum):
    WORD_COUNT = "word_count"
    CHARACTER_COUNT = "character_count"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    REVERSE = "reverse"
    REMOVE_SPACES = "remove_spaces"
    SENTENCE_COUNT = "sentence_count"


class TextProcessorParameters(ToolModel):
    text: str
    operations: list[TextOperation]


class TextProcessorResult(ToolModel):
    original_text: str
    results: dict[str, Union[int, str]]


_SENTENCE_END = re.compile(r"[.!?]")


def _process(text: str, op: TextOperation) -> Union[int, str]:
    match op:
        case TextOperation.WORD_COUNT:
            return len(text.split())
        case TextOperation.CHARACTER_COUNT:
            return len(text)
        case TextOperation.UPPERCASE:
            return text.upper()
        case TextOperation.LOWERCASE:
            return text.lower()
        case TextOperation.REVERSE:
            return text[::-1]
        case TextOperation.REMOVE_SPACES:
            return text.replace(" ", "")
        case TextOperation.SENTENCE_COUNT:
            return sum(1 for part in _SENTENCE_END.split(text) if part.strip())
    raise ExecutionFailedError(f"Unsupported operation: {op}")


class TextProcessorTool(Tool[TextProcessorParameters, TextProcessorResult]):
    name = "text_processor"
    description = "Process text with various operations like counting, transforming, and analyzing"
    Parameters = TextProcessorParameters
    Result = TextProcessorResult

    def execute(self, parameters: TextProcessorParameters) -> TextProcessorResult:
        # synchronous; runs in a worker thread
        results = {op.value: _process(parameters.text, op) for op in parameters.operations}
        return TextProcessorResult(original_text=parameters.text, results=results)


def default_registry() -> ToolRegistry:
    """A registry with all example tools registered."""
    return ToolRegistry([WeatherTool(), CalculatorTool(), TextProcessorTool()])
