"""Tests for the example tools, driven through the registry boundary."""

import asyncio
import json
import math
import random

import pytest

from llm_tool_caller import ToolCall, ToolRegistry
from llm_tool_caller.builtin import (
    CalculatorResult,
    CalculatorTool,
    TextProcessorTool,
    WeatherResult,
    WeatherTool,
    default_registry,
)


def call(registry: ToolRegistry, name: str, **parameters):
    return asyncio.run(registry.execute(ToolCall(name=name, parameters=parameters)))


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry(
        [WeatherTool(rng=random.Random(7), delay=0), CalculatorTool(), TextProcessorTool()]
    )


class TestCalculator:
    """Arithmetic, arity and domain validation."""

    def test_add(self, registry):
        """Test addition and its rendered expression."""
        result = call(registry, "calculator", operation="add", operands=[1, 2, 3])

        assert result.error is None
        assert result.result["result"] == 6
        assert result.result["expression"] == "1.0 + 2.0 + 3.0 = 6.0"

    def test_power(self, registry):
        """Test exponentiation and its rendered expression."""
        result = call(registry, "calculator", operation="power", operands=[2, 3])
        assert result.result["result"] == 8
        assert result.result["expression"] == "2.0^3.0 = 8.0"

    @pytest.mark.parametrize(
        "operation, operands, expected",
        [
            ("subtract", [10, 3, 2], 5),
            ("multiply", [7, 8, 9], 504),
            ("divide", [100, 5, 2], 10),
            ("sqrt", [16], 4),
            ("cos", [0], 1),
        ],
    )
    def test_operations(self, registry, operation, operands, expected):
        """Test the remaining operations on valid operands."""
        result = call(registry, "calculator", operation=operation, operands=operands)
        assert result.error is None
        assert result.result["result"] == pytest.approx(expected)

    def test_sin_half_pi(self, registry):
        """Test sine at pi/2."""
        result = call(registry, "calculator", operation="sin", operands=[math.pi / 2])
        assert result.result["result"] == pytest.approx(1.0)

    def test_divide_by_zero(self, registry):
        """Test that division by zero fails with an empty result."""
        result = call(registry, "calculator", operation="divide", operands=[10, 0])
        assert result.error == "Execution failed: Division by zero"
        assert result.result == {}

    def test_negative_sqrt(self, registry):
        """Test that the square root of a negative number fails."""
        result = call(registry, "calculator", operation="sqrt", operands=[-4])
        assert result.error == "Execution failed: Cannot take square root of negative number"

    @pytest.mark.parametrize(
        "operation, operands",
        [("power", [2]), ("sqrt", [4, 9]), ("subtract", [1]), ("divide", [1]), ("tan", [1, 2])],
    )
    def test_wrong_arity(self, registry, operation, operands):
        """Test that wrong operand counts are execution failures."""
        result = call(registry, "calculator", operation=operation, operands=operands)
        assert result.error.startswith("Execution failed:")
        assert "requires" in result.error

    def test_overflow(self, registry):
        """Test that an out-of-range result fails."""
        result = call(registry, "calculator", operation="power", operands=[10, 400])
        assert result.error.startswith("Execution failed:")

    def test_empty_operands_rejected_at_decode(self, registry):
        """Test that an empty operand list is invalid input."""
        result = call(registry, "calculator", operation="add", operands=[])
        assert result.error.startswith("Invalid parameters:")

    def test_unknown_operation_rejected_at_decode(self, registry):
        """Test that an unknown operation is invalid input."""
        result = call(registry, "calculator", operation="modulo", operands=[1, 2])
        assert result.error.startswith("Invalid parameters:")
        assert "operation" in result.error

    def test_missing_operands(self, registry):
        """Test that missing operands are reported by field name."""
        result = call(registry, "calculator", operation="add")
        assert result.error.startswith("Invalid parameters:")
        assert "operands" in result.error

    def test_result_roundtrip(self, registry):
        """Test that the encoded result decodes back into the result model."""
        result = call(registry, "calculator", operation="divide", operands=[1, 3])
        decoded = CalculatorResult.model_validate(json.loads(result.content()))

        assert decoded.result == 1 / 3
        assert decoded.operands == [1.0, 3.0]
        assert decoded.operation == "divide"


class TestWeather:
    """Mock weather tool: optional fields and nested results."""

    def test_defaults_to_celsius(self, registry):
        """Test default unit and plausible value ranges."""
        result = call(registry, "get_weather", location="Paris")

        assert result.error is None
        assert result.result["location"] == "Paris"
        assert result.result["unit"] == "celsius"
        assert 12 <= result.result["temperature"] <= 32
        assert 30 <= result.result["humidity"] <= 80
        assert result.result["hourly_forecast"] is None

    def test_unit_is_case_insensitive(self, registry):
        """Test that the unit is matched regardless of case."""
        result = call(registry, "get_weather", location="Tokyo", unit="Fahrenheit")
        assert result.result["unit"] == "fahrenheit"
        assert 62 <= result.result["temperature"] <= 82

    def test_invalid_unit(self, registry):
        """Test that an unknown unit is invalid input."""
        result = call(registry, "get_weather", location="Tokyo", unit="kelvin")
        assert result.error.startswith("Invalid parameters:")

    def test_missing_location(self, registry):
        """Test that a missing location is reported by field name."""
        result = call(registry, "get_weather", unit="celsius")
        assert result.error.startswith("Invalid parameters:")
        assert "location" in result.error

    def test_hourly_forecast_roundtrip(self, registry):
        """Test the nested hourly forecast and its round trip."""
        result = call(registry, "get_weather", location="Oslo", include_hourly=True)
        hourly = result.result["hourly_forecast"]

        assert len(hourly) == 24
        assert hourly[0]["time"] == "00:00"
        assert hourly[23]["time"] == "23:00"

        decoded = WeatherResult.model_validate(json.loads(result.content()))
        assert decoded.model_dump(mode="json") == result.value()


class TestTextProcessor:
    """Synchronous tool executed off the event loop."""

    def test_operations(self, registry):
        """Test the counting operations and uppercase."""
        result = call(
            registry,
            "text_processor",
            text="Hello World. How are you?",
            operations=["word_count", "character_count", "uppercase", "sentence_count"],
        )

        assert result.error is None
        assert result.result["original_text"] == "Hello World. How are you?"
        assert result.result["results"] == {
            "word_count": 5,
            "character_count": 25,
            "uppercase": "HELLO WORLD. HOW ARE YOU?",
            "sentence_count": 2,
        }

    def test_transformations(self, registry):
        """Test the string transformations."""
        result = call(
            registry,
            "text_processor",
            text="a b c",
            operations=["reverse", "remove_spaces", "lowercase"],
        )
        assert result.result["results"] == {
            "reverse": "c b a",
            "remove_spaces": "abc",
            "lowercase": "a b c",
        }

    def test_unknown_operation(self, registry):
        """Test that an unknown operation is invalid input."""
        result = call(registry, "text_processor", text="x", operations=["shout"])
        assert result.error.startswith("Invalid parameters:")


def test_default_registry_has_all_tools():
    """Test that the default registry carries every example tool."""
    assert default_registry().available_tools == ["calculator", "get_weather", "text_processor"]
