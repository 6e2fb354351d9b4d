"""
Demo Operations

The four demonstration operations and the tool descriptors that expose them.

This module provides:
- greet: welcome message for a name
- addNumbers: 32-bit signed addition with wraparound
- getCurrentTime: local wall-clock time in a readable format
- reverseString: the text reversed
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .config import GREETING_TEMPLATE, INT32_MAX, INT32_MIN, TIME_FORMAT
from .tools import ParamType, ToolDescriptor, ToolParameter

Clock = Callable[[], datetime]

_INT32_SPAN = INT32_MAX - INT32_MIN + 1


def wrap_int32(value: int) -> int:
    """Fold an arbitrary integer into the signed 32-bit range."""
    return (value - INT32_MIN) % _INT32_SPAN + INT32_MIN


def format_time(moment: datetime) -> str:
    """Render e.g. 'Monday, January 15, 2024 at 2:30:00 PM'."""
    return TIME_FORMAT.format(
        weekday=moment.strftime("%A"),
        month=moment.strftime("%B"),
        day=moment.day,
        year=f"{moment.year:04d}",
        hour=moment.hour % 12 or 12,
        minute=moment.minute,
        second=moment.second,
        meridiem="AM" if moment.hour < 12 else "PM",
    )


class DemoTools:
    """
    Stateless operation set.

    The clock is the only collaborator; tests pass a fixed one.
    """

    def __init__(self, clock: Clock = datetime.now) -> None:
        self._clock = clock

    def greet(self, name: str) -> str:
        return GREETING_TEMPLATE.format(name=name)

    def add_numbers(self, a: int, b: int) -> int:
        return wrap_int32(a + b)

    def get_current_time(self) -> str:
        return format_time(self._clock())

    def reverse_string(self, text: str) -> str:
        return text[::-1]


def demo_descriptors(tools: DemoTools) -> list[ToolDescriptor]:
    """Describe each DemoTools operation under its wire name."""
    return [
        ToolDescriptor(
            name="greet",
            description="Greets a person by name with a welcome message",
            parameters=(
                ToolParameter("name", ParamType.STRING, "The name of the person to greet"),
            ),
            handler=tools.greet,
        ),
        ToolDescriptor(
            name="addNumbers",
            description="Adds two numbers together and returns the sum",
            parameters=(
                ToolParameter("a", ParamType.INTEGER, "First number to add"),
                ToolParameter("b", ParamType.INTEGER, "Second number to add"),
            ),
            handler=tools.add_numbers,
        ),
        ToolDescriptor(
            name="getCurrentTime",
            description="Returns the current server time in a readable format",
            handler=tools.get_current_time,
        ),
        ToolDescriptor(
            name="reverseString",
            description="Reverses the given text string",
            parameters=(
                ToolParameter("text", ParamType.STRING, "The text to reverse"),
            ),
            handler=tools.reverse_string,
        ),
    ]
