"""Exception types raised by the array utilities.

All public errors subclass ``TypeError`` so callers that only care about
"bad input" can catch a single builtin.
"""

from __future__ import annotations

import json
import reprlib
from typing import Any


class ArrayUtilsError(TypeError):
    """Base class for every error raised at the public function boundary."""


class InvalidArgument(ArrayUtilsError):
    """The top-level input is not a sequence."""

    def __init__(self, operation: str, argument: Any):
        self.operation = operation
        self.argument = argument
        super().__init__(
            f"{operation} expects a sequence, got {type(argument).__name__}"
        )


class InvalidElement(ArrayUtilsError):
    """An element handed to sum() cannot be coerced to a number."""

    def __init__(self, index: int, value: Any):
        self.index = index
        self.value = value
        self.serialized = serialize(value)
        super().__init__(
            f"sum: element at index {index} is not numeric: {self.serialized}"
        )


class NotNumeric(ValueError):
    """Raised by coercion.to_number; sum() re-raises it as InvalidElement."""


def serialize(value: Any) -> str:
    """Render a value for an error message, JSON first and repr as fallback.

    Values nested too deeply for either fall back to reprlib, which caps
    the depth it descends.
    """
    try:
        return json.dumps(value)
    except (TypeError, ValueError, RecursionError):
        pass
    try:
        return repr(value)
    except (RecursionError, ValueError):
        pass
    try:
        return reprlib.repr(value)
    except ValueError:
        # ints past the str() digit limit
        return object.__repr__(value)
