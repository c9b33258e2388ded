"""Key derivation for count() and find_duplicates().

count() keys every element by its canonical string form:

    str                   -> unchanged
    None                  -> "null"
    bool, numpy.bool_     -> "true" / "false"
    numbers.Integral      -> str(int(value)) below 1e21, else as numbers.Real
    numbers.Real, Decimal -> "NaN", "Infinity", "-Infinity", integer digits
                             for integral values below 1e21, repr(float) otherwise;
                             values past float range -> "Infinity" / "-Infinity"
    own __str__           -> str(value)
    anything else         -> "[object]"

find_duplicates() keys by identity_key(), which keeps Python's native
mapping-key equality except where it would disagree with the string form.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Hashable
from decimal import Decimal
from typing import Any

import numpy as np

from array_utils.config import (
    FALSE_KEY,
    MAX_INTEGRAL_KEY,
    NAN_KEY,
    NULL_KEY,
    OBJECT_PLACEHOLDER,
    TRUE_KEY,
)


def to_key(value: Any) -> str:
    """Return the canonical string form of a value."""
    if isinstance(value, str):
        return value

    if value is None:
        return NULL_KEY

    if isinstance(value, (bool, np.bool_)):
        return TRUE_KEY if value else FALSE_KEY

    if isinstance(value, numbers.Integral) and abs(value) < MAX_INTEGRAL_KEY:
        return str(int(value))

    if isinstance(value, Decimal) and value.is_nan():
        return NAN_KEY

    if isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
        return _float_key(number)

    # object.__str__ embeds the memory address, so instances without their
    # own __str__ collapse to a single placeholder.
    if type(value).__str__ is object.__str__:
        return OBJECT_PLACEHOLDER

    return str(value)


def _float_key(number: float) -> str:
    if math.isnan(number):
        return NAN_KEY
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < MAX_INTEGRAL_KEY:
        return str(int(number))
    return repr(number)


class _Identity:
    """Hashable stand-in for an unhashable value, equal only to itself."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __hash__(self) -> int:
        return id(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Identity) and other.value is self.value


_NAN = object()
_BOOL = object()


def identity_key(value: Any) -> Hashable:
    """Return the tally key find_duplicates() uses for a value.

    Primitives key by value, so 1 and 1.0 collide. Booleans are tagged
    so True is not 1. Unhashable values such as lists and dicts key by
    object identity. Float and Decimal NaNs all share one key.
    """
    if isinstance(value, (bool, np.bool_)):
        return (_BOOL, bool(value))

    if isinstance(value, (float, np.floating)) and math.isnan(value):
        return _NAN

    if isinstance(value, Decimal) and value.is_nan():
        return _NAN

    if isinstance(value, Hashable):
        try:
            hash(value)
        except TypeError:
            # tuples holding lists pass the Hashable check but cannot hash
            return _Identity(value)
        return value

    return _Identity(value)
