"""Numeric coercion used by sum().

Conversion table (anything not listed raises NotNumeric):

    None                          -> 0.0
    bool, numpy.bool_             -> 1.0 / 0.0
    numbers.Real, Decimal         -> float(value), NaN rejected,
                                     past float range -> +/-inf
    str, stripped of whitespace:
        ""                        -> 0.0
        decimal / exponent form   -> float("12"), float("-.5"), float("1e3")
        0x / 0o / 0b prefix       -> int(digits, radix)
        "Infinity", "+Infinity",
        "-Infinity"               -> +/-inf

Strings Python's float() would take but the table does not list
("nan", "inf", "1_000", non-ASCII digits) are rejected.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any

import numpy as np

from array_utils.config import INFINITY_KEYS, RADIX_PREFIXES
from array_utils.errors import NotNumeric


DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)

RADIX_PATTERN = re.compile(
    r"0(?P<prefix>[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)",
    re.ASCII,
)


def to_number(value: Any) -> float:
    """Coerce a single element to a float following the table above."""
    if value is None:
        return 0.0

    if isinstance(value, (bool, np.bool_)):
        return 1.0 if value else 0.0

    if isinstance(value, (numbers.Real, Decimal)):
        try:
            result = float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except ValueError as exc:
            raise NotNumeric("cannot convert value to float") from exc
        if math.isnan(result):
            raise NotNumeric("NaN is not a number")
        return result

    if isinstance(value, str):
        return parse_numeric_string(value)

    raise NotNumeric(f"unsupported type {type(value).__name__}")


def parse_numeric_string(text: str) -> float:
    """Parse a numeric string; whitespace-only strings count as zero."""
    stripped = text.strip()

    if not stripped:
        return 0.0

    if stripped in INFINITY_KEYS:
        return INFINITY_KEYS[stripped]

    if DECIMAL_PATTERN.fullmatch(stripped):
        return float(stripped)

    match = RADIX_PATTERN.fullmatch(stripped)
    if match:
        prefix = stripped[:2].lower()
        digits = match.group("prefix")[1:]
        try:
            return float(int(digits, RADIX_PREFIXES[prefix]))
        except OverflowError:
            return math.inf

    raise NotNumeric(f"{text!r} is not a numeric string")
